"""
Frame store - the ordered animation frames plus playback settings.
NO UI DEPENDENCIES.
"""
import logging
from typing import Iterable, List, Optional

from .grid import PixelGrid
from .constants import (
    DEFAULT_PADDING, DEFAULT_SPEED, MIN_SPEED, MAX_SPEED,
)

logger = logging.getLogger(__name__)


def _check_padding(padding: int) -> int:
    if padding < 0:
        raise ValueError(f"Padding must not be negative, got {padding}")
    return padding


class FrameStore:
    """
    Owns the animation: a sequence of 44x11 frames, the padding columns
    laid out after each frame and the playback speed.

    Frames have no identity beyond their position, so removing or
    inserting a frame renumbers everything after it.

    Usage:
        store = FrameStore()
        store.set_cell(0, 3, 2, True)
        store.add_frame()          # copies frame 0
        store.make_cycle()
    """

    def __init__(
        self,
        frames: Optional[Iterable[PixelGrid]] = None,
        padding: int = DEFAULT_PADDING,
        speed: int = DEFAULT_SPEED,
    ):
        if frames is None:
            self.frames: List[PixelGrid] = [PixelGrid()]
        else:
            self.frames = [frame.copy() for frame in frames]
        self.padding = _check_padding(padding)
        self.speed = speed

    def __len__(self) -> int:
        return len(self.frames)

    def has_frame(self, index: int) -> bool:
        return 0 <= index < len(self.frames)

    # =========================================================================
    # CELL COMMANDS
    # =========================================================================

    def get_cell(self, frame_index: int, x: int, y: int) -> bool:
        """Cell value, or False for any out-of-range index."""
        if not self.has_frame(frame_index):
            return False
        return self.frames[frame_index].get(x, y)

    def set_cell(self, frame_index: int, x: int, y: int, value: bool) -> bool:
        """
        Set one cell.
        Returns False (no-op) if the frame or coordinates are out of range.
        """
        if not self.has_frame(frame_index):
            return False
        return self.frames[frame_index].set(x, y, value)

    def toggle_cell(self, frame_index: int, x: int, y: int) -> bool:
        if not self.has_frame(frame_index):
            return False
        return self.frames[frame_index].toggle(x, y)

    # =========================================================================
    # FRAME COMMANDS
    # =========================================================================

    def invert_frame(self, index: int) -> bool:
        """Flip every cell in one frame."""
        if not self.has_frame(index):
            return False
        self.frames[index].invert()
        return True

    def clear_frame(self, index: int) -> bool:
        """Turn every cell in one frame off."""
        if not self.has_frame(index):
            return False
        self.frames[index].clear()
        return True

    def add_frame(self, copy_last: bool = True) -> int:
        """
        Append a frame and return its index.

        By default the new frame copies the current last frame so a
        continuous animation can be extended step by step.
        """
        if copy_last and self.frames:
            frame = self.frames[-1].copy()
        else:
            frame = PixelGrid()
        self.frames.append(frame)
        return len(self.frames) - 1

    def remove_frame(self, index: int) -> bool:
        """
        Delete one frame.
        The last remaining frame cannot be removed.
        """
        if not self.has_frame(index):
            return False
        if len(self.frames) == 1:
            logger.warning("Refusing to remove the only frame")
            return False
        del self.frames[index]
        return True

    def clone_frame(self, index: int) -> bool:
        """Insert a duplicate of a frame immediately after it."""
        if not self.has_frame(index):
            return False
        self.frames.insert(index + 1, self.frames[index].copy())
        return True

    def make_cycle(self):
        """Append the frames in reverse: [A, B, C] -> [A, B, C, C, B, A]."""
        self.frames.extend([frame.copy() for frame in reversed(self.frames)])

    # =========================================================================
    # SETTINGS
    # =========================================================================

    def set_padding(self, value: int) -> bool:
        """
        Set padding columns.
        Returns False and keeps the old value if negative.
        """
        if value < 0:
            return False
        self.padding = value
        return True

    def set_speed(self, value: int) -> int:
        """Set speed, clamped to 1..7. Returns the stored value."""
        self.speed = max(MIN_SPEED, min(MAX_SPEED, value))
        return self.speed

    # =========================================================================
    # WHOLE-STORE
    # =========================================================================

    def replace(self, frames: Iterable[PixelGrid], padding: int, speed: int):
        """Swap in a complete new state (frames, padding and speed together)."""
        padding = _check_padding(padding)
        self.frames = [frame.copy() for frame in frames]
        self.padding = padding
        self.speed = speed

    def snapshot(self) -> List[PixelGrid]:
        """Independent copies of all frames."""
        return [frame.copy() for frame in self.frames]
