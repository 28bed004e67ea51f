"""
Screen layout - where each frame sits on screen and which cell a pixel hits.
Pure arithmetic, shared by the renderer and the input handler.

Frames are stacked vertically, each in a slot of:
    1 label row
    11 matrix rows
    1 spacer row
Only `visible_frames` slots fit on screen; the view scrolls to keep the
focused frame visible.
"""
from typing import Optional, Tuple

from badge_designer.animation.constants import GRID_WIDTH, GRID_HEIGHT

# Visual constants (in character cells)
MARGIN_LEFT = 2
LABEL_ROWS = 1
SPACER_ROWS = 1
SLOT_HEIGHT = LABEL_ROWS + GRID_HEIGHT + SPACER_ROWS
SCREEN_WIDTH = MARGIN_LEFT + GRID_WIDTH + 2
STATUS_HEIGHT = 2

# unifont glyph size in pixels
DEFAULT_CELL_SIZE = (8, 16)


class FrameLayout:
    """
    Maps frames to screen cells and screen pixels back to matrix cells.
    """

    def __init__(self, visible_frames: int = 3, cell_size: Tuple[int, int] = DEFAULT_CELL_SIZE):
        self.visible_frames = max(1, visible_frames)
        self.cell_width, self.cell_height = cell_size
        self.scroll = 0

    @property
    def frames_height(self) -> int:
        return self.visible_frames * SLOT_HEIGHT

    @property
    def screen_height(self) -> int:
        return self.frames_height + STATUS_HEIGHT

    def ensure_visible(self, frame_index: int, frame_count: int):
        """Scroll so that `frame_index` is on screen."""
        if frame_index < self.scroll:
            self.scroll = frame_index
        elif frame_index >= self.scroll + self.visible_frames:
            self.scroll = frame_index - self.visible_frames + 1
        max_scroll = max(0, frame_count - self.visible_frames)
        self.scroll = max(0, min(self.scroll, max_scroll))

    def visible_range(self, frame_count: int) -> range:
        return range(self.scroll, min(frame_count, self.scroll + self.visible_frames))

    def slot_top(self, frame_index: int) -> Optional[int]:
        """Screen row of a frame's label, or None if scrolled off."""
        slot = frame_index - self.scroll
        if not 0 <= slot < self.visible_frames:
            return None
        return slot * SLOT_HEIGHT

    def grid_origin(self, frame_index: int) -> Optional[Tuple[int, int]]:
        """Screen (col, row) of a frame's top-left matrix cell."""
        top = self.slot_top(frame_index)
        if top is None:
            return None
        return MARGIN_LEFT, top + LABEL_ROWS

    def cell_at(self, px: int, py: int, frame_count: int) -> Optional[Tuple[int, int, int]]:
        """
        Matrix cell under a screen pixel as (frame_index, x, y).
        Returns None over labels, margins, spacers or empty slots.
        """
        col = px // self.cell_width
        row = py // self.cell_height
        if px < 0 or py < 0 or row >= self.frames_height:
            return None

        slot, slot_row = divmod(row, SLOT_HEIGHT)
        frame_index = self.scroll + slot
        if frame_index >= frame_count:
            return None

        x = col - MARGIN_LEFT
        y = slot_row - LABEL_ROWS
        if not (0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT):
            return None
        return frame_index, x, y
