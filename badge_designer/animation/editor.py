"""
Edit controller - turns pointer and keyboard input into frame store edits.
NO UI DEPENDENCIES.

The controller is a two-state machine:

    IDLE --pointer_down--> DRAGGING(paint_value) --pointer_up--> IDLE

While dragging, every cell the pointer enters is set to the paint value
chosen when the drag started, so a stroke either draws or erases.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

from .frames import FrameStore
from .grid import Direction, PixelGrid
from .constants import GRID_WIDTH, GRID_HEIGHT

logger = logging.getLogger(__name__)


class EditorState(Enum):
    """Pointer state of the editing surface."""
    IDLE = auto()
    DRAGGING = auto()


class ChangeKind(Enum):
    """What a committed edit touched."""
    CELLS = auto()      # one or more cells of a single frame
    FRAMES = auto()     # frames added, removed or reordered
    SETTINGS = auto()   # padding or speed
    REPLACED = auto()   # whole store swapped by a load or import


@dataclass
class ChangeEvent:
    """A committed change to the frame store (for persistence to react to)."""
    kind: ChangeKind
    frame_index: Optional[int] = None


@dataclass
class EditSession:
    """
    Transient per-session editing state. Never persisted.

    Dragging is global to the whole editing surface, not per frame.
    """
    focused_frame: int = 0
    focused_x: int = 0
    focused_y: int = 0
    drag_active: bool = False
    paint_value: bool = True
    ready: bool = False

    @property
    def state(self) -> EditorState:
        return EditorState.DRAGGING if self.drag_active else EditorState.IDLE


class EditController:
    """
    Applies input events to a FrameStore and notifies subscribers after
    every committed mutation.

    Usage:
        controller = EditController(store, EditSession())
        controller.subscribe(lambda event: print(event.kind))
        controller.pointer_down(0, 3, 2)
        controller.pointer_enter(0, 4, 2)
        controller.pointer_up()
    """

    def __init__(self, store: FrameStore, session: Optional[EditSession] = None):
        self.store = store
        self.session = session if session is not None else EditSession()
        self._subscribers: List[Callable[[ChangeEvent], None]] = []

    def subscribe(self, callback: Callable[[ChangeEvent], None]):
        """Register a callback run after each committed change."""
        self._subscribers.append(callback)

    def notify(self, kind: ChangeKind, frame_index: Optional[int] = None):
        event = ChangeEvent(kind, frame_index)
        for callback in self._subscribers:
            callback(event)

    # =========================================================================
    # POINTER
    # =========================================================================

    def pointer_down(self, frame_index: int, x: int, y: int):
        """Start a stroke: focus the cell, flip it and remember the new value."""
        if self.session.drag_active:
            return
        if not self.store.has_frame(frame_index) or not PixelGrid.in_bounds(x, y):
            return

        self._set_focus(frame_index, x, y)
        paint_value = not self.store.get_cell(frame_index, x, y)
        self.session.paint_value = paint_value
        self.session.drag_active = True
        self.store.set_cell(frame_index, x, y, paint_value)
        self.notify(ChangeKind.CELLS, frame_index)

    def pointer_enter(self, frame_index: int, x: int, y: int):
        """Continue a stroke into another cell, possibly of another frame."""
        if not self.session.drag_active:
            return
        if self.store.set_cell(frame_index, x, y, self.session.paint_value):
            self.notify(ChangeKind.CELLS, frame_index)

    def pointer_up(self):
        """End any stroke, wherever the pointer is."""
        self.session.drag_active = False

    # =========================================================================
    # KEYBOARD
    # =========================================================================

    def move_focus(self, direction: Direction):
        """Move the focus one cell, stopping at the matrix edges."""
        dx, dy = direction.delta()
        self.session.focused_x = max(0, min(GRID_WIDTH - 1, self.session.focused_x + dx))
        self.session.focused_y = max(0, min(GRID_HEIGHT - 1, self.session.focused_y + dy))

    def toggle_focused(self):
        """Flip the focused cell of the focused frame."""
        s = self.session
        if self.store.toggle_cell(s.focused_frame, s.focused_x, s.focused_y):
            self.notify(ChangeKind.CELLS, s.focused_frame)

    def focus_frame(self, delta: int):
        """Move focus to a neighbouring frame, keeping the cell position."""
        self.session.focused_frame = self._clamp_frame(self.session.focused_frame + delta)

    def _set_focus(self, frame_index: int, x: int, y: int):
        self.session.focused_frame = frame_index
        self.session.focused_x = x
        self.session.focused_y = y

    def _clamp_frame(self, index: int) -> int:
        return max(0, min(len(self.store) - 1, index))

    # =========================================================================
    # FRAME COMMANDS
    # =========================================================================

    def add_frame(self, copy_last: bool = True) -> int:
        index = self.store.add_frame(copy_last=copy_last)
        logger.debug(f"Added frame {index} (copy_last={copy_last})")
        self.notify(ChangeKind.FRAMES, index)
        return index

    def remove_frame(self, index: int) -> bool:
        if not self.store.remove_frame(index):
            return False
        self.session.focused_frame = self._clamp_frame(self.session.focused_frame)
        logger.debug(f"Removed frame {index}")
        self.notify(ChangeKind.FRAMES, index)
        return True

    def clone_frame(self, index: int) -> bool:
        if not self.store.clone_frame(index):
            return False
        logger.debug(f"Cloned frame {index}")
        self.notify(ChangeKind.FRAMES, index + 1)
        return True

    def invert_frame(self, index: int) -> bool:
        if not self.store.invert_frame(index):
            return False
        self.notify(ChangeKind.CELLS, index)
        return True

    def clear_frame(self, index: int) -> bool:
        if not self.store.clear_frame(index):
            return False
        self.notify(ChangeKind.CELLS, index)
        return True

    def make_cycle(self):
        self.store.make_cycle()
        logger.debug(f"Made cycle, now {len(self.store)} frames")
        self.notify(ChangeKind.FRAMES)

    # =========================================================================
    # SETTINGS
    # =========================================================================

    def set_padding(self, value: int) -> bool:
        if not self.store.set_padding(value):
            logger.warning(f"Ignoring padding {value}")
            return False
        self.notify(ChangeKind.SETTINGS)
        return True

    def set_speed(self, value: int) -> int:
        speed = self.store.set_speed(value)
        self.notify(ChangeKind.SETTINGS)
        return speed

    def replace(self, frames: List[PixelGrid], padding: int, speed: int):
        """Swap in a loaded animation and reset focus onto it."""
        self.store.replace(frames, padding, speed)
        self.session.focused_frame = self._clamp_frame(self.session.focused_frame)
        self.notify(ChangeKind.REPLACED)
