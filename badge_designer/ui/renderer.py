"""
Renderer - Reads the frame store and renders it to pyunicodegame windows.
This is a THIN ADAPTER - no editing logic here.
"""
import pyunicodegame

from badge_designer.animation.constants import GRID_WIDTH
from badge_designer.animation.session import BadgeSession
from badge_designer.ui.layout import (
    FrameLayout, MARGIN_LEFT, SCREEN_WIDTH, SLOT_HEIGHT, STATUS_HEIGHT,
)

# Colors
COLOR_LED_ON = (255, 170, 60)
COLOR_LED_OFF = (50, 40, 35)
COLOR_CURSOR = (100, 255, 100)
COLOR_LABEL = (150, 150, 170)
COLOR_LABEL_FOCUSED = (255, 255, 255)
COLOR_STATUS = (200, 200, 220)

CHAR_ON = '█'
CHAR_OFF = '·'


class Renderer:
    """
    Renders the animation frames, the keyboard focus and a status line.

    This class reads from the session but never modifies it.
    """

    def __init__(self, session: BadgeSession, layout: FrameLayout):
        self.session = session
        self.layout = layout

        # Windows will be created in init_windows()
        self.frames_window = None
        self.status_window = None

    def init_windows(self):
        """Initialize pyunicodegame windows."""
        self.frames_window = pyunicodegame.create_window(
            "frames", 0, 0, SCREEN_WIDTH, self.layout.frames_height,
            z_index=0, font_name="unifont", bg=(15, 15, 20, 255)
        )
        self.status_window = pyunicodegame.create_window(
            "status", 0, self.layout.frames_height, SCREEN_WIDTH, STATUS_HEIGHT,
            z_index=10, font_name="unifont", bg=(25, 25, 35, 255)
        )

    def render(self, status: str = ""):
        """Render all visible frames and the status line."""
        store = self.session.store
        edit = self.session.edit

        # Every slot is redrawn (overwrites previous frame)
        visible = self.layout.visible_range(len(store))
        for slot in range(self.layout.visible_frames):
            frame_index = self.layout.scroll + slot
            if frame_index in visible:
                self._render_label(frame_index, frame_index == edit.focused_frame)
                self._render_frame(frame_index)
            else:
                self._blank_slot(slot)

        # Draw focus cursor
        origin = self.layout.grid_origin(edit.focused_frame)
        if origin is not None:
            col, row = origin
            lit = store.get_cell(edit.focused_frame, edit.focused_x, edit.focused_y)
            self.frames_window.put(
                col + edit.focused_x, row + edit.focused_y,
                CHAR_ON if lit else '▢', COLOR_CURSOR
            )

        self._render_status(status)

    def _render_label(self, frame_index: int, focused: bool):
        row = self.layout.slot_top(frame_index)
        label = f"Frame {frame_index + 1}/{len(self.session.store)}"
        color = COLOR_LABEL_FOCUSED if focused else COLOR_LABEL
        self.frames_window.put_string(MARGIN_LEFT, row, label.ljust(GRID_WIDTH), color)

    def _render_frame(self, frame_index: int):
        col, row = self.layout.grid_origin(frame_index)
        frame = self.session.store.frames[frame_index]
        for y, cells in enumerate(frame.rows()):
            for x, on in enumerate(cells):
                if on:
                    self.frames_window.put(col + x, row + y, CHAR_ON, COLOR_LED_ON)
                else:
                    self.frames_window.put(col + x, row + y, CHAR_OFF, COLOR_LED_OFF)

    def _blank_slot(self, slot: int):
        blank = ' ' * SCREEN_WIDTH
        for row in range(slot * SLOT_HEIGHT, (slot + 1) * SLOT_HEIGHT):
            self.frames_window.put_string(0, row, blank, COLOR_LABEL)

    def _render_status(self, status: str):
        store = self.session.store
        line = f"padding {store.padding}  speed {store.speed}  frames {len(store)}"
        self.status_window.put_string(0, 0, line.ljust(SCREEN_WIDTH), COLOR_STATUS)
        self.status_window.put_string(0, 1, status[:SCREEN_WIDTH].ljust(SCREEN_WIDTH), COLOR_STATUS)
