"""
Input Handler - Translates pygame key presses and mouse events to edit commands.
This is a THIN ADAPTER - no editing logic here.
"""
from pathlib import Path
from typing import Optional, Tuple

import pygame

from badge_designer.animation.grid import Direction
from badge_designer.animation.session import BadgeSession
from badge_designer.ui.layout import FrameLayout


ARROW_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class InputHandler:
    """
    Handles keyboard and mouse input and translates it to session commands.

    The input handler:
    - Maps pixels to matrix cells through the layout
    - Feeds pointer and key events to the edit controller
    - Triggers export and re-import
    - Keeps a one-line status message for the renderer
    """

    def __init__(self, session: BadgeSession, layout: FrameLayout, export_dir: Path = Path(".")):
        self.session = session
        self.controller = session.controller
        self.layout = layout
        self.export_dir = Path(export_dir)

        self.status = ""
        self._hover: Optional[Tuple[int, int, int]] = None

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the editor should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        store = self.session.store
        focused = self.session.edit.focused_frame

        # Cursor movement and drawing
        if key in ARROW_KEYS:
            self.controller.move_focus(ARROW_KEYS[key])
        elif key == pygame.K_SPACE:
            self.controller.toggle_focused()

        # Frame focus
        elif key == pygame.K_PAGEUP:
            self.controller.focus_frame(-1)
        elif key in (pygame.K_PAGEDOWN, pygame.K_TAB):
            self.controller.focus_frame(1)

        # Frame commands
        elif key == pygame.K_a:
            index = self.controller.add_frame(copy_last=True)
            self.controller.focus_frame(index - focused)
        elif key == pygame.K_n:
            index = self.controller.add_frame(copy_last=False)
            self.controller.focus_frame(index - focused)
        elif key == pygame.K_c:
            if self.controller.clone_frame(focused):
                self.controller.focus_frame(1)
        elif key in (pygame.K_x, pygame.K_DELETE):
            if not self.controller.remove_frame(focused):
                self.status = "Cannot remove the only frame"
        elif key == pygame.K_i:
            self.controller.invert_frame(focused)
        elif key == pygame.K_BACKSPACE:
            self.controller.clear_frame(focused)
        elif key == pygame.K_y:
            self.controller.make_cycle()
            self.status = f"Cycle: {len(store)} frames"

        # Settings
        elif key == pygame.K_LEFTBRACKET:
            self.controller.set_padding(store.padding - 1)
        elif key == pygame.K_RIGHTBRACKET:
            self.controller.set_padding(store.padding + 1)
        elif key == pygame.K_MINUS:
            self.controller.set_speed(store.speed - 1)
        elif key == pygame.K_EQUALS:
            self.controller.set_speed(store.speed + 1)

        # Files
        elif key == pygame.K_e:
            path = self.session.export(self.export_dir)
            self.status = f"Exported: {path}"
        elif key == pygame.K_o:
            self._reimport()

        self.layout.ensure_visible(self.session.edit.focused_frame, len(store))
        return False

    def _reimport(self):
        path = self.session.last_import
        if path is None:
            self.status = "No import file given"
        elif self.session.import_file(path):
            self.status = f"Imported: {path}"
        else:
            self.status = f"Import failed: {path}"

    def handle_event(self, event) -> bool:
        """
        Handle mouse events and Tab / Shift+Tab.
        Returns True if the event was consumed.
        """
        frame_count = len(self.session.store)

        if event.type == pygame.KEYDOWN and event.key == pygame.K_TAB:
            step = -1 if event.mod & pygame.KMOD_SHIFT else 1
            self.controller.focus_frame(step)
            self.layout.ensure_visible(self.session.edit.focused_frame, frame_count)
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            cell = self.layout.cell_at(*event.pos, frame_count)
            self._hover = cell
            if cell is not None:
                self.controller.pointer_down(*cell)
            return True

        if event.type == pygame.MOUSEMOTION:
            cell = self.layout.cell_at(*event.pos, frame_count)
            if cell != self._hover:
                self._hover = cell
                if cell is not None:
                    self.controller.pointer_enter(*cell)
            return True

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.controller.pointer_up()
            return True

        return False
