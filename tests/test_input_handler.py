"""
Tests for the input handler (pygame events to edit commands).

Uses pygame constants and Event objects only; no display is opened.
"""
import pygame
import pytest

from badge_designer.animation.grid import PixelGrid
from badge_designer.ui.input_handler import InputHandler
from badge_designer.ui.layout import FrameLayout

from conftest import make_grid
from test_layout import pixel_for


@pytest.fixture
def handler(session, tmp_path):
    return InputHandler(session, FrameLayout(visible_frames=3), export_dir=tmp_path)


def mouse(event_type, pos, button=1):
    if event_type == pygame.MOUSEMOTION:
        return pygame.event.Event(event_type, pos=pos, rel=(0, 0), buttons=(1, 0, 0))
    return pygame.event.Event(event_type, pos=pos, button=button)


class TestKeys:
    """Tests for keyboard commands."""

    def test_escape_quits(self, handler):
        """Escape asks to quit; other keys do not."""
        assert handler.handle_key(pygame.K_ESCAPE)
        assert not handler.handle_key(pygame.K_RIGHT)

    def test_arrows_and_space(self, handler, session):
        """Arrows move focus and space flips the focused cell."""
        handler.handle_key(pygame.K_RIGHT)
        handler.handle_key(pygame.K_RIGHT)
        handler.handle_key(pygame.K_DOWN)
        handler.handle_key(pygame.K_UP)
        handler.handle_key(pygame.K_UP)
        handler.handle_key(pygame.K_SPACE)
        assert session.store.frames[0] == make_grid((2, 0))

    def test_add_and_navigate_frames(self, handler, session):
        """A adds a copy and focuses it; PageUp goes back."""
        handler.handle_key(pygame.K_SPACE)
        handler.handle_key(pygame.K_a)
        assert len(session.store) == 2
        assert session.store.frames[1] == make_grid((0, 0))
        assert session.edit.focused_frame == 1

        handler.handle_key(pygame.K_PAGEUP)
        assert session.edit.focused_frame == 0

    def test_tab_cycles_frames(self, handler, session):
        """Tab focuses the next frame, Shift+Tab the previous one."""
        handler.handle_key(pygame.K_a)
        handler.handle_key(pygame.K_a)
        handler.handle_key(pygame.K_PAGEUP)
        handler.handle_key(pygame.K_PAGEUP)
        assert session.edit.focused_frame == 0

        tab = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_TAB, mod=pygame.KMOD_NONE)
        shift_tab = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_TAB, mod=pygame.KMOD_LSHIFT)

        assert handler.handle_event(tab)
        assert handler.handle_event(tab)
        assert session.edit.focused_frame == 2
        # Clamped at the last frame
        handler.handle_event(tab)
        assert session.edit.focused_frame == 2

        assert handler.handle_event(shift_tab)
        assert session.edit.focused_frame == 1

    def test_tab_key_code(self, handler, session):
        """A bare Tab key code also moves to the next frame."""
        handler.handle_key(pygame.K_n)
        handler.handle_key(pygame.K_PAGEUP)
        handler.handle_key(pygame.K_TAB)
        assert session.edit.focused_frame == 1

    def test_blank_frame(self, handler, session):
        """N adds a blank frame."""
        handler.handle_key(pygame.K_SPACE)
        handler.handle_key(pygame.K_n)
        assert session.store.frames[1] == PixelGrid()

    def test_remove_only_frame(self, handler, session):
        """X on the only frame is refused with a status message."""
        handler.handle_key(pygame.K_x)
        assert len(session.store) == 1
        assert "only frame" in handler.status

    def test_clone_remove(self, handler, session):
        """C clones the focused frame; Delete removes it."""
        handler.handle_key(pygame.K_c)
        assert len(session.store) == 2
        assert session.edit.focused_frame == 1
        handler.handle_key(pygame.K_DELETE)
        assert len(session.store) == 1
        assert session.edit.focused_frame == 0

    def test_invert_clear_cycle(self, handler, session):
        """I inverts, Backspace clears, Y makes a cycle."""
        handler.handle_key(pygame.K_i)
        assert session.store.frames[0].count_on() == 44 * 11
        handler.handle_key(pygame.K_BACKSPACE)
        assert session.store.frames[0].count_on() == 0
        handler.handle_key(pygame.K_y)
        assert len(session.store) == 2

    def test_padding_and_speed(self, handler, session):
        """Brackets change padding, minus/equals change speed."""
        handler.handle_key(pygame.K_RIGHTBRACKET)
        handler.handle_key(pygame.K_RIGHTBRACKET)
        handler.handle_key(pygame.K_LEFTBRACKET)
        assert session.store.padding == 1
        handler.handle_key(pygame.K_LEFTBRACKET)
        handler.handle_key(pygame.K_LEFTBRACKET)
        assert session.store.padding == 0

        for _ in range(5):
            handler.handle_key(pygame.K_EQUALS)
        assert session.store.speed == 7
        handler.handle_key(pygame.K_MINUS)
        assert session.store.speed == 6

    def test_export(self, handler, tmp_path):
        """E exports badge.toml into the export directory."""
        handler.handle_key(pygame.K_e)
        assert (tmp_path / "badge.toml").exists()
        assert "Exported" in handler.status

    def test_reimport_without_file(self, handler):
        """O without an import file only reports it."""
        handler.handle_key(pygame.K_o)
        assert handler.status == "No import file given"

    def test_reimport(self, handler, session, tmp_path):
        """O re-reads the last imported file."""
        source = tmp_path / "anim.toml"
        source.write_text(session.config_text(), encoding="utf-8")
        session.import_file(source)

        handler.handle_key(pygame.K_SPACE)
        handler.handle_key(pygame.K_o)
        assert session.store.frames == [PixelGrid()]
        assert handler.status.startswith("Imported")

    def test_focus_scrolls_into_view(self, session, tmp_path):
        """Keyboard frame focus keeps the focused frame on screen."""
        layout = FrameLayout(visible_frames=1)
        handler = InputHandler(session, layout, export_dir=tmp_path)
        handler.handle_key(pygame.K_a)
        handler.handle_key(pygame.K_a)
        assert layout.scroll == 2


class TestMouse:
    """Tests for mouse dragging."""

    def test_drag_paints_row(self, handler, session):
        """Press, move across two cells, release: three cells on."""
        handler.handle_event(mouse(pygame.MOUSEBUTTONDOWN, pixel_for(0, 3, 2)))
        handler.handle_event(mouse(pygame.MOUSEMOTION, pixel_for(0, 4, 2)))
        # Moving inside the same cell does not repaint
        handler.handle_event(mouse(pygame.MOUSEMOTION, pixel_for(0, 4, 2)))
        handler.handle_event(mouse(pygame.MOUSEMOTION, pixel_for(0, 5, 2)))
        handler.handle_event(mouse(pygame.MOUSEBUTTONUP, pixel_for(0, 5, 2)))

        assert session.store.frames[0] == make_grid((3, 2), (4, 2), (5, 2))
        assert not session.edit.drag_active

    def test_motion_without_press(self, handler, session):
        """Moving without a pressed button paints nothing."""
        assert handler.handle_event(mouse(pygame.MOUSEMOTION, pixel_for(0, 4, 2)))
        assert session.store.frames[0].count_on() == 0

    def test_press_outside_matrix(self, handler, session):
        """A press on a margin does not start a drag."""
        handler.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (1, 1)))
        handler.handle_event(mouse(pygame.MOUSEMOTION, pixel_for(0, 4, 2)))
        assert session.store.frames[0].count_on() == 0

    def test_release_outside_ends_drag(self, handler, session):
        """Releasing anywhere ends the drag."""
        handler.handle_event(mouse(pygame.MOUSEBUTTONDOWN, pixel_for(0, 0, 0)))
        handler.handle_event(mouse(pygame.MOUSEBUTTONUP, (1, 1)))
        assert not session.edit.drag_active

    def test_right_button_ignored(self, handler, session):
        """Only the left button draws."""
        assert not handler.handle_event(mouse(pygame.MOUSEBUTTONDOWN, pixel_for(0, 0, 0), button=3))
        assert session.store.frames[0].count_on() == 0

    def test_other_events_not_consumed(self, handler):
        """Keyboard events are left for on_key."""
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
        assert not handler.handle_event(event)
