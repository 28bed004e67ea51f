#!/usr/bin/env python3
"""
Badge Designer - Main Entry Point

Draw multi-frame animations for 44x11 LED name badges and export them as
badgemagic-rs configuration files. Every edit is autosaved.

Usage:
    badge-designer [IMPORT_FILE] [--storage PATH] [--export-dir DIR]
    badge-designer IMPORT_FILE --dump

Controls:
    Mouse: Click a cell to flip it, drag to keep drawing (or erasing)
    Arrow keys: Move cursor
    Space: Flip cell under cursor
    Shift+Tab/Tab, PageUp/PageDown: Previous/next frame
    A: Add frame (copy of last)     N: Add blank frame
    C: Clone frame                  X/Delete: Remove frame
    I: Invert frame                 Backspace: Clear frame
    Y: Make cycle (append frames in reverse)
    [ ]: Padding -/+                - =: Speed -/+
    E: Export badge.toml            O: Re-import IMPORT_FILE
    Escape: Quit
"""
import argparse
import logging
import sys
from pathlib import Path

from badge_designer.animation.persistence import FileStorage
from badge_designer.animation.session import BadgeSession
from badge_designer.config import get_settings

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="badge-designer",
        description="Design LED badge animations for badgemagic-rs.",
    )
    parser.add_argument("import_file", nargs="?", type=Path,
                        help="Configuration file to import on start")
    parser.add_argument("--storage", type=Path, default=None,
                        help="Autosave file (default from settings)")
    parser.add_argument("--export-dir", type=Path, default=None,
                        help="Directory for exported badge.toml")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Logging level (default from settings)")
    parser.add_argument("--dump", action="store_true",
                        help="Print the configuration and exit without opening a window")
    return parser.parse_args(argv)


def create_session(args: argparse.Namespace, settings) -> BadgeSession:
    """Build and start the session, applying the import file if given."""
    storage = FileStorage(args.storage or settings.storage_path)
    session = BadgeSession.from_settings(storage, settings)
    session.start()

    if args.import_file is not None:
        session.import_file(args.import_file)
    return session


def run_editor(session: BadgeSession, export_dir: Path, visible_frames: int):
    """Open the editor window and run until Escape."""
    import pygame
    import pyunicodegame

    from badge_designer.ui.layout import FrameLayout, SCREEN_WIDTH, DEFAULT_CELL_SIZE
    from badge_designer.ui.renderer import Renderer
    from badge_designer.ui.input_handler import InputHandler

    layout = FrameLayout(visible_frames=visible_frames)

    pyunicodegame.init(
        "Badge Designer",
        width=SCREEN_WIDTH,
        height=layout.screen_height,
        font_name="unifont",
        bg=(10, 10, 15, 255)
    )
    layout.cell_width, layout.cell_height = pyunicodegame._font_dimensions.get(
        'unifont', DEFAULT_CELL_SIZE
    )

    renderer = Renderer(session, layout)
    renderer.init_windows()
    input_handler = InputHandler(session, layout, export_dir=export_dir)

    def render():
        renderer.render(input_handler.status)

    def on_key(key: int):
        if input_handler.handle_key(key):
            pyunicodegame.quit()

    def on_event(event) -> bool:
        # Consume Escape to quit through on_key
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            on_key(event.key)
            return True
        return input_handler.handle_event(event)

    logger.info("Starting editor loop")
    pyunicodegame.run(render=render, on_key=on_key, on_event=on_event)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    session = create_session(args, settings)

    if args.dump:
        print(session.config_text())
        return 0

    run_editor(session, args.export_dir or settings.export_dir, settings.visible_frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
