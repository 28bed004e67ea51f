"""
Badge session - one editing session from load to the last autosave.
NO UI DEPENDENCIES.

Composes the frame store, the edit controller and a persistence bridge.
Every committed edit re-encodes the whole animation and hands the text to
the bridge, but only after the initial load attempt has finished; until
then the session is not ready and nothing is saved, so the default blank
frame can never overwrite a saved animation that is still loading.
"""
import logging
from pathlib import Path
from typing import Optional

from .codec import encode, decode, DecodedConfig
from .editor import EditController, EditSession, ChangeEvent
from .frames import FrameStore
from .persistence import PersistenceBridge
from .constants import DEFAULT_PADDING, DEFAULT_SPEED, EXPORT_BASENAME, EXPORT_SUFFIX

logger = logging.getLogger(__name__)


class BadgeSession:
    """
    The editor's model side.

    Usage:
        session = BadgeSession(FileStorage(path))
        session.start()                      # load saved animation, then autosave
        session.controller.pointer_down(0, 1, 1)
        session.export(Path("."))            # ./badge.toml
    """

    def __init__(
        self,
        storage: PersistenceBridge,
        default_padding: int = DEFAULT_PADDING,
        default_speed: int = DEFAULT_SPEED,
        export_basename: str = EXPORT_BASENAME,
    ):
        self.storage = storage
        self.default_padding = default_padding
        self.export_basename = export_basename

        self.store = FrameStore(padding=default_padding, speed=default_speed)
        self.edit = EditSession()
        self.controller = EditController(self.store, self.edit)
        self.controller.subscribe(self._on_change)

        self.last_import: Optional[Path] = None

    @classmethod
    def from_settings(cls, storage: PersistenceBridge, settings) -> 'BadgeSession':
        return cls(
            storage,
            default_padding=settings.default_padding,
            default_speed=settings.default_speed,
            export_basename=settings.export_basename,
        )

    @property
    def ready(self) -> bool:
        return self.edit.ready

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self):
        """
        Load the saved animation (if any), open the ready gate and save.
        May only be called once.
        """
        if self.edit.ready:
            raise RuntimeError("Session already started")

        text = self.storage.load()
        if text:
            decoded = decode(text, fallback_padding=self.default_padding)
            if self._apply(decoded):
                logger.info(
                    f"Loaded saved animation: {len(self.store)} frames, "
                    f"padding {self.store.padding}, speed {self.store.speed}"
                )
            else:
                logger.warning("Saved configuration held no frames, starting blank")

        self.edit.ready = True
        self.persist()

    def _on_change(self, event: ChangeEvent):
        self.persist()

    def persist(self) -> bool:
        """
        Encode the store and hand it to the bridge.
        Returns False (and saves nothing) before start() has finished loading.
        """
        if not self.edit.ready:
            return False
        self.storage.save(self.config_text())
        return True

    def config_text(self) -> str:
        """The current animation as configuration text."""
        return encode(self.store.frames, self.store.padding, self.store.speed)

    # =========================================================================
    # IMPORT / EXPORT
    # =========================================================================

    def export(self, directory: Path) -> Path:
        """Write the configuration to <directory>/badge.toml and return the path."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{self.export_basename}{EXPORT_SUFFIX}"
        path.write_text(self.config_text(), encoding="utf-8")
        logger.info(f"Exported {len(self.store)} frames to {path}")
        return path

    def import_text(self, text: str) -> bool:
        """
        Replace the animation with a decoded document.

        The current padding is the fallback for documents without one.
        Returns False and keeps the current animation if no frames decode.
        """
        decoded = decode(text, fallback_padding=self.store.padding)
        return self._apply(decoded)

    def import_file(self, path: Path) -> bool:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not import {path}: {e}")
            return False

        self.last_import = path
        if not self.import_text(text):
            logger.warning(f"No frames found in {path}")
            return False
        logger.info(f"Imported {len(self.store)} frames from {path}")
        return True

    def _apply(self, decoded: DecodedConfig) -> bool:
        if decoded.is_empty():
            return False
        self.controller.replace(decoded.frames, decoded.padding, decoded.speed)
        return True
