"""
Persistence bridge - where the saved configuration text lives.
NO UI DEPENDENCIES.

The session only knows the two-method protocol below; the text itself is
whatever the codec produced.
"""
import logging
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class PersistenceBridge(Protocol):
    """Supplies the saved configuration once and stores every new one."""

    def load(self) -> Optional[str]:
        """Previously saved configuration, or None."""
        ...

    def save(self, text: str) -> None:
        """Store the latest configuration."""
        ...


class FileStorage:
    """Keeps the configuration in a single UTF-8 text file."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def load(self) -> Optional[str]:
        """
        Read the saved configuration.
        Returns None if the file is missing, empty or unreadable.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"No saved configuration at {self.path}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read saved configuration {self.path}: {e}")
            return None
        return text or None

    def save(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")


class MemoryStorage:
    """Keeps the configuration in memory (headless runs and tests)."""

    def __init__(self, initial: Optional[str] = None):
        self.text = initial
        self.saves = 0

    def load(self) -> Optional[str]:
        return self.text or None

    def save(self, text: str) -> None:
        self.text = text
        self.saves += 1
