"""
Tests for persistence bridges.
"""
from badge_designer.animation.persistence import (
    PersistenceBridge, FileStorage, MemoryStorage,
)


class TestFileStorage:
    """Tests for FileStorage."""

    def test_missing_file_loads_none(self, tmp_path):
        """A missing file means nothing saved."""
        assert FileStorage(tmp_path / "state.toml").load() is None

    def test_empty_file_loads_none(self, tmp_path):
        """An empty file means nothing saved."""
        path = tmp_path / "state.toml"
        path.write_text("", encoding="utf-8")
        assert FileStorage(path).load() is None

    def test_save_and_load(self, tmp_path):
        """Saved text loads back unchanged, creating parent directories."""
        storage = FileStorage(tmp_path / "nested" / "state.toml")
        storage.save('[[message]]\nspeed = 5\n')
        assert storage.load() == '[[message]]\nspeed = 5\n'

    def test_unreadable_file_loads_none(self, tmp_path):
        """A path that cannot be read as text loads as None."""
        # A directory cannot be read as a file
        assert FileStorage(tmp_path).load() is None

    def test_is_bridge(self, tmp_path):
        """FileStorage satisfies the bridge protocol."""
        assert isinstance(FileStorage(tmp_path / "x"), PersistenceBridge)


class TestMemoryStorage:
    """Tests for MemoryStorage."""

    def test_initial_text(self):
        """Initial text is returned by load."""
        assert MemoryStorage("abc").load() == "abc"
        assert MemoryStorage().load() is None
        assert MemoryStorage("").load() is None

    def test_save_counts(self):
        """Each save replaces the text and is counted."""
        storage = MemoryStorage()
        storage.save("one")
        storage.save("two")
        assert storage.load() == "two"
        assert storage.saves == 2
        assert isinstance(storage, PersistenceBridge)
