"""
Pytest fixtures for Badge Designer tests.
"""

import pytest

from badge_designer.animation.frames import FrameStore
from badge_designer.animation.editor import EditController, EditSession
from badge_designer.animation.grid import PixelGrid
from badge_designer.animation.persistence import MemoryStorage
from badge_designer.animation.session import BadgeSession


def make_grid(*cells) -> PixelGrid:
    """Grid with the given (x, y) cells turned on."""
    grid = PixelGrid()
    for x, y in cells:
        grid.set(x, y, True)
    return grid


@pytest.fixture
def store() -> FrameStore:
    """A fresh store: one blank frame, padding 0, speed 5."""
    return FrameStore()


@pytest.fixture
def controller(store) -> EditController:
    return EditController(store, EditSession())


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def session(storage) -> BadgeSession:
    """A started session backed by empty in-memory storage."""
    session = BadgeSession(storage)
    session.start()
    return session
