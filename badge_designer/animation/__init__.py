"""
Badge animation model, codec and editing logic.
NO UI DEPENDENCIES.
"""

from badge_designer.animation.grid import PixelGrid, Direction
from badge_designer.animation.frames import FrameStore
from badge_designer.animation.codec import encode, decode, DecodedConfig
from badge_designer.animation.editor import (
    EditController,
    EditSession,
    EditorState,
    ChangeEvent,
    ChangeKind,
)
from badge_designer.animation.persistence import PersistenceBridge, FileStorage, MemoryStorage
from badge_designer.animation.session import BadgeSession

__all__ = [
    "PixelGrid",
    "Direction",
    "FrameStore",
    "encode",
    "decode",
    "DecodedConfig",
    "EditController",
    "EditSession",
    "EditorState",
    "ChangeEvent",
    "ChangeKind",
    "PersistenceBridge",
    "FileStorage",
    "MemoryStorage",
    "BadgeSession",
]
