# src/footprint_api/services/__init__.py
"""Business logic services for the Footprint application."""

from .capabilities import SlugCapability, VerifiedIdentity
from .draft_cache import DraftCache, FileDraftStorage, MemoryDraftStorage
from .editor import EditorState, load_editor_state
from .errors import (
    ConflictError,
    FootprintError,
    ForbiddenError,
    NotFoundError,
    SerialConflictError,
    UnavailableError,
    ValidationError,
)
from .playback import PlaybackArbiter

__all__ = [
    "SlugCapability", "VerifiedIdentity",
    "DraftCache", "FileDraftStorage", "MemoryDraftStorage",
    "EditorState", "load_editor_state",
    "ConflictError", "FootprintError", "ForbiddenError", "NotFoundError",
    "SerialConflictError", "UnavailableError", "ValidationError",
    "PlaybackArbiter",
]
