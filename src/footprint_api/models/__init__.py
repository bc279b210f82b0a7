# src/footprint_api/models/__init__.py
"""SQLAlchemy models for the Footprint application."""

from .footprint import Footprint
from .room import Room
from .serial_counter import SerialCounter
from .tile import ContentItem, LibraryItem, LinkTile, TileSource
from .user import User

__all__ = [
    "ContentItem", "LibraryItem", "LinkTile", "TileSource",
    "Footprint",
    "Room",
    "SerialCounter",
    "User",
]
