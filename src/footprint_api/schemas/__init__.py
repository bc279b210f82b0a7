# src/footprint_api/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .draft import DraftContent, DraftFootprint
from .footprint import (
    FootprintCreate,
    FootprintResponse,
    OwnershipResponse,
    PublicFootprintResponse,
)
from .room import RoomResponse, SeedRoomsRequest, SeedRoomsResponse
from .tile import ReorderRequest, TileCreate, TileResponse
from .user import AllocateRequest, AllocateResponse

__all__ = [
    "DraftContent", "DraftFootprint",
    "FootprintCreate", "FootprintResponse", "OwnershipResponse", "PublicFootprintResponse",
    "RoomResponse", "SeedRoomsRequest", "SeedRoomsResponse",
    "ReorderRequest", "TileCreate", "TileResponse",
    "AllocateRequest", "AllocateResponse",
]
