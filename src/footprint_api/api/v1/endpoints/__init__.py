# src/footprint_api/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .content import router as content_router
from .footprints import router as footprints_router
from .rooms import router as rooms_router
from .tiles import router as tiles_router
from .users import router as users_router

__all__ = [
    "users_router",
    "footprints_router",
    "content_router",
    "tiles_router",
    "rooms_router",
]
