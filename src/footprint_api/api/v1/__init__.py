# src/footprint_api/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    content_router,
    footprints_router,
    rooms_router,
    tiles_router,
    users_router,
)

__all__ = [
    "users_router",
    "footprints_router",
    "content_router",
    "tiles_router",
    "rooms_router",
]
