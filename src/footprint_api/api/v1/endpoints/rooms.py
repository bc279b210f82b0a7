# src/footprint_api/api/v1/endpoints/rooms.py
"""Room listing, seeding and visibility endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from footprint_api.api.v1.dependencies import OptionalIdentityDep, SessionDep, slug_capability
from footprint_api.models import Room
from footprint_api.schemas.room import (
    RoomResponse,
    RoomVisibilityRequest,
    SeedRoomsRequest,
    SeedRoomsResponse,
)
from footprint_api.services.errors import NotFoundError
from footprint_api.services.rooms import list_rooms, seed_rooms, set_room_visibility
from footprint_api.services.slug_resolver import resolve_serial

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("/{slug}", response_model=list[RoomResponse])
async def get_rooms(slug: str, db: SessionDep) -> list[Room]:
    """List the rooms of the slug owner, by position."""
    serial = resolve_serial(db, slug)
    if serial is None:
        raise NotFoundError("Footprint not found")
    return list_rooms(db, serial)


@router.post("/seed", response_model=SeedRoomsResponse)
async def seed_default_rooms(
    payload: SeedRoomsRequest,
    identity: OptionalIdentityDep,
    db: SessionDep,
) -> SeedRoomsResponse:
    """Create the default rooms once and spread untagged tiles across them."""
    capability = slug_capability(db, payload.slug, identity)
    result = seed_rooms(db, capability.serial)
    return SeedRoomsResponse(
        message=result.message,
        rooms=[RoomResponse.model_validate(room) for room in result.rooms],
        distribution=result.distribution if result.created else None,
    )


@router.patch("/visibility", response_model=RoomResponse)
async def change_room_visibility(
    payload: RoomVisibilityRequest,
    identity: OptionalIdentityDep,
    db: SessionDep,
) -> Room:
    """Hide or show a room."""
    capability = slug_capability(db, payload.slug, identity)
    return set_room_visibility(db, capability.serial, payload.room_id, payload.hidden)
