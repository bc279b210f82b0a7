# src/footprint_api/api/v1/endpoints/tiles.py
"""Slug-scoped tile endpoints for the links and library collections."""

from __future__ import annotations

from fastapi import APIRouter, status

from footprint_api.api.v1.dependencies import (
    OptionalIdentityDep,
    SessionDep,
    UrlParserDep,
    slug_capability,
)
from footprint_api.schemas.tile import (
    MediaRegisterRequest,
    RoomAssignRequest,
    TileCreate,
    TileDeleteRequest,
    TileDeleteResponse,
    TileResponse,
    TileUpdateRequest,
    TileUpdateResponse,
)
from footprint_api.services.tile_store import (
    SerialScope,
    add_thought,
    add_tile,
    assign_room,
    delete_tile,
    register_media,
    update_tile,
)

router = APIRouter(prefix="/tiles", tags=["tiles"])


@router.post("/", response_model=TileResponse, status_code=status.HTTP_201_CREATED)
async def create_tile(
    payload: TileCreate,
    identity: OptionalIdentityDep,
    db: SessionDep,
    parse: UrlParserDep,
) -> TileResponse:
    """Add a tile from a URL or a thought to the slug owner's collections.

    Images land in the library, everything else in links.
    """
    capability = slug_capability(db, payload.slug, identity)
    scope = SerialScope(capability.serial)
    if payload.thought:
        tile = add_thought(db, scope, payload.thought, payload.room_id)
    else:
        tile = add_tile(db, scope, parse(payload.url or ""), payload.room_id)
    return TileResponse.from_tile(tile)


@router.delete("/", response_model=TileDeleteResponse)
async def remove_tile(
    payload: TileDeleteRequest,
    identity: OptionalIdentityDep,
    db: SessionDep,
) -> TileDeleteResponse:
    """Delete a tile if it belongs to the slug owner."""
    capability = slug_capability(db, payload.slug, identity)
    deleted = delete_tile(db, payload.source, payload.id, SerialScope(capability.serial))
    return TileDeleteResponse(success=True, deleted_count=deleted)


@router.patch("/", response_model=TileUpdateResponse)
async def edit_tile(
    payload: TileUpdateRequest,
    identity: OptionalIdentityDep,
    db: SessionDep,
) -> TileUpdateResponse:
    """Change a tile's display size or caption. An empty caption clears it."""
    capability = slug_capability(db, payload.slug, identity)
    updated = update_tile(
        db,
        payload.source,
        payload.id,
        SerialScope(capability.serial),
        size=payload.size,
        caption=payload.caption,
    )
    return TileUpdateResponse(success=True, updated_count=updated)


@router.post("/register", response_model=TileResponse, status_code=status.HTTP_201_CREATED)
async def register_uploaded_media(
    payload: MediaRegisterRequest,
    identity: OptionalIdentityDep,
    db: SessionDep,
) -> TileResponse:
    """Record an uploaded media URL as a library tile."""
    capability = slug_capability(db, payload.slug, identity)
    tile = register_media(db, SerialScope(capability.serial), payload.url, payload.room_id)
    return TileResponse.from_tile(tile)


@router.patch("/room", response_model=TileUpdateResponse)
async def move_tile_to_room(
    payload: RoomAssignRequest,
    identity: OptionalIdentityDep,
    db: SessionDep,
) -> TileUpdateResponse:
    """Place a tile in a room, or take it out with a null room id."""
    capability = slug_capability(db, payload.slug, identity)
    updated = assign_room(
        db, payload.source, payload.id, SerialScope(capability.serial), payload.room_id
    )
    return TileUpdateResponse(success=True, updated_count=updated)
