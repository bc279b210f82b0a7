# src/footprint_api/api/v1/endpoints/content.py
"""Page-scoped content endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, status
from sqlalchemy.exc import SQLAlchemyError

from footprint_api.api.v1.dependencies import SessionDep, UrlParserDep, VerifiedIdentityDep
from footprint_api.models import TileSource
from footprint_api.schemas.tile import (
    ContentCreate,
    ContentListResponse,
    ReorderRequest,
    ReorderResponse,
    TileDeleteResponse,
    TileResponse,
)
from footprint_api.services.pages import require_owned_page
from footprint_api.services.tile_store import (
    PageScope,
    PositionUpdate,
    add_tile,
    delete_tile,
    list_tiles,
    reorder_tiles,
)

router = APIRouter(prefix="/content", tags=["content"])

logger = logging.getLogger(__name__)


@router.get("/", response_model=ContentListResponse)
async def list_content(
    db: SessionDep,
    footprint_id: str = Query(..., min_length=1),
) -> ContentListResponse:
    """Return a page's content in display order.

    Store failures degrade to an empty list for passive viewers.
    """
    try:
        items = list_tiles(db, TileSource.CONTENT, PageScope(footprint_id))
    except SQLAlchemyError as exc:
        logger.warning("Content listing failed for %s: %s", footprint_id, exc)
        items = []
    return ContentListResponse(content=[TileResponse.from_tile(item) for item in items])


@router.post("/", response_model=TileResponse, status_code=status.HTTP_201_CREATED)
async def add_content(
    payload: ContentCreate,
    identity: VerifiedIdentityDep,
    db: SessionDep,
    parse: UrlParserDep,
) -> TileResponse:
    """Parse a URL and append it to one of the caller's pages."""
    page = require_owned_page(db, identity.user_id, payload.footprint_id)
    tile = add_tile(db, PageScope(page.id), parse(payload.url))
    return TileResponse.from_tile(tile)


@router.delete("/", response_model=TileDeleteResponse)
async def remove_content(
    identity: VerifiedIdentityDep,
    db: SessionDep,
    footprint_id: str = Query(..., min_length=1),
    tile_id: str = Query(..., alias="id", min_length=1),
) -> TileDeleteResponse:
    """Delete a content tile from one of the caller's pages."""
    page = require_owned_page(db, identity.user_id, footprint_id)
    deleted = delete_tile(db, TileSource.CONTENT, tile_id, PageScope(page.id))
    return TileDeleteResponse(success=True, deleted_count=deleted)


@router.post("/reorder", response_model=ReorderResponse)
async def reorder_content(
    payload: ReorderRequest,
    identity: VerifiedIdentityDep,
    db: SessionDep,
) -> ReorderResponse:
    """Apply a batch of positions; items outside the page are skipped."""
    page = require_owned_page(db, identity.user_id, payload.footprint_id)
    result = reorder_tiles(
        db,
        PageScope(page.id),
        [PositionUpdate(tile_id=item.id, position=item.position) for item in payload.updates],
    )
    return ReorderResponse(success=result.success, applied=result.applied, skipped=result.skipped)
