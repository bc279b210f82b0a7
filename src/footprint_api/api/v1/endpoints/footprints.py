# src/footprint_api/api/v1/endpoints/footprints.py
"""Page ownership, listing and public view endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from footprint_api.api.v1.dependencies import (
    OptionalIdentityDep,
    SessionDep,
    VerifiedIdentityDep,
)
from footprint_api.models import Footprint
from footprint_api.schemas.footprint import (
    FootprintCreate,
    FootprintResponse,
    OwnershipResponse,
    PublicFootprintResponse,
)
from footprint_api.schemas.tile import TileResponse
from footprint_api.services.ownership import check_ownership
from footprint_api.services.pages import create_page, get_public_page, list_pages

router = APIRouter(prefix="/footprints", tags=["footprints"])


@router.get("/", response_model=list[FootprintResponse])
async def list_my_footprints(
    identity: VerifiedIdentityDep,
    db: SessionDep,
) -> list[Footprint]:
    """List the caller's pages, primary first."""
    return list(list_pages(db, identity.user))


@router.post("/", response_model=FootprintResponse, status_code=status.HTTP_201_CREATED)
async def create_footprint(
    payload: FootprintCreate,
    identity: VerifiedIdentityDep,
    db: SessionDep,
) -> Footprint:
    """Create an additional, non-primary page for the caller."""
    return create_page(db, identity.user, payload.name, payload.icon)


@router.get(
    "/{slug}",
    response_model=OwnershipResponse,
    response_model_exclude_unset=True,
)
async def get_footprint_ownership(
    slug: str,
    identity: OptionalIdentityDep,
    db: SessionDep,
) -> OwnershipResponse:
    """Tell the editor whether the caller owns ``slug``.

    Owned pages come back with their ordered content and merged link/library
    tiles. Anything else, including unknown slugs, is ``{"owned": false}``.
    """
    result = check_ownership(db, identity, slug)
    if not result.owned:
        return OwnershipResponse(owned=False)
    return OwnershipResponse(
        owned=True,
        footprint=FootprintResponse.model_validate(result.footprint),
        content=[TileResponse.from_tile(item) for item in result.content],
        tiles=[TileResponse.model_validate(tile) for tile in result.tiles],
    )


@router.get("/{slug}/public", response_model=PublicFootprintResponse)
async def get_public_footprint(slug: str, db: SessionDep) -> PublicFootprintResponse:
    """Return a public page and its ordered content, counting the view."""
    page, content = get_public_page(db, slug)
    return PublicFootprintResponse(
        footprint=FootprintResponse.model_validate(page),
        content=[TileResponse.from_tile(item) for item in content],
    )
