"""Page ("footprint") Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .tile import TileResponse


class FootprintResponse(BaseModel):
    """Schema for page information returned by the API."""

    id: str
    user_id: str
    slug: str
    name: str
    icon: str | None
    display_name: str | None
    handle: str | None
    bio: str | None
    avatar_url: str | None
    theme: str
    is_public: bool
    is_primary: bool
    view_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FootprintCreate(BaseModel):
    """Schema for creating an additional page."""

    name: str = Field(..., min_length=1, max_length=255)
    icon: str | None = Field(None, max_length=10)


class OwnershipResponse(BaseModel):
    """Ownership gate answer; page data is omitted when not owned."""

    owned: bool
    footprint: FootprintResponse | None = None
    content: list[TileResponse] | None = None
    tiles: list[TileResponse] | None = None


class PublicFootprintResponse(BaseModel):
    """Public view of a page and its ordered content."""

    footprint: FootprintResponse
    content: list[TileResponse]
