"""Tile-related Pydantic schemas."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

TileSourceName = Literal["content", "links", "library"]
SerialSourceName = Literal["links", "library"]


class TileResponse(BaseModel):
    """Normalized tile, tagged with the collection it lives in."""

    id: str
    url: str
    type: str
    title: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    embed_html: str | None = None
    external_id: str | None = None
    position: int
    source: TileSourceName
    room_id: str | None = None
    size: int | None = None
    caption: str | None = None

    @classmethod
    def from_tile(cls, tile: Any) -> "TileResponse":
        """Build from any stored tile shape exposing ``as_tile()``."""
        return cls.model_validate(tile.as_tile())


class ContentCreate(BaseModel):
    """Schema for adding content to a page."""

    footprint_id: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1, max_length=2048)


class ContentListResponse(BaseModel):
    content: list[TileResponse]


class ReorderItem(BaseModel):
    id: str = Field(..., min_length=1)
    position: int = Field(..., ge=0)


class ReorderRequest(BaseModel):
    """Batch of position updates for one page."""

    footprint_id: str = Field(..., min_length=1)
    updates: list[ReorderItem]


class ReorderResponse(BaseModel):
    """Best-effort result; ``skipped`` ids were not applied."""

    success: bool
    applied: list[str]
    skipped: list[str]


class TileCreate(BaseModel):
    """Schema for adding a slug-scoped tile from a URL or a thought."""

    slug: str = Field(..., min_length=1)
    url: str | None = Field(None, max_length=2048)
    thought: str | None = Field(None, max_length=5000)
    room_id: str | None = None

    @model_validator(mode="after")
    def _require_url_or_thought(self) -> "TileCreate":
        if not self.url and not self.thought:
            raise ValueError("slug and (url or thought) required")
        return self


class TileDeleteRequest(BaseModel):
    slug: str = Field(..., min_length=1)
    source: SerialSourceName
    id: str = Field(..., min_length=1)


class TileDeleteResponse(BaseModel):
    success: bool
    deleted_count: int


class TileUpdateRequest(BaseModel):
    """Schema for changing a tile's size or caption."""

    slug: str = Field(..., min_length=1)
    source: SerialSourceName
    id: str = Field(..., min_length=1)
    size: int | None = None
    caption: str | None = None


class TileUpdateResponse(BaseModel):
    success: bool
    updated_count: int


class RoomAssignRequest(BaseModel):
    """Move a tile into a room; a null ``room_id`` removes it from any room."""

    slug: str = Field(..., min_length=1)
    source: SerialSourceName
    id: str = Field(..., min_length=1)
    room_id: str | None = None


class MediaRegisterRequest(BaseModel):
    """Register an already uploaded media URL as a library tile."""

    slug: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1, max_length=2048)
    room_id: str | None = None
