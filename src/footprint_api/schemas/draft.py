"""Client-side draft schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DraftContent(BaseModel):
    """One staged tile; same payload shape as a content tile."""

    id: str
    url: str
    type: str = "link"
    title: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    embed_html: str | None = None
    position: int = 0


class DraftFootprint(BaseModel):
    """An unsynced page kept on the client until the page is claimed."""

    slug: str
    display_name: str = ""
    handle: str = ""
    bio: str = ""
    theme: str = "midnight"
    avatar_url: str | None = None
    content: list[DraftContent] = Field(default_factory=list)
    updated_at: int = Field(0, description="Milliseconds since the Unix epoch")
