# src/footprint_api/models/tile.py
"""SQLAlchemy models for the three physical shapes of a tile.

A tile is one logical item on a page, stored in exactly one of three tables:

* ``content`` rows are scoped by page id and carry the full parsed payload.
* ``links`` rows are scoped by owner serial and carry the same payload.
* ``library`` rows are scoped by owner serial and only carry an image URL.

Every shape shares the ``position`` ordering column. ``TileSource`` is the
closed set of shapes; ``TILE_MODELS`` maps each one to its model class.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import InstrumentedAttribute, Mapped, mapped_column

from footprint_api.db.session import Base
from footprint_api.db.time import utcnow

from .user import new_id


class TileSource(str, enum.Enum):
    """Collection a tile is physically stored in."""

    CONTENT = "content"
    LINKS = "links"
    LIBRARY = "library"


class PositionedTile:
    """Columns and behaviour shared by every tile shape."""

    # Set by each concrete shape.
    source = TileSource.CONTENT

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    @classmethod
    def scope_column(cls) -> InstrumentedAttribute[Any]:
        """Return the column that scopes this shape (page id or serial)."""
        raise NotImplementedError

    def as_tile(self) -> dict[str, Any]:
        """Return the normalized tile payload tagged with its source."""
        raise NotImplementedError


class ContentItem(PositionedTile, Base):
    """Rich-embed content attached to one page."""

    __tablename__ = "content"
    source = TileSource.CONTENT

    footprint_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("footprints.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="link")
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    embed_html: Mapped[str | None] = mapped_column(Text, nullable=True)
    external_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    @classmethod
    def scope_column(cls) -> InstrumentedAttribute[Any]:
        return cls.footprint_id

    def as_tile(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "thumbnail_url": self.thumbnail_url,
            "embed_html": self.embed_html,
            "external_id": self.external_id,
            "position": self.position,
            "source": self.source.value,
            "room_id": None,
        }


class LinkTile(PositionedTile, Base):
    """Link or embed tile owned by a serial, optionally placed in a room."""

    __tablename__ = "links"
    source = TileSource.LINKS

    serial_number: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.serial_number", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="SET NULL"),
        nullable=True,
    )
    url: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="link")
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    embed_html: Mapped[str | None] = mapped_column(Text, nullable=True)
    external_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    size: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    caption: Mapped[str | None] = mapped_column(Text, nullable=True)

    @classmethod
    def scope_column(cls) -> InstrumentedAttribute[Any]:
        return cls.serial_number

    def as_tile(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "thumbnail_url": self.thumbnail_url,
            "embed_html": self.embed_html,
            "external_id": self.external_id,
            "position": self.position,
            "source": self.source.value,
            "room_id": self.room_id,
            "size": self.size,
            "caption": self.caption,
        }


class LibraryItem(PositionedTile, Base):
    """Uploaded or linked media owned by a serial."""

    __tablename__ = "library"
    source = TileSource.LIBRARY

    serial_number: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.serial_number", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="SET NULL"),
        nullable=True,
    )
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    caption: Mapped[str | None] = mapped_column(Text, nullable=True)

    @classmethod
    def scope_column(cls) -> InstrumentedAttribute[Any]:
        return cls.serial_number

    def as_tile(self) -> dict[str, Any]:
        # Library rows have no parsed metadata; they always render as images.
        return {
            "id": self.id,
            "url": self.image_url,
            "type": "image",
            "title": None,
            "description": None,
            "thumbnail_url": None,
            "embed_html": None,
            "external_id": None,
            "position": self.position,
            "source": self.source.value,
            "room_id": self.room_id,
            "size": self.size,
            "caption": self.caption,
        }


TileModel = ContentItem | LinkTile | LibraryItem

TILE_MODELS: dict[TileSource, type[ContentItem] | type[LinkTile] | type[LibraryItem]] = {
    TileSource.CONTENT: ContentItem,
    TileSource.LINKS: LinkTile,
    TileSource.LIBRARY: LibraryItem,
}
