"""Ordered, multi-collection tile store.

One logical ordered sequence of tiles is spread over three tables. Every
operation takes an explicit scope: ``PageScope`` for ``content`` rows and
``SerialScope`` for ``links`` and ``library`` rows. Positions are assigned as
``max(existing) + 1`` within the scope and are gap tolerant.

Writes are last-write-wins per row. Batch reorder is best effort: each item is
applied on its own, so a failed item never blocks the others and callers
re-read to learn the final order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import delete, func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from footprint_api.db.time import epoch_millis
from footprint_api.models import ContentItem, LibraryItem, LinkTile, Room, TileSource
from footprint_api.models.tile import TILE_MODELS, TileModel

from .errors import NotFoundError, ValidationError
from .parser import ParsedContent

__all__ = [
    "PageScope",
    "SerialScope",
    "TileScope",
    "PositionUpdate",
    "ReorderResult",
    "add_tile",
    "add_thought",
    "register_media",
    "next_position",
    "list_tiles",
    "merged_serial_tiles",
    "reorder_tiles",
    "delete_tile",
    "update_tile",
    "assign_room",
]

logger = logging.getLogger(__name__)

SERIAL_SOURCES = (TileSource.LIBRARY, TileSource.LINKS)
TILE_SIZES = (1, 2)


@dataclass(frozen=True)
class PageScope:
    """Scope of the ``content`` collection: one page id."""

    footprint_id: str


@dataclass(frozen=True)
class SerialScope:
    """Scope of the ``links`` and ``library`` collections: one owner serial."""

    serial: int


TileScope = PageScope | SerialScope


@dataclass(frozen=True)
class PositionUpdate:
    tile_id: str
    position: int


@dataclass
class ReorderResult:
    """Per-item outcome of a batch reorder."""

    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.skipped


def _scope_key(source: TileSource, scope: TileScope) -> str | int:
    if source is TileSource.CONTENT:
        if not isinstance(scope, PageScope):
            raise ValidationError("content tiles are scoped by footprint id")
        return scope.footprint_id
    if not isinstance(scope, SerialScope):
        raise ValidationError(f"{source.value} tiles are scoped by serial number")
    return scope.serial


def _coerce_source(source: TileSource | str) -> TileSource:
    try:
        return TileSource(source)
    except ValueError as err:
        raise ValidationError("source must be one of content, links, library") from err


def next_position(db: Session, source: TileSource, scope: TileScope) -> int:
    """Return ``max(position) + 1`` within the scope, 0 for an empty scope."""
    model = TILE_MODELS[source]
    key = _scope_key(source, scope)
    current = (
        db.query(func.max(model.position))
        .filter(model.scope_column() == key)
        .scalar()
    )
    return (current if current is not None else -1) + 1


def _check_room(db: Session, room_id: str | None, serial: int) -> None:
    if room_id is None:
        return
    room = db.query(Room.id).filter(Room.id == room_id, Room.serial_number == serial).first()
    if room is None:
        raise NotFoundError("Room not found")


def _insert(db: Session, tile: TileModel) -> TileModel:
    db.add(tile)
    db.commit()
    db.refresh(tile)
    logger.info(
        "Added %s tile %s at position %d", tile.source.value, tile.id, tile.position
    )
    return tile


def add_tile(
    db: Session,
    scope: TileScope,
    payload: ParsedContent,
    room_id: str | None = None,
) -> TileModel:
    """Insert a parsed payload at the end of its scope.

    Page scopes store into ``content``. Serial scopes store images into
    ``library`` and everything else into ``links``.
    """
    if isinstance(scope, PageScope):
        if room_id is not None:
            raise ValidationError("content tiles cannot be placed in rooms")
        position = next_position(db, TileSource.CONTENT, scope)
        tile: TileModel = ContentItem(
            footprint_id=scope.footprint_id,
            url=payload.url,
            type=payload.type,
            title=payload.title,
            description=payload.description,
            thumbnail_url=payload.thumbnail_url,
            embed_html=payload.embed_html,
            external_id=payload.external_id,
            position=position,
        )
        return _insert(db, tile)

    _check_room(db, room_id, scope.serial)
    if payload.type == "image":
        return register_media(db, scope, payload.url, room_id)

    tile = LinkTile(
        serial_number=scope.serial,
        url=payload.url,
        type=payload.type,
        title=payload.title,
        description=payload.description,
        thumbnail_url=payload.thumbnail_url,
        embed_html=payload.embed_html,
        external_id=payload.external_id,
        position=next_position(db, TileSource.LINKS, scope),
        room_id=room_id,
    )
    return _insert(db, tile)


def add_thought(
    db: Session,
    scope: SerialScope,
    text: str,
    room_id: str | None = None,
) -> TileModel:
    """Add a free-text tile to the ``links`` collection."""
    text = (text or "").strip()
    if not text:
        raise ValidationError("thought text required")
    payload = ParsedContent(url=f"thought://{epoch_millis()}", type="thought", title=text)
    return add_tile(db, scope, payload, room_id)


def register_media(
    db: Session,
    scope: SerialScope,
    url: str,
    room_id: str | None = None,
) -> LibraryItem:
    """Record an already uploaded media URL as a library tile."""
    if not url:
        raise ValidationError("url required")
    _check_room(db, room_id, scope.serial)
    tile = LibraryItem(
        serial_number=scope.serial,
        image_url=url,
        position=next_position(db, TileSource.LIBRARY, scope),
        room_id=room_id,
    )
    return _insert(db, tile)


def list_tiles(db: Session, source: TileSource | str, scope: TileScope) -> list[TileModel]:
    """Return one collection's tiles in display order."""
    source = _coerce_source(source)
    model = TILE_MODELS[source]
    key = _scope_key(source, scope)
    return (
        db.query(model)
        .filter(model.scope_column() == key)
        .order_by(model.position.asc(), model.created_at.asc())
        .all()
    )


def merged_serial_tiles(db: Session, serial: int) -> list[dict[str, Any]]:
    """Return links and library tiles of a serial as one position-ordered list."""
    scope = SerialScope(serial)
    tiles = [
        tile.as_tile()
        for source in SERIAL_SOURCES
        for tile in list_tiles(db, source, scope)
    ]
    # sorted() is stable, so equal positions keep library-before-links order.
    return sorted(tiles, key=lambda tile: tile["position"] or 0)


def reorder_tiles(
    db: Session,
    scope: TileScope,
    updates: Iterable[PositionUpdate],
    source: TileSource | str = TileSource.CONTENT,
) -> ReorderResult:
    """Apply a batch of position updates, each independently.

    An update whose tile id is not in ``scope`` matches no row and is skipped.
    Store errors on one item are logged and skipped; earlier and later items
    still land.
    """
    source = _coerce_source(source)
    model = TILE_MODELS[source]
    key = _scope_key(source, scope)
    result = ReorderResult()

    for item in updates:
        stmt = (
            update(model)
            .where(model.id == item.tile_id, model.scope_column() == key)
            .values(position=item.position)
            .execution_options(synchronize_session=False)
        )
        try:
            with db.begin_nested():
                rowcount = db.execute(stmt).rowcount
        except SQLAlchemyError as exc:
            logger.warning("Reorder of %s tile %s failed: %s", source.value, item.tile_id, exc)
            result.skipped.append(item.tile_id)
            continue
        if rowcount:
            result.applied.append(item.tile_id)
        else:
            logger.warning(
                "Reorder skipped %s tile %s outside scope %s", source.value, item.tile_id, key
            )
            result.skipped.append(item.tile_id)

    db.commit()
    db.expire_all()
    return result


def delete_tile(
    db: Session,
    source: TileSource | str,
    tile_id: str,
    scope: TileScope,
) -> int:
    """Delete ``tile_id`` only if it belongs to ``scope``.

    Returns:
        Number of rows removed; 0 means the tile is not in this scope.
    """
    source = _coerce_source(source)
    if not tile_id:
        raise ValidationError("id required")
    model = TILE_MODELS[source]
    key = _scope_key(source, scope)
    stmt = (
        delete(model)
        .where(model.id == tile_id, model.scope_column() == key)
        .execution_options(synchronize_session=False)
    )
    deleted = db.execute(stmt).rowcount or 0
    db.commit()
    db.expire_all()
    logger.info("Deleted %d row(s) from %s for tile %s", deleted, source.value, tile_id)
    return deleted


def _serial_model(source: TileSource | str) -> type[LinkTile] | type[LibraryItem]:
    source = _coerce_source(source)
    if source not in SERIAL_SOURCES:
        raise ValidationError("source must be one of links, library")
    return LinkTile if source is TileSource.LINKS else LibraryItem


def update_tile(
    db: Session,
    source: TileSource | str,
    tile_id: str,
    scope: SerialScope,
    *,
    size: int | None = None,
    caption: str | None = None,
    clear_caption: bool = False,
) -> int:
    """Update display size and/or caption of a links or library tile.

    Returns:
        Number of rows updated.
    """
    model = _serial_model(source)
    values: dict[str, Any] = {}
    if size is not None:
        if size not in TILE_SIZES:
            raise ValidationError("size must be 1 or 2")
        values["size"] = size
    if caption is not None or clear_caption:
        values["caption"] = caption or None
    if not values:
        raise ValidationError("No fields to update")

    stmt = (
        update(model)
        .where(model.id == tile_id, model.serial_number == scope.serial)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    updated = db.execute(stmt).rowcount or 0
    db.commit()
    db.expire_all()
    return updated


def assign_room(
    db: Session,
    source: TileSource | str,
    tile_id: str,
    scope: SerialScope,
    room_id: str | None,
) -> int:
    """Move a links or library tile into ``room_id`` (None removes it).

    Ordering is untouched.

    Returns:
        Number of rows updated.
    """
    model = _serial_model(source)
    _check_room(db, room_id, scope.serial)
    stmt = (
        update(model)
        .where(model.id == tile_id, model.serial_number == scope.serial)
        .values(room_id=room_id)
        .execution_options(synchronize_session=False)
    )
    updated = db.execute(stmt).rowcount or 0
    db.commit()
    db.expire_all()
    return updated

