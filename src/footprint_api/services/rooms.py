"""Room listing, visibility and one-shot seeding."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy import update
from sqlalchemy.orm import Session

from footprint_api.core.settings import settings
from footprint_api.models import LibraryItem, LinkTile, Room

from .errors import NotFoundError, ValidationError

__all__ = ["SeedResult", "list_rooms", "seed_rooms", "set_room_visibility"]

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    """Outcome of a seeding request."""

    message: str
    rooms: list[Room]
    created: bool
    distribution: dict[str, int] = field(default_factory=dict)


def list_rooms(db: Session, serial: int) -> list[Room]:
    """Return the serial's rooms by position."""
    return (
        db.query(Room)
        .filter(Room.serial_number == serial)
        .order_by(Room.position.asc())
        .all()
    )


def set_room_visibility(db: Session, serial: int, room_id: str, hidden: bool) -> Room:
    """Hide or show one of the serial's rooms."""
    room = db.query(Room).filter(Room.id == room_id, Room.serial_number == serial).first()
    if room is None:
        raise NotFoundError("Room not found")
    room.hidden = hidden
    db.commit()
    db.refresh(room)
    return room


def _untagged_tiles(db: Session, serial: int) -> list[LinkTile | LibraryItem]:
    tiles: list[LinkTile | LibraryItem] = []
    for model in (LibraryItem, LinkTile):
        tiles.extend(
            db.query(model)
            .filter(model.serial_number == serial, model.room_id.is_(None))
            .order_by(model.position.asc(), model.id.asc())
            .all()
        )
    return tiles


def seed_rooms(
    db: Session,
    serial: int,
    names: Sequence[str] | None = None,
    seed: int | None = None,
) -> SeedResult:
    """Create the default rooms for a serial and spread its untagged tiles.

    Refuses to run when the serial already has rooms and returns them instead.
    Tiles are shuffled with a generator seeded by ``seed`` (the serial when
    omitted), then tile ``i`` goes to room ``i % len(rooms)``.
    """
    existing = list_rooms(db, serial)
    if existing:
        return SeedResult(
            message=f"Already has {len(existing)} rooms",
            rooms=existing,
            created=False,
        )

    room_names = list(names if names is not None else settings.default_room_names)
    if not room_names:
        raise ValidationError("At least one room name required")
    if len(set(room_names)) != len(room_names):
        raise ValidationError("Room names must be unique")

    rooms = [
        Room(serial_number=serial, name=name, position=index)
        for index, name in enumerate(room_names)
    ]
    db.add_all(rooms)
    db.flush()

    tiles = _untagged_tiles(db, serial)
    distribution = {room.name: 0 for room in rooms}
    if not tiles:
        db.commit()
        logger.info("Seeded %d rooms for serial %d with no tiles", len(rooms), serial)
        return SeedResult(
            message="Rooms created but no content to distribute",
            rooms=rooms,
            created=True,
            distribution=distribution,
        )

    random.Random(serial if seed is None else seed).shuffle(tiles)
    for index, tile in enumerate(tiles):
        room = rooms[index % len(rooms)]
        db.execute(
            update(type(tile))
            .where(type(tile).id == tile.id)
            .values(room_id=room.id)
            .execution_options(synchronize_session=False)
        )
        distribution[room.name] += 1

    db.commit()
    db.expire_all()
    logger.info(
        "Seeded %d rooms for serial %d, distributed %d tiles", len(rooms), serial, len(tiles)
    )
    return SeedResult(
        message=f"Created {len(rooms)} rooms, distributed {len(tiles)} tiles",
        rooms=rooms,
        created=True,
        distribution=distribution,
    )
