"""Public slug to serial resolution.

Resolution is unauthenticated: any caller may learn which serial owns a slug.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from footprint_api.models import Footprint, User

__all__ = ["resolve_serial", "resolve_page"]


def resolve_page(db: Session, slug: str) -> tuple[Footprint, int] | None:
    """Return the page addressed by ``slug`` and its owner's serial."""
    if not slug:
        return None
    row = (
        db.query(Footprint, User.serial_number)
        .join(User, User.id == Footprint.user_id)
        .filter(Footprint.slug == slug)
        .first()
    )
    if row is None:
        return None
    footprint, serial = row
    return footprint, int(serial)


def resolve_serial(db: Session, slug: str) -> int | None:
    """Return the owner serial for ``slug``, or None when it does not resolve."""
    resolved = resolve_page(db, slug)
    return resolved[1] if resolved is not None else None
