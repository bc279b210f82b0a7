"""Serial allocation for newly registering identities.

The primary path claims the next serial with a single ``UPDATE ... RETURNING``
against the ``serial_counter`` row, so the store serializes concurrent
registrations. When that row is missing or the statement fails, the allocator
falls back to ``max(serial) + 1``. The fallback is not safe under concurrency;
the UNIQUE constraint on ``users.serial_number`` turns a lost race into a
``SerialConflictError`` instead of a duplicate. A fallback serial is written
back to the counter in the same savepoint as the identity, so the atomic path
resumes after it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import case, func, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from footprint_api.core.settings import settings
from footprint_api.models import Footprint, SerialCounter, User
from footprint_api.models.serial_counter import SERIAL_COUNTER_ID

from .errors import SerialConflictError, ValidationError
from .pages import build_default_page, generate_slug

__all__ = [
    "Allocation",
    "allocate",
    "claim_next_serial",
    "ensure_serial_counter",
    "fallback_next_serial",
    "peek_next_serial",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allocation:
    """Outcome of an allocation request."""

    serial: int
    existed: bool
    user: User
    footprint: Footprint | None = None


def normalize_email(email: str) -> str:
    """Return the canonical form used for identity lookups."""
    cleaned = (email or "").strip().lower()
    if not cleaned or "@" not in cleaned:
        raise ValidationError("Email required")
    return cleaned


def claim_next_serial(db: Session) -> int | None:
    """Atomically claim the next serial, or None if the counter row is absent."""
    stmt = (
        update(SerialCounter)
        .where(SerialCounter.id == SERIAL_COUNTER_ID)
        .values(last_serial=SerialCounter.last_serial + 1)
        .returning(SerialCounter.last_serial)
        .execution_options(synchronize_session=False)
    )
    return db.execute(stmt).scalar_one_or_none()


def fallback_next_serial(db: Session) -> int:
    """Return ``max(serial) + 1``; unsafe when registrations run concurrently."""
    latest = db.query(func.max(User.serial_number)).scalar()
    return int(latest) + 1 if latest is not None else settings.first_serial


def peek_next_serial(db: Session) -> int:
    """Return the serial the next registration would receive without claiming it."""
    last_serial = (
        db.query(SerialCounter.last_serial)
        .filter(SerialCounter.id == SERIAL_COUNTER_ID)
        .scalar()
    )
    if last_serial is not None:
        return last_serial + 1
    return fallback_next_serial(db)


def ensure_serial_counter(db: Session) -> SerialCounter:
    """Create the counter row if missing, starting after any existing serial."""
    counter = db.get(SerialCounter, SERIAL_COUNTER_ID)
    if counter is not None:
        return counter
    latest = db.query(func.max(User.serial_number)).scalar()
    start = max(settings.first_serial - 1, int(latest) if latest is not None else 0)
    counter = SerialCounter(id=SERIAL_COUNTER_ID, last_serial=start)
    db.add(counter)
    db.commit()
    db.refresh(counter)
    logger.info("Initialized serial counter at %d", start)
    return counter


def _advance_counter(db: Session, serial: int) -> None:
    """Move the counter up to ``serial`` so later claims skip a fallback serial."""
    db.execute(
        update(SerialCounter)
        .where(SerialCounter.id == SERIAL_COUNTER_ID)
        .values(
            last_serial=case(
                (SerialCounter.last_serial < serial, serial),
                else_=SerialCounter.last_serial,
            )
        )
        .execution_options(synchronize_session=False)
    )


def _claim_serial(db: Session) -> tuple[int, bool]:
    """Return the serial to use and whether the counter already accounts for it."""
    serial: int | None = None
    try:
        with db.begin_nested():
            serial = claim_next_serial(db)
    except SQLAlchemyError as exc:
        logger.warning("Atomic serial claim failed: %s", exc)
        serial = None

    if serial is None:
        serial = fallback_next_serial(db)
        logger.warning("Serial counter unavailable, falling back to max+1 (%d)", serial)
        return serial, False
    return serial, True


def allocate(db: Session, email: str) -> Allocation:
    """Return the serial for ``email``, registering a new identity if needed.

    A new identity is written together with its primary, public default page.

    Raises:
        ValidationError: If ``email`` is empty or malformed.
        SerialConflictError: If the serial or email was claimed concurrently.
    """
    email = normalize_email(email)

    existing = db.query(User).filter(User.email == email).first()
    if existing is not None:
        return Allocation(serial=existing.serial_number, existed=True, user=existing)

    serial, claimed = _claim_serial(db)
    slug = generate_slug(db, serial)

    try:
        with db.begin_nested():
            user = User(email=email, serial_number=serial)
            db.add(user)
            db.flush()
            footprint = build_default_page(user, slug)
            db.add(footprint)
            db.flush()
            if not claimed:
                _advance_counter(db, serial)
    except IntegrityError as err:
        logger.warning("Serial allocation conflict for serial %d: %s", serial, err.orig)
        raise SerialConflictError(
            f"Serial {serial} or email was claimed by a concurrent registration"
        ) from err

    db.commit()
    db.refresh(user)
    db.refresh(footprint)
    logger.info("Allocated serial %d with default page %s", serial, slug)
    return Allocation(serial=serial, existed=False, user=user, footprint=footprint)
