# src/footprint_api/models/user.py
"""SQLAlchemy model for registered identities."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from footprint_api.db.session import Base
from footprint_api.db.time import utcnow


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid.uuid4())


class User(Base):
    """A registered identity.

    ``serial_number`` is issued once by the serial allocator and never changes.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    serial_number: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
