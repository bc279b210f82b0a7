# src/footprint_api/models/footprint.py
"""SQLAlchemy model for published pages ("footprints")."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from footprint_api.db.session import Base
from footprint_api.db.time import utcnow

from .user import new_id


class Footprint(Base):
    """A user's single-page profile addressed by a public slug."""

    __tablename__ = "footprints"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # Owner never changes after creation.
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="Untitled")
    icon: Mapped[str | None] = mapped_column(String(10), nullable=True)

    # Profile data
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    handle: Mapped[str | None] = mapped_column(String(100), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    theme: Mapped[str] = mapped_column(String(50), nullable=False, default="midnight")

    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
