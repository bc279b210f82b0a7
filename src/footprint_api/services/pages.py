"""Page ("footprint") creation and lookup helpers."""

from __future__ import annotations

import logging
import secrets
import string
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from footprint_api.core.settings import settings
from footprint_api.models import ContentItem, Footprint, User

from .errors import ConflictError, ForbiddenError, NotFoundError, ValidationError

__all__ = [
    "generate_slug",
    "build_default_page",
    "create_page",
    "list_pages",
    "get_public_page",
    "require_owned_page",
]

logger = logging.getLogger(__name__)

_SLUG_ALPHABET = string.ascii_lowercase + string.digits


def _random_suffix(length: int) -> str:
    return "".join(secrets.choice(_SLUG_ALPHABET) for _ in range(length))


def generate_slug(db: Session, serial: int, suffix_length: int | None = None) -> str:
    """Return an unused slug of the form ``{prefix}-{serial}-{suffix}``.

    Raises:
        ConflictError: If every attempt collided with an existing slug.
    """
    length = suffix_length or settings.slug_suffix_length
    for _ in range(settings.slug_max_attempts):
        slug = f"{settings.slug_prefix}-{serial}-{_random_suffix(length)}"
        taken = db.query(Footprint.id).filter(Footprint.slug == slug).first()
        if taken is None:
            return slug
        logger.debug("Slug %s already taken, retrying", slug)
    raise ConflictError(f"Could not generate a free slug for serial {serial}")


def build_default_page(user: User, slug: str) -> Footprint:
    """Return the unsaved primary, public page created at registration."""
    return Footprint(
        user_id=user.id,
        slug=slug,
        name=settings.default_page_name,
        icon=settings.default_page_icon,
        theme=settings.default_theme,
        is_primary=True,
        is_public=True,
    )


def create_page(db: Session, user: User, name: str, icon: str | None = None) -> Footprint:
    """Create an additional, non-primary page for ``user``."""
    if not name or not name.strip():
        raise ValidationError("Name is required")
    slug = generate_slug(db, user.serial_number, settings.extra_page_suffix_length)
    page = Footprint(
        user_id=user.id,
        slug=slug,
        name=name.strip(),
        icon=icon or settings.default_page_icon,
        theme=settings.default_theme,
        is_primary=False,
        is_public=True,
    )
    db.add(page)
    db.commit()
    db.refresh(page)
    logger.info("Created page %s for serial %d", slug, user.serial_number)
    return page


def list_pages(db: Session, user: User) -> Sequence[Footprint]:
    """Return the user's pages, primary first, then oldest first."""
    return (
        db.query(Footprint)
        .filter(Footprint.user_id == user.id)
        .order_by(Footprint.is_primary.desc(), Footprint.created_at.asc())
        .all()
    )


def get_public_page(db: Session, slug: str) -> tuple[Footprint, list[ContentItem]]:
    """Return a public page with its ordered content and count the view.

    Raises:
        NotFoundError: If the slug is unknown or the page is not public.
    """
    page = db.query(Footprint).filter(Footprint.slug == slug).first()
    if page is None or not page.is_public:
        raise NotFoundError("Footprint not found")

    try:
        content = (
            db.query(ContentItem)
            .filter(ContentItem.footprint_id == page.id)
            .order_by(ContentItem.position.asc(), ContentItem.created_at.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        # Passive viewers still get the page when the content read fails.
        logger.warning("Content read failed for %s: %s", slug, exc)
        content = []

    page.view_count = (page.view_count or 0) + 1
    try:
        db.commit()
    except SQLAlchemyError as exc:
        logger.warning("View count update failed for %s: %s", slug, exc)
        db.rollback()
    return page, content


def require_owned_page(db: Session, user_id: str, footprint_id: str) -> Footprint:
    """Return the page if ``user_id`` owns it.

    Raises:
        ForbiddenError: If the page is missing or owned by someone else.
    """
    page = db.get(Footprint, footprint_id)
    if page is None or page.user_id != user_id:
        raise ForbiddenError("Not your footprint")
    return page
