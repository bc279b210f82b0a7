"""Ownership gate deciding whether an editor works on the store or a draft."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.orm import Session

from footprint_api.models import ContentItem, Footprint

from .capabilities import VerifiedIdentity
from .slug_resolver import resolve_page
from .tile_store import PageScope, list_tiles, merged_serial_tiles

__all__ = ["OwnershipResult", "check_ownership"]

logger = logging.getLogger(__name__)


@dataclass
class OwnershipResult:
    """Answer of the gate; page data is only present when ``owned`` is true."""

    owned: bool
    footprint: Footprint | None = None
    content: list[ContentItem] = field(default_factory=list)
    tiles: list[dict[str, Any]] = field(default_factory=list)


def check_ownership(
    db: Session,
    caller: VerifiedIdentity | None,
    slug: str,
) -> OwnershipResult:
    """Return the page and its ordered content if ``caller`` owns ``slug``.

    Anonymous callers, unknown slugs and foreign pages all yield the same
    ``owned=False`` answer. Read only.
    """
    if caller is None:
        return OwnershipResult(owned=False)

    resolved = resolve_page(db, slug)
    if resolved is None:
        return OwnershipResult(owned=False)
    footprint, serial = resolved

    if footprint.user_id != caller.user_id:
        logger.debug("Caller %s does not own %s", caller.user_id, slug)
        return OwnershipResult(owned=False)

    content = list_tiles(db, "content", PageScope(footprint.id))
    return OwnershipResult(
        owned=True,
        footprint=footprint,
        content=content,
        tiles=merged_serial_tiles(db, serial),
    )
