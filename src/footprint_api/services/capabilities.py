"""Capabilities that authorize tile mutations.

Two kinds of proof reach the service layer:

* ``VerifiedIdentity`` comes from a verified session token and is required for
  page-scoped content mutations.
* ``SlugCapability`` comes from resolving a public slug. Serial-scoped link and
  library mutations trust it without checking the caller, so anyone who knows
  a slug can mutate that owner's links and library. ``issue_slug_capability``
  is the single place where that policy can be tightened.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from footprint_api.models import User

from .errors import ForbiddenError, NotFoundError
from .slug_resolver import resolve_page

__all__ = ["VerifiedIdentity", "SlugCapability", "issue_slug_capability"]


@dataclass(frozen=True)
class VerifiedIdentity:
    """An identity whose session token has been verified upstream."""

    user: User

    @property
    def user_id(self) -> str:
        return self.user.id

    @property
    def serial(self) -> int:
        return self.user.serial_number


@dataclass(frozen=True)
class SlugCapability:
    """Permission to mutate serial-scoped tiles, derived from a slug."""

    slug: str
    serial: int
    footprint_id: str
    verified: bool = False


def issue_slug_capability(
    db: Session,
    slug: str,
    identity: VerifiedIdentity | None = None,
    *,
    require_owner: bool = False,
) -> SlugCapability:
    """Resolve ``slug`` into a capability for its owner's serial scope.

    Raises:
        NotFoundError: If the slug does not resolve.
        ForbiddenError: If ``require_owner`` is set and ``identity`` is absent
            or does not own the slug.
    """
    resolved = resolve_page(db, slug)
    if resolved is None:
        raise NotFoundError("Footprint not found")
    footprint, serial = resolved

    owns = identity is not None and identity.serial == serial
    if require_owner and not owns:
        raise ForbiddenError("Not your footprint")
    return SlugCapability(slug=slug, serial=serial, footprint_id=footprint.id, verified=owns)
