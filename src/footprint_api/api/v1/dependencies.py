"""Shared API dependencies for identity verification and slug capabilities."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from footprint_api.core.security import decode_access_token
from footprint_api.core.settings import settings
from footprint_api.db.session import get_db
from footprint_api.models import User
from footprint_api.services.capabilities import (
    SlugCapability,
    VerifiedIdentity,
    issue_slug_capability,
)
from footprint_api.services.parser import UrlParser, parse_url

# HTTP Bearer scheme; absence is allowed so anonymous callers reach the gate.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_optional_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> VerifiedIdentity | None:
    """Return the verified caller, or None for anonymous or invalid tokens."""
    if credentials is None:
        return None
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        return None
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        return None
    return VerifiedIdentity(user=user)


OptionalIdentityDep = Annotated[VerifiedIdentity | None, Depends(get_optional_identity)]


def get_verified_identity(identity: OptionalIdentityDep) -> VerifiedIdentity:
    """Require a verified caller.

    Raises:
        HTTPException: If no valid session token was presented.
    """
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    return identity


VerifiedIdentityDep = Annotated[VerifiedIdentity, Depends(get_verified_identity)]


def slug_capability(db: Session, slug: str, identity: VerifiedIdentity | None) -> SlugCapability:
    """Build the capability for slug-scoped mutations under the configured policy."""
    return issue_slug_capability(
        db,
        slug,
        identity,
        require_owner=settings.require_verified_tile_owner,
    )


def get_url_parser() -> UrlParser:
    """Return the URL parser collaborator used when tiles are added."""
    return parse_url


UrlParserDep = Annotated[UrlParser, Depends(get_url_parser)]
