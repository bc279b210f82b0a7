# tests/services/test_capabilities.py
"""Tests for slug capabilities and page helpers."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from footprint_api.models import Footprint
from footprint_api.services.capabilities import VerifiedIdentity, issue_slug_capability
from footprint_api.services.errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from footprint_api.services.pages import (
    create_page,
    generate_slug,
    get_public_page,
    list_pages,
    require_owned_page,
)
from footprint_api.services.slug_resolver import resolve_serial


class TestSlugCapability:
    def test_slug_alone_grants_capability(self, db_session: Session, owner) -> None:
        capability = issue_slug_capability(db_session, owner.footprint.slug)

        assert capability.serial == owner.serial
        assert capability.footprint_id == owner.footprint.id
        assert capability.verified is False

    def test_owner_is_marked_verified(self, db_session: Session, owner) -> None:
        capability = issue_slug_capability(
            db_session, owner.footprint.slug, VerifiedIdentity(owner.user), require_owner=True
        )
        assert capability.verified is True

    def test_policy_rejects_strangers(self, db_session: Session, owner, stranger) -> None:
        with pytest.raises(ForbiddenError):
            issue_slug_capability(
                db_session,
                owner.footprint.slug,
                VerifiedIdentity(stranger.user),
                require_owner=True,
            )
        with pytest.raises(ForbiddenError):
            issue_slug_capability(db_session, owner.footprint.slug, None, require_owner=True)

    def test_unknown_slug(self, db_session: Session, owner) -> None:
        with pytest.raises(NotFoundError):
            issue_slug_capability(db_session, "fp-9999-none")
        assert resolve_serial(db_session, "fp-9999-none") is None


class TestPages:
    def test_additional_page(self, db_session: Session, owner) -> None:
        page = create_page(db_session, owner.user, " Music ", "♪")

        assert page.name == "Music"
        assert page.is_primary is False
        assert page.slug.startswith(f"fp-{owner.serial}-")
        assert len(page.slug.rsplit("-", 1)[1]) == 6
        assert [p.id for p in list_pages(db_session, owner.user)] == [owner.footprint.id, page.id]

    def test_additional_page_needs_name(self, db_session: Session, owner) -> None:
        with pytest.raises(ValidationError):
            create_page(db_session, owner.user, "  ")

    def test_slug_collisions_exhaust_attempts(self, db_session: Session, owner, monkeypatch) -> None:
        monkeypatch.setattr(
            "footprint_api.services.pages._random_suffix",
            lambda length: owner.footprint.slug.rsplit("-", 1)[1],
        )
        with pytest.raises(ConflictError):
            generate_slug(db_session, owner.serial)

    def test_public_page_counts_views(self, db_session: Session, owner) -> None:
        page, content = get_public_page(db_session, owner.footprint.slug)
        get_public_page(db_session, owner.footprint.slug)

        assert content == []
        assert page.view_count == 2

    def test_private_page_is_hidden(self, db_session: Session, owner) -> None:
        page = db_session.get(Footprint, owner.footprint.id)
        page.is_public = False
        db_session.flush()

        with pytest.raises(NotFoundError):
            get_public_page(db_session, owner.footprint.slug)

    def test_require_owned_page(self, db_session: Session, owner, stranger) -> None:
        assert require_owned_page(db_session, owner.user.id, owner.footprint.id).id == owner.footprint.id
        with pytest.raises(ForbiddenError):
            require_owned_page(db_session, stranger.user.id, owner.footprint.id)
        with pytest.raises(ForbiddenError):
            require_owned_page(db_session, owner.user.id, "missing")
