# tests/services/test_draft_cache.py
"""Tests for the advisory draft cache."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

from footprint_api.core.settings import settings
from footprint_api.schemas.draft import DraftContent, DraftFootprint
from footprint_api.services.draft_cache import (
    DraftCache,
    FileDraftStorage,
    MemoryDraftStorage,
    default_draft_cache,
    draft_key,
)


def _draft(slug: str = "fp-1002-abcd") -> DraftFootprint:
    return DraftFootprint(
        slug=slug,
        display_name="Night Owl",
        content=[DraftContent(id="c1", url="https://example.com", title="example.com")],
    )


def test_key_format() -> None:
    assert draft_key("fp-1002-abcd") == "fp:draft:fp-1002-abcd"


def test_save_then_load(drafts: DraftCache) -> None:
    drafts.save("fp-1002-abcd", _draft())

    loaded = drafts.load("fp-1002-abcd")

    assert loaded is not None
    assert loaded.display_name == "Night Owl"
    assert loaded.content[0].id == "c1"
    assert loaded.updated_at > 1_000_000_000_000


def test_missing_draft(drafts: DraftCache) -> None:
    assert drafts.load("nothing") is None
    assert drafts.exists("nothing") is False


def test_corrupt_draft_is_absent(caplog) -> None:
    storage = MemoryDraftStorage()
    storage.set(draft_key("s"), "{not json")
    cache = DraftCache(storage)

    with caplog.at_level(logging.WARNING):
        assert cache.load("s") is None
    assert "unreadable draft" in caplog.text


def test_clear_is_idempotent(drafts: DraftCache) -> None:
    drafts.save("s", _draft("s"))
    drafts.clear("s")
    drafts.clear("s")

    assert drafts.exists("s") is False


def test_storage_failures_are_swallowed() -> None:
    storage = MagicMock()
    storage.get.side_effect = OSError("quota")
    storage.set.side_effect = OSError("quota")
    storage.delete.side_effect = OSError("quota")
    cache = DraftCache(storage)

    cache.save("s", _draft("s"))
    cache.clear("s")
    assert cache.load("s") is None


def test_file_storage_round_trip(tmp_path) -> None:
    cache = DraftCache(FileDraftStorage(tmp_path / "drafts"))

    cache.save("fp-1002-abcd", _draft())

    assert cache.exists("fp-1002-abcd")
    assert len(list((tmp_path / "drafts").iterdir())) == 1
    cache.clear("fp-1002-abcd")
    assert cache.load("fp-1002-abcd") is None


def test_file_storage_keeps_similar_slugs_apart(tmp_path) -> None:
    cache = DraftCache(FileDraftStorage(tmp_path))
    cache.save("a/b", _draft("a/b").model_copy(update={"display_name": "slash"}))
    cache.save("a_b", _draft("a_b").model_copy(update={"display_name": "underscore"}))

    assert cache.load("a/b").display_name == "slash"
    assert cache.load("a_b").display_name == "underscore"
    assert len(list(tmp_path.iterdir())) == 2


def test_default_cache_uses_configured_directory(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(settings, "draft_dir", str(tmp_path / "configured"))

    cache = default_draft_cache()
    cache.save("s", _draft("s"))

    assert (tmp_path / "configured").is_dir()
    assert cache.load("s").display_name == "Night Owl"
