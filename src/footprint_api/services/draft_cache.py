"""Client-resident draft cache keyed by slug.

Drafts are advisory: every storage or decoding failure is logged and swallowed
so that editing never breaks because the cache misbehaved. There is no expiry;
a draft lives until it is cleared or overwritten.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from footprint_api.core.settings import settings
from footprint_api.db.time import epoch_millis
from footprint_api.schemas.draft import DraftFootprint

__all__ = [
    "DRAFT_PREFIX",
    "DraftStorage",
    "MemoryDraftStorage",
    "FileDraftStorage",
    "DraftCache",
    "draft_key",
    "default_draft_cache",
]

logger = logging.getLogger(__name__)

DRAFT_PREFIX = "fp:draft:"


def draft_key(slug: str) -> str:
    """Return the storage key for ``slug``."""
    return f"{DRAFT_PREFIX}{slug}"


class DraftStorage(Protocol):
    """Minimal string key/value store, shaped like browser local storage."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryDraftStorage:
    """Dictionary-backed storage."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete(self, key: str) -> None:
        self._items.pop(key, None)


class FileDraftStorage:
    """Stores each key as one JSON file inside ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{quote(key, safe='')}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class DraftCache:
    """Load, save, clear and probe drafts stored in a ``DraftStorage``."""

    def __init__(self, storage: DraftStorage) -> None:
        self.storage = storage

    def load(self, slug: str) -> DraftFootprint | None:
        """Return the stored draft or None if missing or unreadable."""
        try:
            data = self.storage.get(draft_key(slug))
            if not data:
                return None
            return DraftFootprint.model_validate_json(data)
        except (OSError, PydanticValidationError, ValueError) as exc:
            logger.warning("Discarding unreadable draft for %s: %s", slug, exc)
            return None

    def save(self, slug: str, draft: DraftFootprint) -> None:
        """Overwrite the draft for ``slug``, stamping ``updated_at`` with now."""
        stamped = draft.model_copy(update={"updated_at": epoch_millis()})
        try:
            self.storage.set(draft_key(slug), stamped.model_dump_json())
        except OSError as exc:
            logger.error("Failed to save draft for %s: %s", slug, exc)

    def clear(self, slug: str) -> None:
        """Remove the draft for ``slug``; missing drafts are ignored."""
        try:
            self.storage.delete(draft_key(slug))
        except OSError as exc:
            logger.warning("Failed to clear draft for %s: %s", slug, exc)

    def exists(self, slug: str) -> bool:
        return self.load(slug) is not None


def default_draft_cache() -> DraftCache:
    """Return a file-backed cache rooted at the configured ``DRAFT_DIR``."""
    return DraftCache(FileDraftStorage(settings.draft_dir))
