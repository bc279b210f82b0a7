"""Editor page-load decision between the store and the local draft."""

from __future__ import annotations

from dataclasses import dataclass

from footprint_api.schemas.draft import DraftFootprint

from .draft_cache import DraftCache
from .ownership import OwnershipResult

__all__ = ["EditorState", "load_editor_state"]


@dataclass
class EditorState:
    """What the editor should show for a slug.

    ``source`` is ``"remote"`` when the caller owns the persisted page and
    ``"draft"`` otherwise.
    """

    source: str
    ownership: OwnershipResult
    draft: DraftFootprint | None = None

    @property
    def is_remote(self) -> bool:
        return self.source == "remote"


def load_editor_state(
    ownership: OwnershipResult,
    drafts: DraftCache,
    slug: str,
) -> EditorState:
    """Pick the editing source for ``slug``.

    Owned pages are edited remotely and the draft cache is not consulted.
    Otherwise the stored draft is returned, or a blank one that has not been
    saved yet. Neither side is mutated.
    """
    if ownership.owned:
        return EditorState(source="remote", ownership=ownership)
    draft = drafts.load(slug) or DraftFootprint(slug=slug)
    return EditorState(source="draft", ownership=ownership, draft=draft)
