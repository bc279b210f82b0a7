"""Arbitration of a single audible player among many registered ones."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

__all__ = ["PlaybackArbiter"]

logger = logging.getLogger(__name__)

MuteCallback = Callable[[], None]


class PlaybackArbiter:
    """Grants audio exclusivity to at most one registered player.

    Ownership moves on ``request``: the previous holder's mute callback runs
    and the requester becomes the holder. ``release`` and ``unregister`` drop
    ownership without notifying anyone.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._callbacks: dict[str, MuteCallback] = {}
        self._holder: str | None = None

    @property
    def holder(self) -> str | None:
        return self._holder

    def register(self, player_id: str, mute: MuteCallback) -> None:
        with self._lock:
            self._callbacks[player_id] = mute

    def unregister(self, player_id: str) -> None:
        with self._lock:
            self._callbacks.pop(player_id, None)
            if self._holder == player_id:
                self._holder = None

    def request(self, player_id: str) -> str | None:
        """Make ``player_id`` the holder and return the silenced previous holder."""
        with self._lock:
            previous = self._holder
            mute = None
            if previous is not None and previous != player_id:
                mute = self._callbacks.get(previous)
            self._holder = player_id
        if mute is None:
            return None
        try:
            mute()
        except Exception:
            logger.exception("Mute callback for %s failed", previous)
        return previous

    def release(self, player_id: str) -> None:
        with self._lock:
            if self._holder == player_id:
                self._holder = None
