# tests/services/test_playback.py
"""Tests for single-player audio arbitration."""

from __future__ import annotations

from unittest.mock import MagicMock

from footprint_api.services.playback import PlaybackArbiter


def test_request_mutes_previous_holder() -> None:
    arbiter = PlaybackArbiter()
    mute_a, mute_b = MagicMock(), MagicMock()
    arbiter.register("a", mute_a)
    arbiter.register("b", mute_b)

    assert arbiter.request("a") is None
    assert arbiter.request("b") == "a"

    mute_a.assert_called_once_with()
    mute_b.assert_not_called()
    assert arbiter.holder == "b"


def test_request_by_holder_is_noop() -> None:
    arbiter = PlaybackArbiter()
    mute = MagicMock()
    arbiter.register("a", mute)

    arbiter.request("a")
    assert arbiter.request("a") is None
    mute.assert_not_called()


def test_release_and_unregister_drop_holder() -> None:
    arbiter = PlaybackArbiter()
    arbiter.register("a", MagicMock())
    arbiter.register("b", MagicMock())

    arbiter.request("a")
    arbiter.release("b")
    assert arbiter.holder == "a"
    arbiter.release("a")
    assert arbiter.holder is None

    arbiter.request("b")
    arbiter.unregister("b")
    assert arbiter.holder is None


def test_failing_mute_callback_does_not_block_transfer() -> None:
    arbiter = PlaybackArbiter()
    arbiter.register("a", MagicMock(side_effect=RuntimeError("gone")))
    arbiter.register("b", MagicMock())

    arbiter.request("a")

    assert arbiter.request("b") == "a"
    assert arbiter.holder == "b"
