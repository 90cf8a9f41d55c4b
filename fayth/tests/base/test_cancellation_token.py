"""Unit tests for cooperative cancellation primitives.

Covers idempotent cancel (first reason wins), wait() and the module-level
raise_if_cancelled helper.
"""
from __future__ import annotations

import threading

import pytest

from fayth.base.cancellation import CancellationToken, CancelledError, raise_if_cancelled


def test_cancel_is_idempotent_and_keeps_first_reason():
    token = CancellationToken()

    token.cancel(reason="stop")
    token.cancel(reason="ignored")

    assert token.cancelled is True and token.reason == "stop"  # nosec B101


def test_raise_if_cancelled_helpers():
    raise_if_cancelled(None)
    token = CancellationToken()
    raise_if_cancelled(token)
    token.cancel("terminate")
    with pytest.raises(CancelledError) as exc_info:
        raise_if_cancelled(token)
    assert exc_info.value.reason == "terminate"  # nosec B101


def test_wait_returns_when_cancelled_from_another_thread():
    token = CancellationToken()
    timer = threading.Timer(0.01, token.cancel)
    timer.start()
    try:
        assert token.wait(5.0) is True  # nosec B101
    finally:
        timer.cancel()


def test_wait_times_out_when_not_cancelled():
    assert CancellationToken().wait(0.001) is False  # nosec B101
