"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class handed to ``generate``/``completion``
calls. Producers poll it at every suspension point (before sending, before
and after each stream read) and stop without yielding further items once it
is set.
"""

from __future__ import annotations

from threading import Event, Lock
from typing import Optional

from .cancelled_error import CancelledError


class CancellationToken:
    """A cooperative cancellation token.

    Thread-safe: ``cancel`` may be called from any thread while a stream is
    being consumed on another.
    """

    def __init__(self) -> None:
        self._event = Event()
        self._reason: Optional[str] = None
        self._lock = Lock()

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._event.is_set()

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cooperative cancellation.

        Idempotent: the first reason wins.
        """
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if the token is cancelled."""
        if self._event.is_set():
            raise CancelledError(self._reason or "operation cancelled")

    def wait(self, timeout: float | None = None) -> bool:
        """Block up to ``timeout`` seconds; return True if cancelled meanwhile."""
        return self._event.wait(timeout)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self.cancelled}, reason={self._reason!r})"


def raise_if_cancelled(token: "CancellationToken | None") -> None:
    """Poll an optional token; a ``None`` token never cancels."""
    if token is not None:
        token.raise_if_cancelled()


__all__ = ["CancellationToken", "raise_if_cancelled"]
