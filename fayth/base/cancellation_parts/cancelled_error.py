"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
of requests and streams.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation observes a cancellation request.

    Kept distinct from transport failures so consumers can tell "the caller
    stopped the stream" apart from "the stream broke" when inspecting
    ``Generation.error``.
    """

    @property
    def reason(self) -> str:
        """Reason string supplied when the token was cancelled."""
        return self.args[0] if self.args else "operation cancelled"


__all__ = ["CancelledError"]
