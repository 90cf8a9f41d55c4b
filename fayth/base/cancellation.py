"""Cooperative cancellation primitives (public API facade).

``CancellationToken`` plays the role of a request context: callers create
one, pass it to ``generate``, and call ``cancel()`` to stop an in-flight
stream. ``CancelledError`` is raised (or recorded on a ``Generation``) by
operations that observe the request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken, raise_if_cancelled

__all__ = ["CancellationToken", "CancelledError", "raise_if_cancelled"]
