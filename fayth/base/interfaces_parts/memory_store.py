"""MessageMemory Protocol (single-class module).

Interface for conversation persistence collaborators.
"""

from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from ..models import Message


@runtime_checkable
class MessageMemory(Protocol):
    """Stores and restores a conversation.

    Implementations raise on failure rather than returning partial results.
    """

    def save(self, messages: Sequence[Message]) -> None:  # pragma: no cover - interface
        """Replace the stored conversation with ``messages``."""
        ...

    def load(self) -> List[Message]:  # pragma: no cover - interface
        """Return the stored conversation (empty when nothing was saved)."""
        ...
