"""In-memory implementation of MessageMemory.

Reference implementation keyed by conversation id. Conversations are stored
in their marshaled byte form so a save/load cycle exercises the same codec a
persistent backend would use.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Sequence

from ..models import Message, marshal_messages, unmarshal_messages


class InMemoryMessageStore:
    """Dictionary-backed conversation store."""

    def __init__(self, conversation_id: str = "default") -> None:
        self.conversation_id = conversation_id
        self._data: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def save(self, messages: Sequence[Message]) -> None:
        payload = marshal_messages(messages)
        with self._lock:
            self._data[self.conversation_id] = payload

    def load(self) -> List[Message]:
        with self._lock:
            payload = self._data.get(self.conversation_id, b"")
        return unmarshal_messages(payload)

    def clear(self) -> None:
        with self._lock:
            self._data.pop(self.conversation_id, None)

    def for_conversation(self, conversation_id: str) -> "InMemoryMessageStore":
        """Return a view of the same storage bound to another conversation."""
        view = InMemoryMessageStore.__new__(InMemoryMessageStore)
        view.conversation_id = conversation_id
        view._data = self._data
        view._lock = self._lock
        return view


__all__ = ["InMemoryMessageStore"]
