"""Conversation memory implementations."""

from .in_memory_store import InMemoryMessageStore

__all__ = ["InMemoryMessageStore"]
