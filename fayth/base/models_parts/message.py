"""
Message DTO used across the library.

A `Message` is an ordered sequence of content parts plus its author `Role`
and free-form metadata. Callers build messages for requests; the transport
builds them when converting response choices and stream deltas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .content_part import ContentPart, TextContent


class Role(str, Enum):
    """Role of a message author."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    TOOL = "tool"


@dataclass
class Message:
    """A chat message made of typed content parts.

    Attributes:
        role: Author role.
        contents: Ordered content parts owned by this message.
        metadata: String annotations (e.g. ``finish_reason``, ``response_id``).
        properties: Arbitrary JSON-serializable values (e.g. token usage).
        index: Logical position of a response fragment, i.e. the choice index
            it belongs to. ``0`` for caller-built messages.
    """

    role: Role
    contents: List[ContentPart] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)
    properties: Dict[str, Any] = field(default_factory=dict)
    index: int = 0

    def text(self) -> List[str]:
        """Return every text value in content order, skipping non-text parts."""
        return [c.text for c in self.contents if isinstance(c, TextContent)]

    def joined_text(self, sep: str = "") -> str:
        """Return the text values joined by ``sep``."""
        return sep.join(self.text())


def new_message(role: Role | str, *contents: ContentPart) -> Message:
    """Build a message from content parts."""
    return Message(role=Role(role), contents=list(contents))


def new_text_message(role: Role | str, *texts: str) -> Message:
    """Build a message holding one ``TextContent`` per text argument."""
    return Message(role=Role(role), contents=[TextContent(text=t) for t in texts])


__all__ = [
    "Message",
    "Role",
    "new_message",
    "new_text_message",
]
