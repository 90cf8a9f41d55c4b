"""
Stable JSON codec for :class:`Message`.

Wire shape::

    {"role": "user",
     "contents": [{"type": "text", "text": "..."}, {"type": "image", ...}],
     "metadata": {...},      # omitted when empty
     "properties": {...}}    # omitted when empty

Decoding reads the role and the raw content objects first, then dispatches
each object on its ``type`` discriminator (see ``content_part_from_dict``).
"""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Mapping

from ..errors import ErrorCode, ProviderError
from .content_part import content_part_from_dict
from .message import Message, Role


def message_to_dict(msg: Message) -> Dict[str, Any]:
    """Return the JSON-serializable form of ``msg``."""
    out: Dict[str, Any] = {
        "role": msg.role.value,
        "contents": [c.to_dict() for c in msg.contents],
    }
    if msg.metadata:
        out["metadata"] = dict(msg.metadata)
    if msg.properties:
        out["properties"] = dict(msg.properties)
    return out


def message_from_dict(obj: Any) -> Message:
    """Decode a message object produced by :func:`message_to_dict`.

    Raises:
        ProviderError: ``DECODE`` for a non-object payload, an unknown role or
            a non-list ``contents``, or non-object ``metadata``/``properties``.
        UnsupportedContentKindError: For an unknown content discriminator.
    """
    if not isinstance(obj, Mapping):
        raise ProviderError(code=ErrorCode.DECODE, message="message must be a JSON object")
    try:
        role = Role(obj.get("role"))
    except ValueError as exc:
        raise ProviderError(code=ErrorCode.DECODE, message=f"unknown message role: {obj.get('role')!r}", raw=exc) from exc
    raw_contents = obj.get("contents") or []
    if not isinstance(raw_contents, list):
        raise ProviderError(code=ErrorCode.DECODE, message="message 'contents' must be a list")
    contents = [content_part_from_dict(raw) for raw in raw_contents]
    metadata = obj.get("metadata") or {}
    if not isinstance(metadata, Mapping):
        raise ProviderError(code=ErrorCode.DECODE, message="message 'metadata' must be an object")
    properties = obj.get("properties") or {}
    if not isinstance(properties, Mapping):
        raise ProviderError(code=ErrorCode.DECODE, message="message 'properties' must be an object")
    return Message(
        role=role,
        contents=contents,
        metadata={str(k): str(v) for k, v in metadata.items()},
        properties=dict(properties),
    )


def _loads(data: bytes | str) -> Any:
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ProviderError(code=ErrorCode.DECODE, message=f"invalid message JSON: {exc}", raw=exc) from exc


def marshal_message(msg: Message) -> bytes:
    """Serialize one message to UTF-8 JSON bytes."""
    return json.dumps(message_to_dict(msg), ensure_ascii=False).encode("utf-8")


def unmarshal_message(data: bytes | str) -> Message:
    """Deserialize one message from JSON bytes or text."""
    return message_from_dict(_loads(data))


def marshal_messages(messages: Iterable[Message]) -> bytes:
    """Serialize a list of messages to a JSON array."""
    return json.dumps([message_to_dict(m) for m in messages], ensure_ascii=False).encode("utf-8")


def unmarshal_messages(data: bytes | str) -> List[Message]:
    """Deserialize a JSON array of messages; empty input yields ``[]``."""
    text = data.decode("utf-8", "replace") if isinstance(data, bytes) else data
    if not text.strip():
        return []
    obj = _loads(text)
    if not isinstance(obj, list):
        raise ProviderError(code=ErrorCode.DECODE, message="message list must be a JSON array")
    return [message_from_dict(item) for item in obj]


__all__ = [
    "message_to_dict",
    "message_from_dict",
    "marshal_message",
    "unmarshal_message",
    "marshal_messages",
    "unmarshal_messages",
]
