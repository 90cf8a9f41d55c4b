"""
Polymorphic message content parts.

Content is a closed set of variants, each identified by a ``kind``
discriminator that is serialized as the ``type`` key, always first in the
JSON object. Decoding probes ``type`` and dispatches to the variant's own
``from_dict``; an unknown discriminator is an error, never silently dropped.

Variants:
    - :class:`TextContent` (``"text"``): plain text.
    - :class:`ImageContent` (``"image"``): raw image bytes plus MIME type and a
      source type (``"base64"`` for inline bytes, ``"url"`` when ``data``
      holds a URL). Bytes travel as base64 in JSON.
"""
from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Literal, Mapping, Union

from ..errors import ErrorCode, ProviderError, UnsupportedContentKindError


# Discriminator values understood by the codec.
ContentPartType = Literal["text", "image"]

TEXT_KIND: ContentPartType = "text"
IMAGE_KIND: ContentPartType = "image"


@dataclass(frozen=True)
class TextContent:
    """Plain text content of a message."""

    kind: ClassVar[ContentPartType] = TEXT_KIND

    text: str

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable form, discriminator first."""
        return {"type": self.kind, "text": self.text}

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> "TextContent":
        text = obj.get("text", "")
        if not isinstance(text, str):
            raise ProviderError(code=ErrorCode.DECODE, message="text content: 'text' must be a string")
        return cls(text=text)


@dataclass(frozen=True)
class ImageContent:
    """Image content carried inline (base64) or by reference (url).

    Attributes:
        source_type: ``"base64"`` or ``"url"``.
        mime_type: MIME type such as ``"image/png"``.
        data: Raw image bytes, or the UTF-8 URL when ``source_type`` is url.
    """

    kind: ClassVar[ContentPartType] = IMAGE_KIND

    source_type: str
    mime_type: str
    data: bytes

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable form, discriminator first."""
        return {
            "type": self.kind,
            "source_type": self.source_type,
            "mime_type": self.mime_type,
            "data": base64.b64encode(self.data).decode("ascii"),
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> "ImageContent":
        raw = obj.get("data") or ""
        try:
            data = base64.b64decode(raw, validate=True) if raw else b""
        except (binascii.Error, TypeError, ValueError) as exc:
            raise ProviderError(code=ErrorCode.DECODE, message=f"image content: invalid base64 data: {exc}", raw=exc) from exc
        return cls(
            source_type=str(obj.get("source_type", "")),
            mime_type=str(obj.get("mime_type", "")),
            data=data,
        )

    def data_url(self) -> str:
        """Return a URL usable by the wire format (data URL for inline bytes)."""
        if self.source_type == "url":
            return self.data.decode("utf-8")
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


ContentPart = Union[TextContent, ImageContent]

_VARIANTS = {
    TEXT_KIND: TextContent,
    IMAGE_KIND: ImageContent,
}


def content_part_from_dict(obj: Any) -> ContentPart:
    """Decode one serialized content object by its ``type`` discriminator.

    Raises:
        UnsupportedContentKindError: When ``type`` is missing or unknown.
        ProviderError: When the object is not a mapping or a variant field is
            malformed (code ``DECODE``).
    """
    if not isinstance(obj, Mapping):
        raise ProviderError(code=ErrorCode.DECODE, message="content part must be a JSON object")
    kind = obj.get("type")
    variant = _VARIANTS.get(kind) if isinstance(kind, str) else None
    if variant is None:
        raise UnsupportedContentKindError(message=f"unknown content kind: {kind!r}", kind=kind if isinstance(kind, str) else None)
    return variant.from_dict(obj)


__all__ = [
    "ContentPart",
    "ContentPartType",
    "TextContent",
    "ImageContent",
    "TEXT_KIND",
    "IMAGE_KIND",
    "content_part_from_dict",
]
