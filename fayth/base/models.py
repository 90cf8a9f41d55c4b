"""
Provider-agnostic domain models public surface.

This module re-exports the one-class-per-file implementations under
``fayth.base.models_parts`` so applications have a single import path for
messages, content parts, the wire codec and ``Generation``.
"""

from .models_parts.content_part import (
    ContentPart,
    ContentPartType,
    ImageContent,
    TextContent,
    content_part_from_dict,
)
from .models_parts.message import Message, Role, new_message, new_text_message
from .models_parts.message_codec import (
    marshal_message,
    marshal_messages,
    message_from_dict,
    message_to_dict,
    unmarshal_message,
    unmarshal_messages,
)
from .models_parts.generation import Generation, GenerationState

__all__ = [
    "ContentPart",
    "ContentPartType",
    "TextContent",
    "ImageContent",
    "content_part_from_dict",
    "Message",
    "Role",
    "new_message",
    "new_text_message",
    "message_to_dict",
    "message_from_dict",
    "marshal_message",
    "unmarshal_message",
    "marshal_messages",
    "unmarshal_messages",
    "Generation",
    "GenerationState",
]
