"""Models parts package public surface.

Re-exports individual value types so callers can import from
``fayth.base.models_parts`` if needed, while ``fayth.base.models`` remains the
primary stable import path.
"""

from .content_part import ContentPart, ContentPartType, ImageContent, TextContent, content_part_from_dict
from .message import Message, Role, new_message, new_text_message
from .message_codec import (
    marshal_message,
    marshal_messages,
    message_from_dict,
    message_to_dict,
    unmarshal_message,
    unmarshal_messages,
)
from .generation import Generation, GenerationState

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
