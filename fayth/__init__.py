"""fayth package

Client library for LLM chat completion services.

Purpose:
    Provide a small, stable API for sending conversations to a completion
    service and consuming the answer either as one buffered payload or as an
    incrementally arriving stream, through the same ``Generation`` iterator.

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`Message`, :class:`Role`, :class:`TextContent`,
      :class:`ImageContent`, :class:`Generation` and the message codec
    - Options: :class:`ModelOptions` and the ``with_*`` override helpers
    - Models: :class:`ChatModel` (OpenAI chat completions), :class:`FakeModel`
    - Errors: :class:`ProviderError`, :class:`APIError`, :class:`ErrorCode`
    - Cancellation: :class:`CancellationToken`, :class:`CancelledError`
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import APIError, ErrorCode, ProviderError
from .base.interfaces import MessageMemory, Model
from .base.memory import InMemoryMessageStore
from .base.models import (
    Generation,
    GenerationState,
    ImageContent,
    Message,
    Role,
    TextContent,
    marshal_message,
    marshal_messages,
    new_message,
    new_text_message,
    unmarshal_message,
    unmarshal_messages,
)
from .base.options import (
    ModelOptions,
    merge_options,
    validate_options,
    with_json_mode,
    with_max_tokens,
    with_message_handler,
    with_model,
    with_stop,
    with_stream,
    with_temperature,
    with_text_mode,
    with_top_p,
)
from .mock import FakeModel
from .openai import ChatModel

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Models
    "Message",
    "Role",
    "TextContent",
    "ImageContent",
    "new_message",
    "new_text_message",
    "marshal_message",
    "unmarshal_message",
    "marshal_messages",
    "unmarshal_messages",
    "Generation",
    "GenerationState",
    # Options
    "ModelOptions",
    "merge_options",
    "validate_options",
    "with_model",
    "with_temperature",
    "with_max_tokens",
    "with_top_p",
    "with_stop",
    "with_stream",
    "with_json_mode",
    "with_text_mode",
    "with_message_handler",
    # Implementations
    "Model",
    "ChatModel",
    "FakeModel",
    # Memory
    "MessageMemory",
    "InMemoryMessageStore",
    # Errors
    "ProviderError",
    "APIError",
    "ErrorCode",
    # Cancellation
    "CancellationToken",
    "CancelledError",
]
