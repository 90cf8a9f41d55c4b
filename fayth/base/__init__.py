"""
fayth base package

Exports the provider-agnostic contracts shared by every model implementation:

- Models: messages, content parts, the message codec and ``Generation``
- Options: ``ModelOptions`` with its override helpers, merge and validation
- Pipeline: middleware chain over an HTTP executor
- Errors, cancellation and structured logging
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    APIError,
    ErrorCode,
    OptionsValidationError,
    PipelineConfigError,
    ProviderError,
    UnsupportedContentKindError,
    classify_exception,
)
from .interfaces import MessageMemory, Model
from .logging import LogContext, configure_logger, get_logger
from .memory import InMemoryMessageStore
from .models import (
    ContentPart,
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
from .options import ModelOption, ModelOptions, ResponseFormat, merge_options, validate_options
from .pipeline import Executor, HttpxExecutor, Middleware, Pipeline

__all__ = [
    # Models
    "ContentPart",
    "TextContent",
    "ImageContent",
    "Role",
    "Message",
    "new_message",
    "new_text_message",
    "marshal_message",
    "unmarshal_message",
    "marshal_messages",
    "unmarshal_messages",
    "Generation",
    "GenerationState",
    # Options
    "ModelOption",
    "ModelOptions",
    "ResponseFormat",
    "merge_options",
    "validate_options",
    # Pipeline
    "Executor",
    "Middleware",
    "Pipeline",
    "HttpxExecutor",
    # Interfaces
    "Model",
    "MessageMemory",
    "InMemoryMessageStore",
    # Errors
    "ErrorCode",
    "ProviderError",
    "APIError",
    "UnsupportedContentKindError",
    "OptionsValidationError",
    "PipelineConfigError",
    "classify_exception",
    # Cancellation
    "CancellationToken",
    "CancelledError",
    # Logging
    "LogContext",
    "get_logger",
    "configure_logger",
]
