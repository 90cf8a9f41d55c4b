"""OpenAI chat completions client.

Public surface: :class:`ChatModel` (the ``Model`` implementation), the lower
level :class:`ChatService` transport, call options and the wire DTOs.
"""

from .call_options import (
    CallConfig,
    CallOption,
    resolve_call_config,
    with_api_key,
    with_base_url,
    with_executor,
    with_organization,
    with_project,
)
from .chat import ChatResponse, ChatService, build_pipeline
from .chat_types import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ErrorEnvelope,
)
from .model import ChatModel, project_chunks
from .roles import to_model_role, to_openai_role

__all__ = [
    "ChatModel",
    "ChatService",
    "ChatResponse",
    "build_pipeline",
    "project_chunks",
    "CallConfig",
    "CallOption",
    "resolve_call_config",
    "with_api_key",
    "with_base_url",
    "with_executor",
    "with_organization",
    "with_project",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionChunk",
    "ErrorEnvelope",
    "to_model_role",
    "to_openai_role",
]
