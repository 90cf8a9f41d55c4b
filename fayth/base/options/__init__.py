"""Model options: value type, override helpers, merge and validation."""

from .model_options import MessageHandler, ModelOption, ModelOptions, ResponseFormat, merge_options
from .option_funcs import (
    with_frequency_penalty,
    with_json_mode,
    with_log_probs,
    with_max_tokens,
    with_message_handler,
    with_model,
    with_presence_penalty,
    with_response_format,
    with_seed,
    with_stop,
    with_stream,
    with_temperature,
    with_text_mode,
    with_top_log_probs,
    with_top_p,
    with_user,
)
from .validation import validate_options

__all__ = [
    "MessageHandler",
    "ModelOption",
    "ModelOptions",
    "ResponseFormat",
    "merge_options",
    "validate_options",
    "with_frequency_penalty",
    "with_json_mode",
    "with_log_probs",
    "with_max_tokens",
    "with_message_handler",
    "with_model",
    "with_presence_penalty",
    "with_response_format",
    "with_seed",
    "with_stop",
    "with_stream",
    "with_temperature",
    "with_text_mode",
    "with_top_log_probs",
    "with_top_p",
    "with_user",
]
