"""Override functions for :class:`ModelOptions`.

Each ``with_*`` helper returns a ``ModelOption`` closure that sets one field.
They are applied by :func:`merge_options` in declaration order.
"""
from __future__ import annotations

from .model_options import MessageHandler, ModelOption, ModelOptions, ResponseFormat


def with_model(model: str) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.model = model

    return _apply


def with_temperature(temperature: float) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.temperature = temperature

    return _apply


def with_max_tokens(max_tokens: int) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.max_tokens = max_tokens

    return _apply


def with_top_p(top_p: float) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.top_p = top_p

    return _apply


def with_frequency_penalty(penalty: float) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.frequency_penalty = penalty

    return _apply


def with_presence_penalty(penalty: float) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.presence_penalty = penalty

    return _apply


def with_stop(*stop: str) -> ModelOption:
    """Replace the stop sequences."""

    def _apply(opts: ModelOptions) -> None:
        opts.stop = list(stop)

    return _apply


def with_seed(seed: int) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.seed = seed

    return _apply


def with_user(user: str) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.user = user

    return _apply


def with_response_format(format_type: str) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.response_format = ResponseFormat(type=format_type)

    return _apply


def with_json_mode() -> ModelOption:
    """Ask for a JSON object response."""
    return with_response_format("json_object")


def with_text_mode() -> ModelOption:
    """Ask for a plain text response (the service default)."""
    return with_response_format("text")


def with_stream(stream: bool = True) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.stream = stream

    return _apply


def with_log_probs(enabled: bool = True) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.log_probs = enabled

    return _apply


def with_top_log_probs(count: int) -> ModelOption:
    def _apply(opts: ModelOptions) -> None:
        opts.top_log_probs = count

    return _apply


def with_message_handler(*handlers: MessageHandler) -> ModelOption:
    """Register observers called once per streamed message fragment.

    Handlers are appended after any already registered. They only observe;
    enabling streaming still requires :func:`with_stream`.
    """

    def _apply(opts: ModelOptions) -> None:
        opts.message_handlers.extend(handlers)

    return _apply


__all__ = [
    "with_model",
    "with_temperature",
    "with_max_tokens",
    "with_top_p",
    "with_frequency_penalty",
    "with_presence_penalty",
    "with_stop",
    "with_seed",
    "with_user",
    "with_response_format",
    "with_json_mode",
    "with_text_mode",
    "with_stream",
    "with_log_probs",
    "with_top_log_probs",
    "with_message_handler",
]
