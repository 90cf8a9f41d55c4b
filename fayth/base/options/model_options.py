"""Generation parameters and their layered merge.

`ModelOptions` is a flat value object. It is never mutated in place by the
library: :func:`merge_options` copies a base snapshot and applies override
functions in order, so later overrides win and fields no override touches
keep the base value.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from ..models_parts.message import Message

MessageHandler = Callable[[Message], None]


@dataclass
class ResponseFormat:
    """Requested response format (``"text"``, ``"json_object"`` ...)."""

    type: str = ""


@dataclass
class ModelOptions:
    """Configuration for one model inference call.

    Attributes:
        model: Model identifier (e.g. ``"gpt-4o-mini"``).
        temperature: Sampling temperature, 0.0 to 2.0.
        max_tokens: Completion token limit; 0 uses the model default.
        top_p: Nucleus sampling mass, 0.0 to 1.0; 0 leaves it unset.
        frequency_penalty: -2.0 to 2.0.
        presence_penalty: -2.0 to 2.0.
        stop: Up to four stop sequences.
        seed: Deterministic sampling seed when supported.
        user: End-user identifier for abuse monitoring.
        response_format: Output format hint.
        stream: Request an SSE stream instead of a single payload.
        log_probs: Return log probabilities.
        top_log_probs: Number of top log probabilities per token, 0 to 20.
        message_handlers: Observers called once per streamed fragment.
    """

    model: str = ""
    temperature: float = 0.0
    max_tokens: int = 0
    top_p: float = 0.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    stop: List[str] = field(default_factory=list)
    seed: int = 0
    user: str = ""
    response_format: ResponseFormat = field(default_factory=ResponseFormat)
    stream: bool = False
    log_probs: bool = False
    top_log_probs: int = 0
    message_handlers: List[MessageHandler] = field(default_factory=list)

    def copy(self) -> "ModelOptions":
        """Return an independent copy (lists and nested format are copied)."""
        dup = copy.copy(self)
        dup.stop = list(self.stop)
        dup.message_handlers = list(self.message_handlers)
        dup.response_format = ResponseFormat(type=self.response_format.type)
        return dup

    def to_wire(self) -> Dict[str, Any]:
        """Return the wire parameters with zero-valued optional fields omitted.

        ``model`` and ``temperature`` are always present; message handlers are
        local observers and never serialized.
        """
        out: Dict[str, Any] = {"model": self.model, "temperature": self.temperature}
        optional = {
            "max_tokens": self.max_tokens,
            "top_p": self.top_p,
            "frequency_penalty": self.frequency_penalty,
            "presence_penalty": self.presence_penalty,
            "stop": list(self.stop),
            "seed": self.seed,
            "user": self.user,
            "stream": self.stream,
            "logprobs": self.log_probs,
            "top_logprobs": self.top_log_probs,
        }
        out.update({k: v for k, v in optional.items() if v})
        if self.response_format.type:
            out["response_format"] = {"type": self.response_format.type}
        return out


ModelOption = Callable[[ModelOptions], None]


def merge_options(base: ModelOptions, *overrides: ModelOption) -> ModelOptions:
    """Apply ``overrides`` in order onto a copy of ``base``.

    ``base`` is left untouched.
    """
    opts = base.copy()
    for override in overrides:
        override(opts)
    return opts


__all__ = [
    "MessageHandler",
    "ModelOption",
    "ModelOptions",
    "ResponseFormat",
    "merge_options",
]
