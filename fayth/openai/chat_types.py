"""
Pydantic DTOs for the chat completions wire format.

Purpose
-------
Typed request, response, stream chunk and error envelope shapes. Requests are
serialized with ``None`` fields excluded; responses and chunks are validated
leniently (unknown fields ignored, most fields optional) so additive service
changes do not break decoding.

External dependencies: Pydantic only.

Failure modes
-------------
``model_validate_json`` raises ``pydantic.ValidationError`` (a ``ValueError``)
on malformed JSON or shape mismatches. Callers translate it into
``ProviderError(code=DECODE)`` or skip the chunk.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ---- request ----


class TextPartParam(_WireModel):
    type: Literal["text"] = "text"
    text: str


class ImageURL(_WireModel):
    url: str


class ImagePartParam(_WireModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageURL


ContentPartParam = Union[TextPartParam, ImagePartParam]


class ChatMessageParam(_WireModel):
    """One request message; ``content`` is a string or a list of parts."""

    role: str
    content: Union[str, List[ContentPartParam]]


class ResponseFormatParam(_WireModel):
    type: str


class ChatCompletionRequest(_WireModel):
    """Request body for ``POST chat/completions``.

    ``temperature`` is always sent; every other optional parameter is left
    ``None`` (and therefore omitted) unless set.
    """

    model: str
    messages: List[ChatMessageParam]
    temperature: float = 0.0
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    stop: Optional[List[str]] = None
    seed: Optional[int] = None
    user: Optional[str] = None
    response_format: Optional[ResponseFormatParam] = None
    stream: Optional[bool] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = None

    def to_json_bytes(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")


# ---- response ----


class ChatMessage(_WireModel):
    role: Optional[str] = None
    content: Optional[str] = None
    refusal: Optional[Any] = None


class ChatChoice(_WireModel):
    index: int = 0
    message: ChatMessage = Field(default_factory=ChatMessage)
    finish_reason: Optional[str] = None
    logprobs: Optional[Dict[str, Any]] = None


class ChatUsage(_WireModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletionResponse(_WireModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatChoice] = Field(default_factory=list)
    usage: Optional[ChatUsage] = None
    system_fingerprint: Optional[str] = None
    service_tier: Optional[str] = None


# ---- stream ----


class ChatDelta(_WireModel):
    role: Optional[str] = None
    content: Optional[str] = None


class ChatStreamChoice(_WireModel):
    index: int = 0
    delta: ChatDelta = Field(default_factory=ChatDelta)
    finish_reason: Optional[str] = None


class ChatCompletionChunk(_WireModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatStreamChoice] = Field(default_factory=list)
    usage: Optional[ChatUsage] = None


# ---- errors ----


class ErrorBody(_WireModel):
    message: str = ""
    type: Optional[str] = None
    code: Optional[Union[str, int]] = None
    param: Optional[str] = None


class ErrorEnvelope(_WireModel):
    error: Optional[ErrorBody] = None


__all__ = [
    "TextPartParam",
    "ImageURL",
    "ImagePartParam",
    "ContentPartParam",
    "ChatMessageParam",
    "ResponseFormatParam",
    "ChatCompletionRequest",
    "ChatMessage",
    "ChatChoice",
    "ChatUsage",
    "ChatCompletionResponse",
    "ChatDelta",
    "ChatStreamChoice",
    "ChatCompletionChunk",
    "ErrorBody",
    "ErrorEnvelope",
]
