"""Deterministic fake model for offline testing.

Purpose
-------
Implements the ``Model`` protocol without any network traffic. The model
always answers with one canned message. When streaming is requested
(``with_stream()``) the canned text is replayed as a lazy stream of
``chunk_size``-character deltas, so joining the fragments rebuilds the reply
exactly as a buffered call returns it. Message handlers see each delta as it
is emitted; like ``ChatModel``, registering a handler does not by itself
switch to streaming.

Cancellation
------------
The token is checked before every fragment; the inter-fragment delay waits
on the token so a cancel interrupts it immediately.
"""

from __future__ import annotations

import time
from typing import Iterator, Optional, Sequence

from ..base.cancellation import CancellationToken, raise_if_cancelled
from ..base.errors import ErrorCode, ProviderError
from ..base.logging import LogContext, get_logger
from ..base.models import Generation, Message, new_text_message
from ..base.options import ModelOption, ModelOptions, merge_options
from ..base.streaming import notify_message_handlers
from ..config.defaults import FAKE_MODEL_DEFAULT_CHUNK_DELAY_SECONDS, FAKE_MODEL_DEFAULT_CHUNK_SIZE

_logger = get_logger("fayth.mock")


class FakeModel:
    """Model returning ``response`` for any non-empty conversation."""

    def __init__(
        self,
        response: Message,
        *,
        name: str = "fake",
        chunk_size: int = FAKE_MODEL_DEFAULT_CHUNK_SIZE,
        chunk_delay: float = FAKE_MODEL_DEFAULT_CHUNK_DELAY_SECONDS,
    ) -> None:
        if chunk_size <= 0:
            raise ProviderError(
                code=ErrorCode.CONFIGURATION,
                message=f"chunk_size must be positive, got {chunk_size}",
                provider="mock",
                model=name,
            )
        self.name = name
        self.response = response
        self.chunk_size = chunk_size
        self.chunk_delay = chunk_delay

    def generate(
        self,
        messages: Sequence[Message],
        *options: ModelOption,
        token: Optional[CancellationToken] = None,
    ) -> Generation:
        if not messages:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message="empty message provided",
                provider="mock",
                model=self.name,
            )
        if not self.response.contents:
            raise ProviderError(
                code=ErrorCode.CONFIGURATION,
                message="no content set in response",
                provider="mock",
                model=self.name,
            )
        opts = merge_options(ModelOptions(model=self.name), *options)
        if opts.stream:
            return Generation.from_stream(self._stream(opts, token))
        return Generation([self.response])

    def _stream(self, opts: ModelOptions, token: Optional[CancellationToken]) -> Iterator[Message]:
        text = self.response.joined_text()
        ctx = LogContext(provider="mock", model=opts.model)
        for start in range(0, len(text), self.chunk_size):
            raise_if_cancelled(token)
            msg = new_text_message(self.response.role, text[start : start + self.chunk_size])
            notify_message_handlers(opts.message_handlers, msg, _logger, ctx)
            yield msg
            if self.chunk_delay > 0 and start + self.chunk_size < len(text):
                self._pause(token)

    def _pause(self, token: Optional[CancellationToken]) -> None:
        if token is None:
            time.sleep(self.chunk_delay)
        else:
            token.wait(self.chunk_delay)


__all__ = ["FakeModel"]
