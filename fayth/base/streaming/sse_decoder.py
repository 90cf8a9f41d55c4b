"""Server-sent events decoder.

Turns a streamed ``httpx.Response`` body into typed chunks. Framing rules:

- lines are trimmed; blank lines are skipped;
- only lines starting with ``"data: "`` carry payloads, everything else
  (comments, ``event:`` and ``id:`` fields) is ignored;
- the payload ``[DONE]`` ends the stream gracefully;
- a payload the parser rejects is logged as ``stream.chunk_decode_error`` and
  skipped, the stream continues.

The cancellation token is checked before and after every line read and
before every chunk is handed to the consumer. The response is closed on every
exit path, including a consumer that stops iterating early.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional, TypeVar

import httpx

from ..cancellation import CancellationToken, CancelledError, raise_if_cancelled
from ..constants import SSE_DATA_PREFIX, SSE_DONE_MARKER
from ..errors import ErrorCode, ProviderError, classify_exception
from ..logging import LogContext, get_logger, log_event, normalized_log_event

T = TypeVar("T")

_logger = get_logger("fayth.streaming")
_PREVIEW_CHARS = 200


def iter_sse_payloads(lines: Iterable[str], token: Optional[CancellationToken] = None) -> Iterator[str]:
    """Yield the ``data:`` payloads of an SSE line stream up to ``[DONE]``."""
    it = iter(lines)
    while True:
        raise_if_cancelled(token)
        try:
            raw = next(it)
        except StopIteration:
            return
        raise_if_cancelled(token)
        line = raw.strip()
        if not line or not line.startswith(SSE_DATA_PREFIX):
            continue
        payload = line[len(SSE_DATA_PREFIX):].strip()
        if payload == SSE_DONE_MARKER:
            return
        yield payload


def decode_sse_stream(
    response: httpx.Response,
    parse: Callable[[str], T],
    token: Optional[CancellationToken] = None,
    *,
    ctx: Optional[LogContext] = None,
) -> Iterator[T]:
    """Lazily decode ``response`` into chunks using ``parse``.

    Parameters:
        response: Unread streaming response; ownership passes to the decoder.
        parse: Converts one payload string into a chunk. ``ValueError``
            (including pydantic ``ValidationError``) marks a malformed chunk.
        token: Optional cancellation token.
        ctx: Log context attached to decoder events.

    Raises:
        CancelledError: when ``token`` is cancelled mid-stream.
        ProviderError: when the transport fails mid-stream.
    """
    emitted = 0
    skipped = 0
    outcome = "complete"
    error_code: Optional[str] = None
    try:
        for payload in iter_sse_payloads(response.iter_lines(), token):
            try:
                chunk = parse(payload)
            except ValueError as exc:
                skipped += 1
                log_event(
                    _logger,
                    "stream.chunk_decode_error",
                    ctx,
                    level=logging.WARNING,
                    error=str(exc),
                    payload_preview=payload[:_PREVIEW_CHARS],
                )
                continue
            raise_if_cancelled(token)
            emitted += 1
            yield chunk
    except CancelledError:
        outcome = "cancelled"
        error_code = ErrorCode.CANCELLED.value
        raise
    except httpx.HTTPError as exc:
        code = classify_exception(exc)
        outcome = "error"
        error_code = code.value
        raise ProviderError(
            code=code,
            message=f"stream read failed: {exc}",
            provider=ctx.provider if ctx and ctx.provider else "fayth",
            model=ctx.model if ctx else None,
            retryable=code in (ErrorCode.TRANSIENT, ErrorCode.TIMEOUT),
            raw=exc,
        ) from exc
    except GeneratorExit:
        outcome = "closed"
        raise
    finally:
        response.close()
        normalized_log_event(
            _logger,
            "stream.finalize",
            ctx,
            phase="finalize",
            emitted=emitted,
            error_code=error_code,
            level=logging.DEBUG,
            outcome=outcome,
            skipped=skipped,
        )


__all__ = ["iter_sse_payloads", "decode_sse_stream"]
