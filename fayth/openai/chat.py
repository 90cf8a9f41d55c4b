"""Chat completions transport.

``ChatService`` turns a :class:`ChatCompletionRequest` into either a decoded
``ChatCompletionResponse`` or a lazy iterator of ``ChatCompletionChunk``.

Flow
----
1. Resolve :class:`CallConfig` from service-level then call-level options.
2. Check preconditions (API key, cancellation) before any I/O.
3. Build a relative ``POST chat/completions`` request and run it through a
   :class:`Pipeline`: default headers, bearer auth, optional organization and
   project headers, base URL resolution, then the terminal executor.
4. Status >= 400 raises :class:`APIError`; otherwise the body is decoded in
   full or handed to the SSE decoder.

Transport failures raised by ``httpx`` are classified with
:func:`classify_exception` and re-raised as :class:`ProviderError`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

import httpx
from pydantic import ValidationError

from ..base.cancellation import CancellationToken, raise_if_cancelled
from ..base.constants import DEFAULT_HEADERS, MISSING_API_KEY_ERROR, STREAM_HEADERS
from ..base.errors import APIError, ErrorCode, ProviderError, classify_exception, code_for_status
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.pipeline import HttpxExecutor, Middleware, Pipeline
from ..base.pipeline import base_url as base_url_middleware
from ..base.pipeline import bearer_auth, default_headers, organization_header, project_header
from ..base.streaming import decode_sse_stream
from ..config.defaults import OPENAI_COMPLETIONS_PATH, OPENAI_DEFAULT_BASE_URL, OPENAI_PROVIDER_NAME
from .call_options import CallConfig, CallOption, resolve_call_config
from .chat_types import ChatCompletionChunk, ChatCompletionRequest, ChatCompletionResponse, ErrorBody, ErrorEnvelope

_logger = get_logger("fayth.openai")
_RETRYABLE = (ErrorCode.TRANSIENT, ErrorCode.TIMEOUT, ErrorCode.RATE_LIMIT, ErrorCode.SERVER_ERROR)
_ERROR_BODY_PREVIEW = 500


@dataclass
class ChatResponse:
    """Outcome of :meth:`ChatService.completion`.

    Exactly one of ``completion`` (buffered) and ``chunks`` (streamed) is set.
    Draining ``chunks`` closes the HTTP response; a stream that is abandoned
    before its first chunk must be released with :meth:`close`.
    """

    status_code: int
    headers: httpx.Headers
    completion: Optional[ChatCompletionResponse] = None
    chunks: Optional[Iterator[ChatCompletionChunk]] = None
    response: Optional[httpx.Response] = None

    @property
    def is_stream(self) -> bool:
        return self.chunks is not None

    def close(self) -> None:
        """Release the chunk iterator and the underlying HTTP response."""
        close = getattr(self.chunks, "close", None)
        if close is not None:
            close()
        if self.response is not None:
            self.response.close()


def build_pipeline(config: CallConfig) -> Pipeline:
    """Assemble the middleware chain for ``config``."""
    middlewares: List[Middleware] = [
        default_headers(DEFAULT_HEADERS),
        bearer_auth(config.api_key),
    ]
    if config.organization:
        middlewares.append(organization_header(config.organization))
    if config.project:
        middlewares.append(project_header(config.project))
    middlewares.append(base_url_middleware(config.base_url or OPENAI_DEFAULT_BASE_URL))
    return Pipeline(middlewares, config.executor or HttpxExecutor())


def _api_error(request: httpx.Request, response: httpx.Response, model: str) -> APIError:
    try:
        body = response.read()
    finally:
        response.close()
    fields = ErrorBody()
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
        if envelope.error is not None:
            fields = envelope.error
    except ValidationError:
        pass  # not an error envelope; fall back to the raw body below
    message = fields.message or body.decode("utf-8", "replace")[:_ERROR_BODY_PREVIEW] or response.reason_phrase
    code = code_for_status(response.status_code)
    return APIError(
        code=code,
        message=message,
        provider=OPENAI_PROVIDER_NAME,
        model=model or None,
        retryable=code in _RETRYABLE,
        status_code=response.status_code,
        method=request.method,
        url=str(request.url),
        error_type=fields.type,
        error_code=str(fields.code) if fields.code is not None else None,
        param=fields.param,
        request=request,
        response=response,
    )


class ChatService:
    """Chat completions endpoint bound to service-level call options."""

    def __init__(self, *options: CallOption) -> None:
        self.options: List[CallOption] = list(options)

    def completion(
        self,
        request: ChatCompletionRequest,
        *options: CallOption,
        token: Optional[CancellationToken] = None,
    ) -> ChatResponse:
        """Send ``request`` and return the buffered or streamed result.

        Raises:
            ProviderError: ``AUTH`` when no API key is configured, the
                classified code on transport failure, ``DECODE`` on a
                malformed buffered body.
            APIError: on HTTP status >= 400.
            CancelledError: when ``token`` is already cancelled.
        """
        config = resolve_call_config(self.options, options)
        ctx = LogContext(provider=OPENAI_PROVIDER_NAME, model=request.model)
        if not config.api_key:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message=MISSING_API_KEY_ERROR,
                provider=OPENAI_PROVIDER_NAME,
                model=request.model or None,
            )
        raise_if_cancelled(token)

        stream = bool(request.stream)
        http_request = httpx.Request(
            "POST",
            OPENAI_COMPLETIONS_PATH,
            headers=STREAM_HEADERS if stream else DEFAULT_HEADERS,
            content=request.to_json_bytes(),
        )
        event = "stream.start" if stream else "chat.start"
        normalized_log_event(_logger, event, ctx, phase="start", emitted=False, level=logging.DEBUG)

        response = self._send(build_pipeline(config), http_request, ctx)
        if response.status_code >= 400:
            err = _api_error(http_request, response, request.model)
            normalized_log_event(
                _logger,
                "chat.error",
                ctx,
                phase="finalize",
                emitted=False,
                error_code=err.code.value,
                level=logging.WARNING,
                status_code=err.status_code,
                error=err.message,
            )
            raise err

        if stream:
            chunks = decode_sse_stream(response, ChatCompletionChunk.model_validate_json, token, ctx=ctx)
            return ChatResponse(
                status_code=response.status_code,
                headers=response.headers,
                chunks=chunks,
                response=response,
            )

        completion = self._decode(response, ctx)
        ctx.response_id = completion.id or None
        normalized_log_event(
            _logger,
            "chat.complete",
            ctx,
            phase="finalize",
            emitted=bool(completion.choices),
            level=logging.DEBUG,
            choices=len(completion.choices),
        )
        return ChatResponse(status_code=response.status_code, headers=response.headers, completion=completion)

    @staticmethod
    def _send(pipeline: Pipeline, request: httpx.Request, ctx: LogContext) -> httpx.Response:
        try:
            return pipeline.execute(request)
        except httpx.HTTPError as exc:
            code = classify_exception(exc)
            normalized_log_event(
                _logger,
                "chat.error",
                ctx,
                phase="start",
                emitted=False,
                error_code=code.value,
                level=logging.WARNING,
                error=str(exc),
            )
            raise ProviderError(
                code=code,
                message=f"{request.method} {request.url}: {exc}",
                provider=OPENAI_PROVIDER_NAME,
                model=ctx.model,
                retryable=code in _RETRYABLE,
                raw=exc,
            ) from exc

    @staticmethod
    def _decode(response: httpx.Response, ctx: LogContext) -> ChatCompletionResponse:
        try:
            body = response.read()
        except httpx.HTTPError as exc:
            code = classify_exception(exc)
            raise ProviderError(
                code=code,
                message=f"reading response body failed: {exc}",
                provider=OPENAI_PROVIDER_NAME,
                model=ctx.model,
                retryable=code in _RETRYABLE,
                raw=exc,
            ) from exc
        finally:
            response.close()
        try:
            return ChatCompletionResponse.model_validate_json(body)
        except ValidationError as exc:
            raise ProviderError(
                code=ErrorCode.DECODE,
                message=f"malformed completion response ({exc.error_count()} errors)",
                provider=OPENAI_PROVIDER_NAME,
                model=ctx.model,
                raw=exc,
            ) from exc


__all__ = ["ChatResponse", "ChatService", "build_pipeline"]
