"""Unit tests for error classification and the structured error types.

Covers:
- Status code mapping (explicit map and 5xx fallback)
- httpx transport exceptions mapped to normalized codes
- ProviderError passthrough and cancellation precedence
"""
from __future__ import annotations

import httpx
import pytest

from fayth.base.cancellation import CancelledError
from fayth.base.errors import (
    APIError,
    ErrorCode,
    ProviderError,
    classify_exception,
    code_for_status,
)


@pytest.mark.parametrize(
    "status, code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (503, ErrorCode.UNAVAILABLE),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_code_for_status(status, code):
    assert code_for_status(status) is code  # nosec B101


def test_httpx_exceptions_are_classified():
    request = httpx.Request("GET", "https://example.test/")
    assert classify_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.TRANSIENT  # nosec B101
    assert classify_exception(httpx.UnsupportedProtocol("no scheme", request=request)) is ErrorCode.CONFIGURATION  # nosec B101


def test_status_error_uses_response_status():
    request = httpx.Request("GET", "https://example.test/")
    response = httpx.Response(429, request=request)
    exc = httpx.HTTPStatusError("too many", request=request, response=response)
    assert classify_exception(exc) is ErrorCode.RATE_LIMIT  # nosec B101


def test_provider_error_and_cancellation_precedence():
    err = ProviderError(code=ErrorCode.DECODE, message="bad")
    assert classify_exception(err) is ErrorCode.DECODE  # nosec B101
    assert classify_exception(CancelledError("stop")) is ErrorCode.CANCELLED  # nosec B101
    assert classify_exception(RuntimeError("something else")) is ErrorCode.UNKNOWN  # nosec B101


def test_api_error_string_names_request_and_status():
    err = APIError(
        code=ErrorCode.AUTH,
        message="Incorrect API key provided",
        provider="openai",
        status_code=401,
        method="POST",
        url="https://api.example.test/v1/chat/completions",
        error_type="invalid_request_error",
    )
    text = str(err)
    assert "POST https://api.example.test/v1/chat/completions -> 401" in text  # nosec B101
    assert "invalid_request_error" in text  # nosec B101
    assert isinstance(err, ProviderError)  # nosec B101
