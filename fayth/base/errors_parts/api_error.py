"""
Structured API error raised for HTTP responses with status >= 400.

The error keeps the decoded ``{"error": {...}}`` envelope fields together with
the originating ``httpx.Request``/``httpx.Response`` so diagnostics can show the
method, URL and status without re-reading the body.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class APIError(ProviderError):
    """Error decoded from a non-2xx API response.

    Attributes:
        status_code: HTTP status code returned by the service.
        method: HTTP method of the failed request.
        url: Absolute URL the request was sent to.
        error_type: ``error.type`` from the response body, when present.
        error_code: ``error.code`` from the response body, when present.
        param: ``error.param`` from the response body, when present.
        request: The request that produced the failure.
        response: The (closed) response carrying the error body.
    """

    code: ErrorCode = ErrorCode.UNKNOWN
    message: str = ""
    status_code: int = 0
    method: str = ""
    url: str = ""
    error_type: Optional[str] = None
    error_code: Optional[str] = None
    param: Optional[str] = None
    request: Optional[httpx.Request] = None
    response: Optional[httpx.Response] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        detail = self.message or "<no message>"
        kind = f" ({self.error_type})" if self.error_type else ""
        return f"{self.provider}: {self.method} {self.url} -> {self.status_code}{kind}: {detail}"


__all__ = ["APIError"]
