"""Standard middleware used by the chat transport.

Each factory returns a :data:`~fayth.base.pipeline.types.Middleware`. Header
middleware overwrite any value already present on the request.
"""
from __future__ import annotations

from typing import Mapping

import httpx

from ...config.defaults import OPENAI_ORGANIZATION_HEADER, OPENAI_PROJECT_HEADER
from .types import Executor, Middleware


def _set_header(name: str, value: str) -> Middleware:
    def middleware(next_: Executor) -> Executor:
        def handle(request: httpx.Request) -> httpx.Response:
            request.headers[name] = value
            return next_(request)

        return handle

    return middleware


def bearer_auth(api_key: str) -> Middleware:
    """Set ``Authorization: Bearer <api_key>``."""
    return _set_header("Authorization", f"Bearer {api_key}")


def organization_header(organization: str) -> Middleware:
    return _set_header(OPENAI_ORGANIZATION_HEADER, organization)


def project_header(project: str) -> Middleware:
    return _set_header(OPENAI_PROJECT_HEADER, project)


def default_headers(headers: Mapping[str, str]) -> Middleware:
    """Add ``headers`` the request does not already carry."""
    items = dict(headers)

    def middleware(next_: Executor) -> Executor:
        def handle(request: httpx.Request) -> httpx.Response:
            for key, value in items.items():
                request.headers.setdefault(key, value)
            return next_(request)

        return handle

    return middleware


def _with_trailing_slash(url: httpx.URL | str) -> httpx.URL:
    text = str(url)
    return httpx.URL(text if text.endswith("/") else text + "/")


def base_url(url: httpx.URL | str) -> Middleware:
    """Resolve relative request URLs against ``url``.

    Leading slashes on the request path are dropped so exactly one slash
    separates base and path (``https://h/v1`` + ``/chat`` gives
    ``https://h/v1/chat``). ``Host`` is updated to the base netloc. Absolute
    request URLs pass through untouched.
    """
    base = _with_trailing_slash(url)
    host = base.netloc.decode("ascii")

    def middleware(next_: Executor) -> Executor:
        def handle(request: httpx.Request) -> httpx.Response:
            if request.url.is_relative_url:
                request.url = base.join(str(request.url).lstrip("/"))
                request.headers["Host"] = host
            return next_(request)

        return handle

    return middleware


__all__ = [
    "bearer_auth",
    "organization_header",
    "project_header",
    "default_headers",
    "base_url",
]
