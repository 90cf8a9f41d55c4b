"""Terminal executor backed by a pooled ``httpx.Client``."""
from __future__ import annotations

from typing import Optional

import httpx

from ...config.defaults import HTTP_POOL_PURPOSE_CHAT
from ..http import get_httpx_client


class HttpxExecutor:
    """Send requests through an ``httpx.Client`` without buffering the body.

    Responses are returned unread (``stream=True``); the caller owns the body
    and must read or close it. When no client is given, a pooled one for
    ``purpose`` is used.
    """

    def __init__(self, client: Optional[httpx.Client] = None, *, purpose: str = HTTP_POOL_PURPOSE_CHAT) -> None:
        self._client = client
        self._purpose = purpose

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = get_httpx_client(None, self._purpose)
        return self._client

    def __call__(self, request: httpx.Request) -> httpx.Response:
        return self.client.send(request, stream=True)


__all__ = ["HttpxExecutor"]
