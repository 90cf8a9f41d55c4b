"""Pytest configuration for the fayth test suite.

Fixtures:
    - ``reset_http_pool`` (autouse): closes pooled clients around every test.
    - ``mock_executor``: builds an ``HttpxExecutor`` over ``httpx.MockTransport``.
    - ``captured_events``: structured log events emitted under ``fayth``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Iterator, List

import httpx
import pytest

from fayth.base.http import close_all_clients
from fayth.base.logging import get_logger
from fayth.base.pipeline import HttpxExecutor


@pytest.fixture(autouse=True)
def reset_http_pool() -> Iterator[None]:
    close_all_clients()
    yield
    close_all_clients()


@pytest.fixture()
def mock_executor() -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], HttpxExecutor]]:
    """Return a factory turning a request handler into a terminal executor."""
    clients: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxExecutor:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return HttpxExecutor(client)

    yield _make
    for client in clients:
        client.close()


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def captured_events() -> Iterator[Callable[[], List[Dict[str, Any]]]]:
    """Collect events emitted through the shared ``fayth`` logger.

    Yields a callable returning the decoded JSON payloads seen so far.
    """
    base = get_logger()
    handler = _ListHandler()
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)

    def _events() -> List[Dict[str, Any]]:
        return [json.loads(r.getMessage()) for r in handler.records]

    try:
        yield _events
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)
