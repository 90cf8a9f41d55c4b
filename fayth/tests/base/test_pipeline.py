"""Unit tests for the request pipeline and standard middleware.

Covers:
- Onion ordering: first declared middleware sees the request first and the
  response last, for chains of 0 to 3 middleware
- Missing executor is a configuration error raised at construction
- Short-circuiting middleware never reaches the executor
- Header and base URL middleware rewrite the request as documented
"""
from __future__ import annotations

from typing import List

import httpx
import pytest

from fayth.base.errors import ErrorCode, PipelineConfigError
from fayth.base.pipeline import (
    Executor,
    Pipeline,
    base_url,
    bearer_auth,
    default_headers,
    organization_header,
    project_header,
)


def _tracing(name: str, trace: List[str]):
    def middleware(next_: Executor) -> Executor:
        def handle(request: httpx.Request) -> httpx.Response:
            trace.append(f"{name}:in")
            response = next_(request)
            trace.append(f"{name}:out")
            return response

        return handle

    return middleware


@pytest.mark.parametrize("count", [0, 1, 2, 3])
def test_middleware_run_in_onion_order(count):
    trace: List[str] = []

    def executor(request: httpx.Request) -> httpx.Response:
        trace.append("executor")
        return httpx.Response(204)

    names = [f"m{i}" for i in range(count)]
    pipeline = Pipeline([_tracing(n, trace) for n in names], executor)
    response = pipeline.execute(httpx.Request("GET", "https://example.test/"))

    expected = [f"{n}:in" for n in names] + ["executor"] + [f"{n}:out" for n in reversed(names)]
    assert trace == expected  # nosec B101
    assert response.status_code == 204  # nosec B101


def test_missing_executor_fails_at_construction():
    with pytest.raises(PipelineConfigError) as exc_info:
        Pipeline([bearer_auth("k")], None)
    assert exc_info.value.code is ErrorCode.CONFIGURATION  # nosec B101


def test_short_circuit_skips_executor():
    called = []

    def cached(next_: Executor) -> Executor:
        return lambda request: httpx.Response(200, text="cached")

    pipeline = Pipeline([cached], lambda r: called.append(r) or httpx.Response(500))
    assert pipeline.execute(httpx.Request("GET", "https://example.test/")).text == "cached"  # nosec B101
    assert called == []  # nosec B101


def test_non_2xx_is_returned_unchanged():
    pipeline = Pipeline([], lambda r: httpx.Response(503))
    assert pipeline(httpx.Request("GET", "https://example.test/")).status_code == 503  # nosec B101


def test_header_middleware_set_headers():
    seen = {}

    def executor(request: httpx.Request) -> httpx.Response:
        seen.update(request.headers)
        return httpx.Response(200)

    pipeline = Pipeline(
        [
            default_headers({"Accept": "application/json", "X-Keep": "default"}),
            bearer_auth("sk-test"),
            organization_header("org-1"),
            project_header("proj-1"),
        ],
        executor,
    )
    pipeline.execute(httpx.Request("GET", "https://example.test/", headers={"X-Keep": "caller"}))

    assert seen["authorization"] == "Bearer sk-test"  # nosec B101
    assert seen["openai-organization"] == "org-1"  # nosec B101
    assert seen["openai-project"] == "proj-1"  # nosec B101
    assert seen["accept"] == "application/json"  # nosec B101
    assert seen["x-keep"] == "caller"  # nosec B101


@pytest.mark.parametrize(
    "base, path",
    [
        ("https://api.example.test/v1", "chat/completions"),
        ("https://api.example.test/v1/", "chat/completions"),
        ("https://api.example.test/v1", "/chat/completions"),
    ],
)
def test_base_url_joins_with_exactly_one_slash(base, path):
    seen = {}

    def executor(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["host"] = request.headers.get("host")
        return httpx.Response(200)

    Pipeline([base_url(base)], executor).execute(httpx.Request("POST", path))

    assert seen["url"] == "https://api.example.test/v1/chat/completions"  # nosec B101
    assert seen["host"] == "api.example.test"  # nosec B101


def test_base_url_leaves_absolute_urls_untouched():
    seen = {}

    def executor(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        return httpx.Response(200)

    Pipeline([base_url("https://api.example.test/v1")], executor).execute(
        httpx.Request("GET", "https://other.test/x")
    )
    assert seen["url"] == "https://other.test/x"  # nosec B101


def test_pipeline_is_reusable():
    count = []
    pipeline = Pipeline([bearer_auth("k")], lambda r: count.append(1) or httpx.Response(200))
    for _ in range(3):
        pipeline.execute(httpx.Request("GET", "https://example.test/"))
    assert len(count) == 3  # nosec B101
