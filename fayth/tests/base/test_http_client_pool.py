"""Unit tests for the shared httpx client pool.

Covers:
- Same key (base_url, purpose) returns the same instance.
- Different purpose or base URL yields different instances.
- close_all_clients empties the pool.
- HttpxExecutor falls back to a pooled client.
"""
from __future__ import annotations

from fayth.base.http import close_all_clients, get_httpx_client, pooled_client_count
from fayth.base.pipeline import HttpxExecutor


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("https://api.example.com", purpose="chat")
    c2 = get_httpx_client("https://api.example.com", purpose="chat")
    assert c1 is c2, "Expected pooled client instances to be identical for same key"  # nosec B101


def test_different_purpose_or_base_url_returns_different_instances():
    c1 = get_httpx_client("https://api.example.com", purpose="chat")
    c2 = get_httpx_client("https://api.example.com", purpose="stream")
    c3 = get_httpx_client("https://api.other.com", purpose="chat")
    assert c1 is not c2 and c1 is not c3  # nosec B101


def test_close_all_clients_empties_pool():
    get_httpx_client(None, purpose="chat")
    assert pooled_client_count() == 1  # nosec B101
    close_all_clients()
    assert pooled_client_count() == 0  # nosec B101


def test_pooled_clients_have_no_timeout():
    client = get_httpx_client(None, purpose="chat")
    assert client.timeout.read is None  # nosec B101


def test_executor_uses_pooled_client_by_default():
    executor = HttpxExecutor()
    assert executor.client is get_httpx_client(None, purpose="chat")  # nosec B101
