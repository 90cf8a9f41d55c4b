"""Shared testing utilities for the fayth test suite.

Exports:
    - assert_true(condition, message) -> None
    - sse_lines(*payloads, done=True) -> bytes
    - RecordingStream: ``httpx.SyncByteStream`` that records ``close()``
"""
from __future__ import annotations

import json
from typing import Any, Iterable, Iterator, List

import httpx


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False."""
    if not condition:
        raise AssertionError(message)


def sse_lines(*payloads: Any, done: bool = True) -> bytes:
    """Frame ``payloads`` as SSE ``data:`` events.

    Dicts are JSON encoded; strings are written verbatim so tests can inject
    malformed lines.
    """
    out: List[str] = []
    for payload in payloads:
        data = payload if isinstance(payload, str) else json.dumps(payload)
        out.append(f"data: {data}\n\n")
    if done:
        out.append("data: [DONE]\n\n")
    return "".join(out).encode("utf-8")


def delta_chunk(content: str, *, index: int = 0, role: str | None = None, finish_reason: str | None = None, chunk_id: str = "chatcmpl-1") -> dict:
    """Build one chat completion chunk payload."""
    delta: dict = {"content": content}
    if role is not None:
        delta["role"] = role
    choice: dict = {"index": index, "delta": delta}
    if finish_reason is not None:
        choice["finish_reason"] = finish_reason
    return {"id": chunk_id, "object": "chat.completion.chunk", "model": "gpt-test", "choices": [choice]}


class RecordingStream(httpx.SyncByteStream):
    """Byte stream yielding fixed pieces and recording how far it was read."""

    def __init__(self, pieces: Iterable[bytes]) -> None:
        self._pieces = list(pieces)
        self.read_count = 0
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        for piece in self._pieces:
            self.read_count += 1
            yield piece

    def close(self) -> None:
        self.closed = True
