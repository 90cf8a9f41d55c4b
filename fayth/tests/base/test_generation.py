"""Unit tests for ``Generation``.

Covers:
- Materialized generations replay identically on every ``all()``
- Streaming generations drain their source exactly once
- Early consumer exit caches only yielded items and closes the source
- Stream failures end iteration and land in ``error``
- ``close()`` releases an unstarted stream and runs ``on_close`` once
"""
from __future__ import annotations

from typing import Iterator, List

from fayth.base.cancellation import CancelledError
from fayth.base.errors import ErrorCode, ProviderError
from fayth.base.models import Generation, GenerationState, Message, new_text_message


class _CountingSource:
    """Iterator over messages that counts pulls and records close()."""

    def __init__(self, messages: List[Message], fail_after: int | None = None, exc: Exception | None = None) -> None:
        self._messages = messages
        self._fail_after = fail_after
        self._exc = exc
        self.pulled = 0
        self.closed = False

    def __iter__(self) -> Iterator[Message]:
        return self

    def __next__(self) -> Message:
        if self._fail_after is not None and self.pulled == self._fail_after:
            raise self._exc  # type: ignore[misc]
        if self.pulled >= len(self._messages):
            raise StopIteration
        msg = self._messages[self.pulled]
        self.pulled += 1
        return msg

    def close(self) -> None:
        self.closed = True


def _msgs(*texts: str) -> List[Message]:
    return [new_text_message("assistant", t) for t in texts]


def test_materialized_generation_replays_identically():
    gen = Generation(_msgs("a", "b"))
    assert gen.state is GenerationState.MATERIALIZED  # nosec B101
    first = [m.text() for m in gen.all()]
    second = [m.text() for m in gen]
    assert first == second == [["a"], ["b"]]  # nosec B101


def test_empty_generation_yields_nothing():
    gen = Generation()
    assert gen.state is GenerationState.EMPTY  # nosec B101
    assert list(gen) == []  # nosec B101


def test_streaming_generation_drains_source_once():
    source = _CountingSource(_msgs("x", "y", "z"))
    gen = Generation.from_stream(source)
    assert gen.state is GenerationState.STREAMING  # nosec B101

    assert gen.text() == "xyz"  # nosec B101
    assert gen.state is GenerationState.MATERIALIZED  # nosec B101
    assert gen.text() == "xyz"  # nosec B101
    assert source.pulled == 3  # nosec B101


def test_source_is_not_touched_before_iteration_starts():
    source = _CountingSource(_msgs("x"))
    gen = Generation.from_stream(source)
    it = gen.all()
    assert source.pulled == 0  # nosec B101
    assert gen.state is GenerationState.STREAMING  # nosec B101
    assert next(it).text() == ["x"]  # nosec B101


def test_early_exit_caches_only_yielded_items_and_closes_source():
    source = _CountingSource(_msgs("1", "2", "3", "4"))
    gen = Generation.from_stream(source)
    it = gen.all()
    next(it)
    next(it)
    it.close()

    assert source.closed is True  # nosec B101
    assert [m.text() for m in gen.messages] == [["1"], ["2"]]  # nosec B101
    # The generation never goes back to streaming: a new pass replays the cache.
    assert [m.text() for m in gen.all()] == [["1"], ["2"]]  # nosec B101
    assert source.pulled == 2  # nosec B101


def test_cancellation_mid_stream_is_recorded():
    source = _CountingSource(_msgs("a", "b", "c"), fail_after=2, exc=CancelledError("stop"))
    gen = Generation.from_stream(source)
    got = list(gen)
    assert [m.text() for m in got] == [["a"], ["b"]]  # nosec B101
    assert isinstance(gen.error, CancelledError)  # nosec B101
    assert source.closed is True  # nosec B101


def test_provider_error_mid_stream_is_recorded():
    err = ProviderError(code=ErrorCode.TRANSIENT, message="connection reset")
    gen = Generation.from_stream(_CountingSource(_msgs("a"), fail_after=1, exc=err))
    assert gen.text() == "a"  # nosec B101
    assert gen.error is err  # nosec B101


def test_messages_property_returns_a_copy():
    gen = Generation(_msgs("a"))
    gen.messages.append(new_text_message("user", "x"))
    assert len(gen.messages) == 1  # nosec B101


def test_close_releases_unstarted_stream_once():
    source = _CountingSource(_msgs("a", "b"))
    released: List[str] = []
    gen = Generation.from_stream(source, on_close=lambda: released.append("closed"))

    gen.close()
    gen.close()

    assert source.pulled == 0 and source.closed is True  # nosec B101
    assert released == ["closed"]  # nosec B101
    assert list(gen) == []  # nosec B101


def test_on_close_runs_after_drain():
    released: List[str] = []
    gen = Generation.from_stream(_CountingSource(_msgs("a")), on_close=lambda: released.append("closed"))
    assert gen.text() == "a"  # nosec B101
    gen.close()
    assert released == ["closed"]  # nosec B101
