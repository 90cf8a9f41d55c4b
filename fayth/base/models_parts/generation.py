"""
Generation: the result of one completion request.

A generation exposes buffered and streamed results through one iterator.

States
------
``EMPTY``
    Built without messages and without a stream.
``MATERIALIZED``
    Messages are held in a list; :meth:`Generation.all` replays them and can
    be called any number of times.
``STREAMING``
    Messages will come from a lazy source (typically the SSE decoder). The
    first :meth:`Generation.all` takes the source, clears it and moves the
    generation to ``MATERIALIZED``; every item is appended to the backing
    list at the moment it is handed to the consumer. A generation never
    returns to ``STREAMING``, so the underlying transport stream is consumed
    at most once.

Stream failures (cancellation, transport errors) end iteration early and are
recorded in :attr:`Generation.error`; messages yielded before the failure
remain valid. Check ``error`` after the loop.

Draining the stream (or breaking out of the loop) releases the transport. A
streaming generation that is never iterated holds its HTTP response open
until :meth:`Generation.close` is called.
"""
from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional

from ..cancellation import CancelledError
from ..errors import ProviderError
from ..logging import get_logger, log_event
from .message import Message

_logger = get_logger("fayth.generation")


class GenerationState(str, Enum):
    """Lifecycle state of a :class:`Generation`."""

    EMPTY = "empty"
    STREAMING = "streaming"
    MATERIALIZED = "materialized"


class Generation:
    """Lazy, single-consumption view over generated messages."""

    def __init__(self, messages: Optional[Iterable[Message]] = None) -> None:
        self._messages: List[Message] = list(messages or [])
        self._source: Optional[Iterator[Message]] = None
        self._error: Optional[BaseException] = None
        self._on_close: Optional[Callable[[], None]] = None
        self._lock = threading.Lock()
        self._state = GenerationState.MATERIALIZED if self._messages else GenerationState.EMPTY

    @classmethod
    def from_stream(
        cls,
        source: Iterable[Message],
        *,
        on_close: Optional[Callable[[], None]] = None,
    ) -> "Generation":
        """Return a generation that lazily drains ``source`` on first iteration.

        ``on_close`` runs once the source is exhausted, abandoned or released
        through :meth:`close`; transports use it to free the HTTP response.
        """
        gen = cls()
        gen._source = iter(source)
        gen._on_close = on_close
        gen._state = GenerationState.STREAMING
        return gen

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def messages(self) -> List[Message]:
        """Snapshot of the messages cached so far."""
        return list(self._messages)

    @property
    def error(self) -> Optional[BaseException]:
        """Error that ended the stream early, or ``None``."""
        return self._error

    def all(self) -> Iterator[Message]:
        """Iterate the generated messages.

        For a streaming generation the first iterator to start drains the
        source; every later one replays whatever the first one cached.
        """
        source = self._take_source()
        if source is None:
            yield from list(self._messages)
            return
        yield from self._drain(source)

    def __iter__(self) -> Iterator[Message]:
        return self.all()

    def text(self, sep: str = "") -> str:
        """Join the text of every message (drains a pending stream)."""
        return sep.join(m.joined_text() for m in self.all())

    def close(self) -> None:
        """Release a stream that has not been iterated.

        The generation becomes ``MATERIALIZED`` with whatever was cached
        (nothing, for an unstarted stream). A no-op otherwise.
        """
        source = self._take_source()
        if source is not None:
            self._release(source)

    def _take_source(self) -> Optional[Iterator[Message]]:
        with self._lock:
            if self._state is not GenerationState.STREAMING:
                return None
            source, self._source = self._source, None
            self._state = GenerationState.MATERIALIZED
            return source

    def _drain(self, source: Iterator[Message]) -> Iterator[Message]:
        try:
            for msg in source:
                self._messages.append(msg)
                yield msg
        except (CancelledError, ProviderError) as exc:
            self._error = exc
            log_event(
                _logger,
                "generation.error",
                level=logging.INFO if isinstance(exc, CancelledError) else logging.WARNING,
                error=str(exc),
                error_type=type(exc).__name__,
                emitted=len(self._messages),
            )
        finally:
            self._release(source)

    def _release(self, source: Iterator[Message]) -> None:
        close = getattr(source, "close", None)
        if close is not None:
            close()
        on_close, self._on_close = self._on_close, None
        if on_close is not None:
            on_close()


__all__ = ["Generation", "GenerationState"]
