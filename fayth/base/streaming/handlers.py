"""Fan-out of streamed messages to registered message handlers."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..logging import LogContext, log_event
from ..models import Message


def notify_message_handlers(
    handlers: Iterable[Callable[[Message], None]],
    message: Message,
    logger: logging.Logger,
    ctx: Optional[LogContext] = None,
) -> None:
    """Call each handler with ``message`` in registration order.

    A failing handler is logged as ``stream.handler_error`` and skipped; it
    never stops the stream or the handlers after it.
    """
    for handler in handlers:
        try:
            handler(message)
        except Exception as exc:  # noqa: BLE001 - observer failures are isolated
            log_event(
                logger,
                "stream.handler_error",
                ctx,
                level=logging.WARNING,
                error=str(exc),
                error_type=type(exc).__name__,
                handler=getattr(handler, "__qualname__", repr(handler)),
            )


__all__ = ["notify_message_handlers"]
