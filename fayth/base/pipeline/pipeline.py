"""Composable request pipeline.

Middleware wrap a terminal executor in onion fashion: the first declared
middleware is the outermost, so it sees the request first and the response
last. The chain is composed once at construction and the pipeline is
immutable afterwards; one instance may serve any number of requests from any
number of threads as long as its middleware are themselves stateless.
"""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

import httpx

from ..errors import PipelineConfigError
from .types import Executor, Middleware


class Pipeline:
    """Ordered middleware chain over a terminal executor.

    Raises:
        PipelineConfigError: when ``executor`` is ``None``.
    """

    __slots__ = ("_middlewares", "_executor", "_handler")

    def __init__(self, middlewares: Iterable[Middleware] = (), executor: Optional[Executor] = None) -> None:
        if executor is None:
            raise PipelineConfigError(message="pipeline requires a terminal executor")
        self._middlewares: Tuple[Middleware, ...] = tuple(middlewares)
        self._executor = executor
        handler = executor
        for middleware in reversed(self._middlewares):
            handler = middleware(handler)
        self._handler = handler

    @property
    def middlewares(self) -> Tuple[Middleware, ...]:
        return self._middlewares

    @property
    def executor(self) -> Executor:
        return self._executor

    def execute(self, request: httpx.Request) -> httpx.Response:
        """Run ``request`` through the chain.

        Whatever the chain returns is returned unchanged; non-2xx responses
        are not pipeline failures.
        """
        return self._handler(request)

    __call__ = execute


__all__ = ["Pipeline"]
