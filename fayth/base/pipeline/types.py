"""Callable shapes used by the request pipeline.

An ``Executor`` turns an ``httpx.Request`` into an ``httpx.Response``. A
``Middleware`` wraps an executor and returns a new one; it may rewrite the
request before delegating, inspect the response afterwards, or
short-circuit without calling ``next`` at all.
"""
from __future__ import annotations

from typing import Callable

import httpx

Executor = Callable[[httpx.Request], httpx.Response]
Middleware = Callable[[Executor], Executor]

__all__ = ["Executor", "Middleware"]
