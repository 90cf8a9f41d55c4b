"""Transport configuration resolved per call.

``CallConfig`` holds connection settings only (never generation parameters).
It is built fresh for every request by applying option lists in order:
client-level, then service-level, then call-level, so the last writer wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import httpx

from ..base.pipeline import Executor


@dataclass
class CallConfig:
    """Connection settings for one request.

    Attributes:
        base_url: Absolute base URL, always ending with ``/``.
        api_key: Bearer token; required.
        organization: Optional organization scope header.
        project: Optional project scope header.
        executor: Terminal executor; a pooled ``HttpxExecutor`` when ``None``.
    """

    base_url: Optional[httpx.URL] = None
    api_key: str = ""
    organization: str = ""
    project: str = ""
    executor: Optional[Executor] = None


CallOption = Callable[[CallConfig], None]


def with_base_url(url: httpx.URL | str) -> CallOption:
    """Set the base URL, adding a trailing slash when missing."""
    text = str(url)
    normalized = httpx.URL(text if text.endswith("/") else text + "/")

    def _apply(config: CallConfig) -> None:
        config.base_url = normalized

    return _apply


def with_api_key(api_key: str) -> CallOption:
    def _apply(config: CallConfig) -> None:
        config.api_key = api_key

    return _apply


def with_organization(organization: str) -> CallOption:
    def _apply(config: CallConfig) -> None:
        config.organization = organization

    return _apply


def with_project(project: str) -> CallOption:
    def _apply(config: CallConfig) -> None:
        config.project = project

    return _apply


def with_executor(executor: Executor) -> CallOption:
    """Replace the terminal executor (e.g. with an ``httpx.MockTransport`` client)."""

    def _apply(config: CallConfig) -> None:
        config.executor = executor

    return _apply


def resolve_call_config(*layers: Iterable[CallOption]) -> CallConfig:
    """Apply each layer's options in order onto a fresh :class:`CallConfig`."""
    config = CallConfig()
    for layer in layers:
        for option in layer:
            option(config)
    return config


__all__ = [
    "CallConfig",
    "CallOption",
    "with_base_url",
    "with_api_key",
    "with_organization",
    "with_project",
    "with_executor",
    "resolve_call_config",
]
