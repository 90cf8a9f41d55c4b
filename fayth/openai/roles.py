"""Role translation between the chat completions API and :class:`Role`.

Pure functions. Unknown roles in either direction map to assistant.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..base.models import Role

ROLE_SYSTEM = "system"
ROLE_DEVELOPER = "developer"
ROLE_ASSISTANT = "assistant"
ROLE_USER = "user"
ROLE_FUNCTION = "function"
ROLE_TOOL = "tool"

_TO_MODEL: Mapping[str, Role] = MappingProxyType(
    {
        ROLE_ASSISTANT: Role.ASSISTANT,
        ROLE_SYSTEM: Role.SYSTEM,
        ROLE_DEVELOPER: Role.SYSTEM,
        ROLE_USER: Role.USER,
        ROLE_TOOL: Role.TOOL,
        ROLE_FUNCTION: Role.TOOL,
    }
)

_TO_OPENAI: Mapping[Role, str] = MappingProxyType(
    {
        Role.ASSISTANT: ROLE_ASSISTANT,
        Role.SYSTEM: ROLE_SYSTEM,
        Role.USER: ROLE_USER,
        Role.TOOL: ROLE_TOOL,
    }
)


def to_model_role(role: Optional[str]) -> Role:
    """Map an API role string onto :class:`Role`."""
    return _TO_MODEL.get(role or "", Role.ASSISTANT)


def to_openai_role(role: Role | str) -> str:
    """Map a :class:`Role` (or its value) onto the API role string."""
    try:
        return _TO_OPENAI[Role(role)]
    except ValueError:
        return ROLE_ASSISTANT


__all__ = [
    "ROLE_SYSTEM",
    "ROLE_DEVELOPER",
    "ROLE_ASSISTANT",
    "ROLE_USER",
    "ROLE_FUNCTION",
    "ROLE_TOOL",
    "to_model_role",
    "to_openai_role",
]
