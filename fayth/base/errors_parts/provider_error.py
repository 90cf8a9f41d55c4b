"""
Structured error exception types.

`ProviderError` wraps every failure surfaced by the library with a normalized
`ErrorCode`. Narrower subclasses exist for the failure categories callers
commonly branch on: unsupported content kinds, option validation and pipeline
misconfiguration.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str = "fayth"
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class UnsupportedContentKindError(ProviderError):
    """Raised when a serialized content part carries an unknown discriminator."""

    code: ErrorCode = ErrorCode.UNSUPPORTED
    message: str = "unsupported content kind"
    kind: Optional[str] = None


@dataclass
class OptionsValidationError(ProviderError):
    """Raised when model options violate a range or shape constraint.

    ``field`` names the offending option so callers can report it without
    parsing the message.
    """

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "invalid model options"
    field: Optional[str] = None


@dataclass
class PipelineConfigError(ProviderError):
    """Raised when a request pipeline cannot be assembled."""

    code: ErrorCode = ErrorCode.CONFIGURATION
    message: str = "invalid pipeline configuration"


__all__ = [
    "ProviderError",
    "UnsupportedContentKindError",
    "OptionsValidationError",
    "PipelineConfigError",
]
