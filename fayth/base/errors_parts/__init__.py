"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `fayth.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    OptionsValidationError,
    PipelineConfigError,
    ProviderError,
    UnsupportedContentKindError,
)
from .api_error import APIError
from .classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "APIError",
    "UnsupportedContentKindError",
    "OptionsValidationError",
    "PipelineConfigError",
    "classify_exception",
    "code_for_status",
]
