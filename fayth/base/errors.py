"""Unified error taxonomy public surface.

This module re-exports the implementations under ``fayth.base.errors_parts``
so callers have one stable import path for every exception type the library
raises.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
    OptionsValidationError,
    PipelineConfigError,
    ProviderError,
    UnsupportedContentKindError,
)
from .errors_parts.api_error import APIError
from .errors_parts.classification import classify_exception, code_for_status

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
