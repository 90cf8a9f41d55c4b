"""Validation pass over merged :class:`ModelOptions`.

Runs once per ``generate`` call before any network activity. The first
violated constraint raises :class:`OptionsValidationError` naming the field
and the accepted range, so no partial request is ever sent.
"""
from __future__ import annotations

from typing import Tuple

from ..constants import (
    MAX_STOP_SEQUENCES,
    PENALTY_RANGE,
    RESPONSE_FORMAT_TYPES,
    TEMPERATURE_RANGE,
    TOP_LOG_PROBS_RANGE,
    TOP_P_RANGE,
)
from ..errors import OptionsValidationError
from .model_options import ModelOptions


def _check_range(name: str, value: float, bounds: Tuple[float, float], model: str) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise OptionsValidationError(
            message=f"{name} must be between {low} and {high}, got {value}",
            field=name,
            model=model or None,
        )


def validate_options(opts: ModelOptions) -> None:
    """Raise :class:`OptionsValidationError` if ``opts`` is not sendable.

    Constraints:
        - ``model`` is non-empty.
        - ``temperature`` in [0.0, 2.0].
        - ``top_p`` in [0.0, 1.0] when nonzero.
        - ``max_tokens`` positive when nonzero.
        - ``frequency_penalty`` / ``presence_penalty`` in [-2.0, 2.0] when nonzero.
        - ``top_log_probs`` in [0, 20] when nonzero.
        - ``response_format.type`` one of text/json_object/json_schema when set.
        - at most four ``stop`` sequences.
    """
    model = opts.model
    if not model or not model.strip():
        raise OptionsValidationError(message="model must be set", field="model")
    _check_range("temperature", opts.temperature, TEMPERATURE_RANGE, model)
    if opts.top_p:
        _check_range("top_p", opts.top_p, TOP_P_RANGE, model)
    if opts.max_tokens and opts.max_tokens < 0:
        raise OptionsValidationError(
            message=f"max_tokens must be positive, got {opts.max_tokens}",
            field="max_tokens",
            model=model,
        )
    if opts.frequency_penalty:
        _check_range("frequency_penalty", opts.frequency_penalty, PENALTY_RANGE, model)
    if opts.presence_penalty:
        _check_range("presence_penalty", opts.presence_penalty, PENALTY_RANGE, model)
    if opts.top_log_probs:
        _check_range("top_log_probs", opts.top_log_probs, TOP_LOG_PROBS_RANGE, model)
    fmt = opts.response_format.type
    if fmt and fmt not in RESPONSE_FORMAT_TYPES:
        raise OptionsValidationError(
            message=f"response_format.type must be one of {sorted(RESPONSE_FORMAT_TYPES)}, got {fmt!r}",
            field="response_format",
            model=model,
        )
    if len(opts.stop) > MAX_STOP_SEQUENCES:
        raise OptionsValidationError(
            message=f"stop accepts at most {MAX_STOP_SEQUENCES} sequences, got {len(opts.stop)}",
            field="stop",
            model=model,
        )


__all__ = ["validate_options"]
