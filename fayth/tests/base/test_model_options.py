"""Unit tests for model options merge and validation.

Covers:
- Later overrides win; untouched fields keep the base value; base unchanged
- Boundary checks on temperature, top_p, penalties and stop sequences
- Wire form omits zero-valued optional parameters
"""
from __future__ import annotations

import pytest

from fayth.base.errors import ErrorCode, OptionsValidationError
from fayth.base.options import (
    ModelOptions,
    merge_options,
    validate_options,
    with_frequency_penalty,
    with_json_mode,
    with_max_tokens,
    with_message_handler,
    with_model,
    with_stop,
    with_stream,
    with_temperature,
    with_text_mode,
    with_top_log_probs,
    with_top_p,
)


def test_merge_later_override_wins_and_base_is_untouched():
    base = ModelOptions(model="a", temperature=0.5)
    merged = merge_options(base, with_model("b"), with_temperature(1.0), with_model("c"))

    assert merged.model == "c"  # nosec B101
    assert merged.temperature == 1.0  # nosec B101
    assert base.model == "a" and base.temperature == 0.5  # nosec B101


def test_merge_copies_lists():
    base = ModelOptions(model="m", stop=["x"])
    merged = merge_options(base, lambda o: o.stop.append("y"))
    assert base.stop == ["x"]  # nosec B101
    assert merged.stop == ["x", "y"]  # nosec B101


def test_message_handlers_accumulate_in_order():
    calls = []
    merged = merge_options(
        ModelOptions(model="m"),
        with_message_handler(lambda m: calls.append(1)),
        with_message_handler(lambda m: calls.append(2)),
    )
    for handler in merged.message_handlers:
        handler(None)
    assert calls == [1, 2]  # nosec B101


def test_json_and_text_mode_set_response_format():
    assert merge_options(ModelOptions(), with_json_mode()).response_format.type == "json_object"  # nosec B101
    assert merge_options(ModelOptions(), with_json_mode(), with_text_mode()).response_format.type == "text"  # nosec B101


@pytest.mark.parametrize("temperature", [0.0, 1.3, 2.0])
def test_temperature_within_range_is_valid(temperature):
    validate_options(merge_options(ModelOptions(model="m"), with_temperature(temperature)))


@pytest.mark.parametrize("temperature", [-0.1, 2.1])
def test_temperature_out_of_range_is_rejected(temperature):
    with pytest.raises(OptionsValidationError) as exc_info:
        validate_options(merge_options(ModelOptions(model="m"), with_temperature(temperature)))
    assert exc_info.value.field == "temperature"  # nosec B101
    assert exc_info.value.code is ErrorCode.VALIDATION  # nosec B101


def test_stop_sequence_limit():
    validate_options(merge_options(ModelOptions(model="m"), with_stop("a", "b", "c", "d")))
    with pytest.raises(OptionsValidationError) as exc_info:
        validate_options(merge_options(ModelOptions(model="m"), with_stop("a", "b", "c", "d", "e")))
    assert exc_info.value.field == "stop"  # nosec B101


def test_missing_model_is_rejected():
    with pytest.raises(OptionsValidationError) as exc_info:
        validate_options(ModelOptions())
    assert exc_info.value.field == "model"  # nosec B101


@pytest.mark.parametrize(
    "override, field",
    [
        (with_top_p(1.5), "top_p"),
        (with_frequency_penalty(-2.5), "frequency_penalty"),
        (with_top_log_probs(21), "top_log_probs"),
        (with_max_tokens(-1), "max_tokens"),
        (lambda o: setattr(o.response_format, "type", "yaml"), "response_format"),
    ],
)
def test_other_constraints_name_their_field(override, field):
    with pytest.raises(OptionsValidationError) as exc_info:
        validate_options(merge_options(ModelOptions(model="m"), override))
    assert exc_info.value.field == field  # nosec B101


def test_to_wire_omits_zero_values_but_keeps_temperature():
    wire = ModelOptions(model="m").to_wire()
    assert wire == {"model": "m", "temperature": 0.0}  # nosec B101

    full = merge_options(ModelOptions(model="m"), with_max_tokens(64), with_stream(), with_json_mode(), with_stop("END")).to_wire()
    assert full["max_tokens"] == 64  # nosec B101
    assert full["stream"] is True  # nosec B101
    assert full["response_format"] == {"type": "json_object"}  # nosec B101
    assert full["stop"] == ["END"]  # nosec B101
    assert "message_handlers" not in full  # nosec B101
