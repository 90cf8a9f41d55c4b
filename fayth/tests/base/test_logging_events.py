"""Focused tests for fayth.base.logging.

Covers:
- _parse_level string parsing
- log_event drops None fields and merges the LogContext
- normalized_log_event always carries phase/emitted and drops None extras
- JsonFormatter hoists JSON payloads to the top level
"""
from __future__ import annotations

import json
import logging

from fayth.base.log_support import JsonFormatter, LogContext
from fayth.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    get_logger,
    log_event,
    normalized_log_event,
)


def test_parse_level_variants():
    assert _parse_level(None) == logging.WARNING  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_log_event_merges_context_and_drops_none(captured_events):
    logger = get_logger("fayth.test.logging")
    log_event(logger, "chat.start", LogContext(provider="p", model="m"), attempt=None, size=3)

    events = captured_events()
    assert events[-1] == {"event": "chat.start", "provider": "p", "model": "m", "size": 3}  # nosec B101


def test_normalized_log_event_emits_required_keys(captured_events):
    logger = get_logger("fayth.test.logging")
    normalized_log_event(
        logger,
        "stream.finalize",
        LogContext(provider="p"),
        phase="finalize",
        emitted=3,
        error_code="TIMEOUT",
        emitted_extra=None,
        outcome="complete",
    )
    normalized_log_event(logger, "stream.start", phase="start", emitted=False)

    first, second = captured_events()[-2:]
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in first  # nosec B101
    assert first["phase"] == "finalize" and first["emitted"] == 3  # nosec B101
    assert "emitted_extra" not in first  # nosec B101
    assert first["outcome"] == "complete" and first["provider"] == "p"  # nosec B101
    assert "error_code" not in second  # nosec B101


def test_events_below_level_are_not_emitted(captured_events):
    base = get_logger()
    base.setLevel(logging.WARNING)
    log_event(get_logger("fayth.test.logging"), "quiet", level=logging.DEBUG)
    assert captured_events() == []  # nosec B101


def test_json_formatter_hoists_payload():
    record = logging.LogRecord("fayth", logging.INFO, __file__, 1, json.dumps({"event": "x", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "x" and out["n"] == 1  # nosec B101
    assert out["level"] == "INFO" and out["logger"] == "fayth"  # nosec B101
    assert "msg" not in out  # nosec B101
