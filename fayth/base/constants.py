"""Base shared constants.

Central location for sentinel strings and protocol literals so the transport,
decoder and validation layers do not scatter magic values.

# pragma: allowlist secret
"""
from __future__ import annotations

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Server-sent events framing
SSE_DATA_PREFIX = "data: "
SSE_DONE_MARKER = "[DONE]"

# Headers applied to every JSON request
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Headers applied to streaming requests
STREAM_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "text/event-stream",
}

# Option validation bounds
TEMPERATURE_RANGE = (0.0, 2.0)
TOP_P_RANGE = (0.0, 1.0)
PENALTY_RANGE = (-2.0, 2.0)
TOP_LOG_PROBS_RANGE = (0, 20)
MAX_STOP_SEQUENCES = 4
RESPONSE_FORMAT_TYPES = frozenset({"text", "json_object", "json_schema"})

__all__ = [
    "MISSING_API_KEY_ERROR",
    "SSE_DATA_PREFIX",
    "SSE_DONE_MARKER",
    "DEFAULT_HEADERS",
    "STREAM_HEADERS",
    "TEMPERATURE_RANGE",
    "TOP_P_RANGE",
    "PENALTY_RANGE",
    "TOP_LOG_PROBS_RANGE",
    "MAX_STOP_SEQUENCES",
    "RESPONSE_FORMAT_TYPES",
]
