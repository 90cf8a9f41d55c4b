"""Streaming helpers: SSE framing, typed chunk decoding and handler fan-out."""

from .handlers import notify_message_handlers
from .sse_decoder import decode_sse_stream, iter_sse_payloads

__all__ = ["decode_sse_stream", "iter_sse_payloads", "notify_message_handlers"]
