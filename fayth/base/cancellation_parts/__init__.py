"""Cancellation implementation parts; import from ``fayth.base.cancellation``."""
