"""Offline fake model."""

from .model import FakeModel

__all__ = ["FakeModel"]
