"""
Provider-agnostic interfaces (Protocols).

Re-exports the single-class modules under ``fayth.base.interfaces_parts`` so
upstream code has one stable import path.
"""

from __future__ import annotations

from .interfaces_parts import MessageMemory, Model

__all__ = ["Model", "MessageMemory"]
