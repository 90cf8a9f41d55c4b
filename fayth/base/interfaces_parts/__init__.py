"""Single-class Protocol modules re-exported by ``fayth.base.interfaces``."""

from .memory_store import MessageMemory
from .model import Model

__all__ = ["Model", "MessageMemory"]
