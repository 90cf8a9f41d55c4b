"""Model Protocol (single-class module).

Interface shared by every model implementation (remote chat model, fake
model) so application code can swap them freely.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from ..cancellation import CancellationToken
from ..models import Generation, Message
from ..options import ModelOption


@runtime_checkable
class Model(Protocol):
    """A text generation model."""

    def generate(
        self,
        messages: Sequence[Message],
        *options: ModelOption,
        token: Optional[CancellationToken] = None,
    ) -> Generation:  # pragma: no cover - interface
        """Generate a response for ``messages``.

        Parameters
        ----------
        messages:
            Conversation so far; must not be empty.
        options:
            Per-call overrides applied after the model's defaults.
        token:
            Optional cancellation token observed for the lifetime of the
            returned generation.

        Returns
        -------
        Generation
            Materialized for buffered responses, lazy for streamed ones.

        Raises
        ------
        ProviderError
            On precondition, transport or decode failures.
        """
        ...
