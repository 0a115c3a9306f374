"""Protocols for Pasitos.

Defines the capability set a token stream must provide before the
combinators in ``pasitos.combinators`` can drive it. Streams conform
structurally; no base class is required.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from pasitos.errors import ParseError

T_co = TypeVar("T_co", covariant=True)
S = TypeVar("S", bound="TokenStream")
R = TypeVar("R")

Step = Callable[[S], R]
"""A parsing step: takes the stream, returns a result or raises ParseError."""


@runtime_checkable
class TokenStream(Protocol[T_co]):
    """Protocol for token streams usable with the combinators.

    A stream is a mutable cursor over an ordered sequence of tokens plus a
    stack of saved cursor positions. Tokens must support ``==`` and ``str()``.

    Checkpoints:
        Every ``save()`` is matched by exactly one ``load()`` or
        ``discard()``, innermost first. ``save()`` immediately followed by
        ``load()`` leaves the cursor where it was.

    Thread Safety:
        Streams are single-owner. Never drive one stream from two threads.

    """

    def preview(self) -> T_co | None:
        """Return the next token without consuming it, or None at end.

        Repeated calls without consuming return the same token.
        """
        ...

    def consume(self) -> T_co | None:
        """Return the next token and advance past it, or None at end."""
        ...

    def current_pos(self) -> tuple[int, int]:
        """Return the (line, column) of the cursor, for diagnostics only."""
        ...

    def error(self, message: str) -> ParseError:
        """Build (not raise) a ParseError for the given message.

        Whether the error records the cursor position is up to the stream.
        """
        ...

    def save(self) -> None:
        """Push the current cursor position onto the checkpoint stack."""
        ...

    def load(self) -> None:
        """Pop the most recent checkpoint and move the cursor back to it."""
        ...

    def discard(self) -> None:
        """Pop the most recent checkpoint, leaving the cursor where it is."""
        ...
