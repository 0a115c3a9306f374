"""Reference token streams for Pasitos.

Provides in-memory streams that satisfy the TokenStream protocol and mix in
the combinators as methods:

- ``SequenceStream``: any finite sequence of tokens
- ``TextStream``: the characters of a string, with line/column tracking

Checkpoints are kept as a stack of raw cursor offsets, so nested
``attempt`` calls restore correctly at any depth.

Thread Safety:
    Streams are mutable and single-owner. Create one per parse.

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from pasitos.combinators import CombinatorMixin
from pasitos.errors import CheckpointError, ParseError

T = TypeVar("T")


class SequenceStream(CombinatorMixin, Generic[T]):
    """Token stream over a finite sequence.

    The tokens are materialized into a tuple up front. Positions are
    reported as a single line: ``(1, offset + 1)``. Errors carry the
    message only.

    Usage:
        >>> stream = SequenceStream([1, 2, 3, 4])
        >>> stream.many(lambda s: s.predicate(lambda x: x < 3))
        [1, 2]
        >>> stream.offset
        2

    """

    __slots__ = ("_tokens", "_tokens_len", "_pos", "_checkpoints")

    def __init__(self, tokens: Iterable[T]) -> None:
        self._tokens: tuple[T, ...] = tuple(tokens)
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._checkpoints: list[int] = []

    @property
    def offset(self) -> int:
        """Index of the next token to be consumed."""
        return self._pos

    def at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._pos >= self._tokens_len

    def preview(self) -> T | None:
        if self._pos < self._tokens_len:
            return self._tokens[self._pos]
        return None

    def consume(self) -> T | None:
        if self._pos < self._tokens_len:
            token = self._tokens[self._pos]
            self._pos += 1
            return token
        return None

    def current_pos(self) -> tuple[int, int]:
        return (1, self._pos + 1)

    def error(self, message: str) -> ParseError:
        return ParseError(message)

    def save(self) -> None:
        self._checkpoints.append(self._pos)

    def load(self) -> None:
        if not self._checkpoints:
            raise CheckpointError("load() called with no saved checkpoint")
        self._pos = self._checkpoints.pop()

    def discard(self) -> None:
        if not self._checkpoints:
            raise CheckpointError("discard() called with no saved checkpoint")
        self._checkpoints.pop()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(offset={self._pos}, length={self._tokens_len})"


class TextStream(SequenceStream[str]):
    """Character stream over source text.

    Tokens are single characters. Positions are 1-indexed line and column,
    and errors record them together with the optional source file.

    Usage:
        >>> stream = TextStream("ab\\ncd", source_file="demo.txt")
        >>> stream.string("ab\\nc", into="".join)
        'ab\\nc'
        >>> stream.current_pos()
        (2, 2)
        >>> str(stream.error("boom"))
        'demo.txt:2:2 boom'

    """

    __slots__ = ("_source", "source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        super().__init__(source)
        self._source = source
        self.source_file = source_file

    def current_pos(self) -> tuple[int, int]:
        pos = self._pos
        line = self._source.count("\n", 0, pos) + 1
        # rfind returns -1 on the first line, which makes the column 1-indexed
        column = pos - self._source.rfind("\n", 0, pos)
        return (line, column)

    def error(self, message: str) -> ParseError:
        line, column = self.current_pos()
        return ParseError(
            message,
            lineno=line,
            col_offset=column,
            source_file=self.source_file,
        )


__all__ = [
    "SequenceStream",
    "TextStream",
]
