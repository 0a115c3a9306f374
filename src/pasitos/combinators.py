"""Parser combinators over any TokenStream.

Each operation takes the stream as its first argument and is written only in
terms of the TokenStream capabilities (preview, consume, current_pos, error,
save, load, discard). Failure is signalled by raising the ParseError the
stream's ``error()`` factory builds.

Backtracking is explicit. ``predicate``, ``atom`` and ``string`` leave
consumed tokens consumed when they fail; wrap them in ``attempt`` to roll
back. ``choose``, ``many``, ``many1`` and ``optional`` wrap their steps in
``attempt`` themselves.

Example:
    >>> stream = SequenceStream([4, 5, 6, 7])
    >>> choose(stream, [
    ...     lambda s: string(s, [1, 2, 3]),
    ...     lambda s: string(s, [4, 5, 6, 8]),
    ...     lambda s: string(s, [4, 5, 6]),
    ... ])
    [4, 5, 6]

Repetition is greedy and choice is ordered (PEG-style): an accepted item is
never reconsidered, and nothing is memoized.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from pasitos.config import get_parse_config
from pasitos.errors import ParseError, RepetitionLimitError
from pasitos.protocols import Step, TokenStream
from pasitos.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")
S = TypeVar("S", bound=TokenStream)

UNEXPECTED_END = "unexpected end of input"


def next_token(stream: TokenStream[T]) -> T:
    """Consume one token, failing at end of input."""
    token = stream.consume()
    if token is None:
        raise stream.error(UNEXPECTED_END)
    return token


def predicate(stream: TokenStream[T], pred: Callable[[T], bool]) -> T:
    """Consume one token and require ``pred(token)`` to hold.

    The token stays consumed when the predicate rejects it.
    """
    token = next_token(stream)
    if not pred(token):
        raise stream.error(f"unexpected token {token}")
    return token


def atom(stream: TokenStream[T], expected: T) -> T:
    """Consume one token and require it to equal ``expected``.

    The token stays consumed when it does not match.
    """
    token = next_token(stream)
    if token != expected:
        raise stream.error(f"unexpected token {token}, expected {expected}")
    return token


def string(
    stream: TokenStream[T],
    sequence: Iterable[T],
    into: Callable[[list[T]], R] = list,
) -> R:
    """Match ``sequence`` token by token.

    Stops at the first mismatch with that ``atom``'s error, leaving the
    cursor where the partial match ended.

    Args:
        stream: Stream to read from
        sequence: Expected tokens, in order
        into: Builds the result from the matched tokens (``list``,
            ``tuple``, ``"".join``, ...)

    Returns:
        ``into`` applied to the matched tokens
    """
    matched = [atom(stream, expected) for expected in sequence]
    return into(matched)


def attempt(stream: S, step: Step[S, R]) -> R:
    """Run ``step``, restoring the cursor if it raises ParseError.

    On success the checkpoint is discarded and the cursor stays advanced.
    """
    stream.save()
    try:
        result = step(stream)
    except ParseError as exc:
        stream.load()
        logger.debug("Backtracked after: %s", exc)
        raise
    except BaseException:
        stream.discard()
        raise
    stream.discard()
    return result


def choose(stream: S, steps: Sequence[Step[S, R]]) -> R:
    """Return the result of the first step that succeeds.

    Steps are tried in order, each under ``attempt``. When all of them
    fail the error describes the token at the starting position (or end of
    input), not the individual failures. With
    ``ParseConfig.collect_alternatives`` each failure is attached to that
    error as a note.
    """
    failures: list[ParseError] = []
    for step in steps:
        try:
            return attempt(stream, step)
        except ParseError as exc:
            failures.append(exc)

    token = stream.preview()
    if token is None:
        error = stream.error(UNEXPECTED_END)
    else:
        error = stream.error(f"unexpected token {token}")
    if get_parse_config().collect_alternatives:
        for index, failure in enumerate(failures, start=1):
            error.add_note(f"alternative {index}: {failure}")
    logger.debug("No alternative matched (%d tried): %s", len(failures), error)
    raise error


def _repeat(stream: S, step: Step[S, R], results: list[R]) -> list[R]:
    limit = get_parse_config().max_repetitions
    while True:
        if limit is not None and len(results) > limit:
            raise RepetitionLimitError(limit)
        try:
            results.append(attempt(stream, step))
        except ParseError:
            return results


def many(
    stream: S,
    step: Step[S, R],
    into: Callable[[list[R]], Any] = list,
) -> Any:
    """Apply ``step`` until it fails; zero matches is a success.

    The failing application is rolled back, so the cursor ends right after
    the last successful one.
    """
    return into(_repeat(stream, step, []))


def many1(
    stream: S,
    step: Step[S, R],
    into: Callable[[list[R]], Any] = list,
) -> Any:
    """Like ``many`` but requires at least one match.

    The first application is not wrapped in ``attempt``: if it fails, its
    error propagates untouched and whatever it consumed stays consumed.
    """
    return into(_repeat(stream, step, [step(stream)]))


def optional(stream: S, step: Step[S, Any]) -> None:
    """Apply ``step`` if it matches; never fails and returns nothing."""
    try:
        attempt(stream, step)
    except ParseError:
        pass


class CombinatorMixin:
    """Mixin exposing the combinators as methods of a stream.

    The host must implement the TokenStream capabilities. Each method
    delegates to the module-level function of the same name, so
    ``stream.many(step)`` is ``many(stream, step)``.

    Example:
        >>> stream = SequenceStream("abc")
        >>> stream.string("ab", into="".join)
        'ab'

    """

    __slots__ = ()

    def next_token(self) -> Any:
        return next_token(self)

    def predicate(self, pred: Callable[[Any], bool]) -> Any:
        return predicate(self, pred)

    def atom(self, expected: Any) -> Any:
        return atom(self, expected)

    def string(self, sequence: Iterable[Any], into: Callable[[list[Any]], Any] = list) -> Any:
        return string(self, sequence, into)

    def attempt(self, step: Callable[[Any], R]) -> R:
        return attempt(self, step)

    def choose(self, steps: Sequence[Callable[[Any], R]]) -> R:
        return choose(self, steps)

    def many(self, step: Callable[[Any], R], into: Callable[[list[R]], Any] = list) -> Any:
        return many(self, step, into)

    def many1(self, step: Callable[[Any], R], into: Callable[[list[R]], Any] = list) -> Any:
        return many1(self, step, into)

    def optional(self, step: Callable[[Any], Any]) -> None:
        optional(self, step)


__all__ = [
    "CombinatorMixin",
    "UNEXPECTED_END",
    "atom",
    "attempt",
    "choose",
    "many",
    "many1",
    "next_token",
    "optional",
    "predicate",
    "string",
]
