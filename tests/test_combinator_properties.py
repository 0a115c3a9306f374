"""Property-based tests for the combinators using Hypothesis.

These tests verify invariants that should hold for any token sequence:
1. string() matches exactly the prefixes of the input
2. attempt() never moves the cursor when its step fails
3. choose() picks the first candidate that matches
4. many()/many1() collect exactly the leading run of matches
5. optional() never fails
"""

from hypothesis import given
from hypothesis import strategies as st
import pytest

from pasitos import (
    ParseError,
    SequenceStream,
    attempt,
    choose,
    many,
    many1,
    optional,
    predicate,
    string,
)

tokens = st.lists(st.integers(min_value=0, max_value=9), max_size=20)
small = st.integers(min_value=0, max_value=4)
large = st.integers(min_value=5, max_value=9)


def less_than_5(s: SequenceStream[int]) -> int:
    return predicate(s, lambda x: x < 5)


def advance(stream: SequenceStream[int], count: int) -> None:
    for _ in range(count):
        stream.consume()


class TestStringProperties:
    @given(source=tokens, data=st.data())
    def test_every_prefix_matches(self, source: list[int], data: st.DataObject) -> None:
        prefix = source[: data.draw(st.integers(0, len(source)))]
        stream = SequenceStream(source)
        assert string(stream, prefix) == prefix
        assert stream.offset == len(prefix)

    @given(source=tokens, data=st.data())
    def test_non_prefix_fails_at_first_mismatch(
        self, source: list[int], data: st.DataObject
    ) -> None:
        index = data.draw(st.integers(0, len(source)))
        if index < len(source):
            wrong = data.draw(st.integers(0, 9).filter(lambda x: x != source[index]))
        else:
            wrong = data.draw(st.integers(0, 9))
        expected = source[:index] + [wrong] + data.draw(tokens)

        stream = SequenceStream(source)
        with pytest.raises(ParseError) as exc_info:
            string(stream, expected)

        if index < len(source):
            # atom consumes the mismatching token
            assert stream.offset == index + 1
            assert str(exc_info.value) == f"unexpected token {source[index]}, expected {wrong}"
        else:
            assert stream.offset == index
            assert str(exc_info.value) == "unexpected end of input"


class TestAttemptProperties:
    @given(source=tokens, data=st.data())
    def test_failure_is_cursor_neutral(self, source: list[int], data: st.DataObject) -> None:
        start = data.draw(st.integers(0, len(source)))
        consumed = data.draw(st.integers(0, 5))
        stream = SequenceStream(source)
        advance(stream, start)

        def consume_then_fail(s: SequenceStream[int]) -> None:
            advance(s, consumed)
            raise s.error("rejected")

        with pytest.raises(ParseError, match="rejected"):
            attempt(stream, consume_then_fail)
        assert stream.offset == start


class TestChooseProperties:
    @given(source=tokens, options=st.lists(st.lists(st.integers(0, 9), max_size=4), max_size=4))
    def test_first_matching_candidate_wins(
        self, source: list[int], options: list[list[int]]
    ) -> None:
        winner = next((o for o in options if source[: len(o)] == o), None)
        stream = SequenceStream(source)
        steps = [lambda s, o=o: string(s, o) for o in options]

        if winner is not None:
            assert choose(stream, steps) == winner
            assert stream.offset == len(winner)
        else:
            with pytest.raises(ParseError) as exc_info:
                choose(stream, steps)
            assert stream.offset == 0
            if source:
                assert str(exc_info.value) == f"unexpected token {source[0]}"
            else:
                assert str(exc_info.value) == "unexpected end of input"


class TestRepetitionProperties:
    @given(run=st.lists(small), rest=st.lists(large))
    def test_many_collects_leading_run(self, run: list[int], rest: list[int]) -> None:
        stream = SequenceStream(run + rest)
        assert many(stream, less_than_5) == run
        assert stream.offset == len(run)

    @given(run=st.lists(small), rest=st.lists(large))
    def test_many1_matches_many_or_fails(self, run: list[int], rest: list[int]) -> None:
        stream = SequenceStream(run + rest)
        if run:
            assert many1(stream, less_than_5) == run
            assert stream.offset == len(run)
        else:
            with pytest.raises(ParseError) as exc_info:
                many1(stream, less_than_5)
            if rest:
                assert str(exc_info.value) == f"unexpected token {rest[0]}"
            else:
                assert str(exc_info.value) == "unexpected end of input"


class TestOptionalProperties:
    @given(source=tokens, data=st.data())
    def test_never_fails(self, source: list[int], data: st.DataObject) -> None:
        start = data.draw(st.integers(0, len(source)))
        expected = data.draw(st.lists(st.integers(0, 9), min_size=1, max_size=3))
        stream = SequenceStream(source)
        advance(stream, start)

        optional(stream, lambda s: string(s, expected))

        if source[start : start + len(expected)] == expected:
            assert stream.offset == start + len(expected)
        else:
            assert stream.offset == start
