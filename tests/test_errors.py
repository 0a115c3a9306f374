"""Error construction and hierarchy tests."""

import pytest

from pasitos.errors import CheckpointError, ParseError, PasitosError, RepetitionLimitError

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.message == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing bracket", lineno=10, col_offset=5)
        assert str(err) == "10:5 missing bracket"

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="input.txt")
        assert str(err) == "input.txt:1:1 error"

    def test_column_without_line_is_ignored(self) -> None:
        err = ParseError("error", col_offset=3)
        assert str(err) == "error"

    def test_is_pasitos_error(self) -> None:
        assert isinstance(ParseError("x"), PasitosError)


# =========================================================================
# Non-parse errors
# =========================================================================


class TestRepetitionLimitError:
    def test_message_names_limit(self) -> None:
        err = RepetitionLimitError(100)
        assert err.limit == 100
        assert str(err) == "repetition limit of 100 exceeded"

    def test_is_not_a_parse_error(self) -> None:
        err = RepetitionLimitError(1)
        assert isinstance(err, PasitosError)
        assert not isinstance(err, ParseError)


class TestCheckpointError:
    def test_is_not_a_parse_error(self) -> None:
        err = CheckpointError("empty")
        assert isinstance(err, PasitosError)
        assert not isinstance(err, ParseError)

    def test_can_be_raised_and_caught_as_base(self) -> None:
        with pytest.raises(PasitosError, match="empty"):
            raise CheckpointError("empty")
