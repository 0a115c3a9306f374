"""Exception classes for Pasitos.

Provides standardized exceptions for error handling throughout Pasitos.

Only ParseError is a parse failure. The combinators catch it to backtrack;
every other PasitosError propagates through them untouched.
"""

from __future__ import annotations


class PasitosError(Exception):
    """Base exception for all Pasitos errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(PasitosError):
    """A step rejected the input.

    Streams build these through their ``error()`` factory. Streams that want
    richer diagnostics may subclass it; the combinators never look inside.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class CheckpointError(PasitosError):
    """Checkpoint stack misused.

    Raised by the bundled streams when ``load()`` or ``discard()`` is called
    with no checkpoint saved.
    """

    pass


class RepetitionLimitError(PasitosError):
    """A repetition ran past ``ParseConfig.max_repetitions``.

    Usually means a step that succeeds without consuming input was handed
    to ``many`` or ``many1``.
    """

    def __init__(self, limit: int) -> None:
        """Initialize repetition limit error.

        Args:
            limit: The configured maximum number of repetitions
        """
        self.limit = limit
        super().__init__(f"repetition limit of {limit} exceeded")
