"""
Pasitos — Parser combinators for any token stream

Give a token stream a handful of capabilities (preview, consume,
current_pos, error, save, load, discard) and it gains sequencing,
backtracking, ordered choice and repetition without per-grammar code.

Quick Start:
    >>> from pasitos import SequenceStream, choose, string
    >>> stream = SequenceStream([4, 5, 6, 7, 8, 9, 10])
    >>> choose(stream, [
    ...     lambda s: string(s, [1, 2, 3]),
    ...     lambda s: string(s, [4, 5, 6, 8]),
    ...     lambda s: string(s, [4, 5, 6]),
    ... ])
    [4, 5, 6]
    >>> stream.offset
    3

Custom Streams:
    Any class with the TokenStream methods works with the combinators.
    Mix in CombinatorMixin to call them as methods:

    >>> class MyStream(CombinatorMixin):
    ...     def preview(self): ...
    ...     def consume(self): ...
    ...     def current_pos(self): ...
    ...     def error(self, message): return ParseError(message)
    ...     def save(self): ...
    ...     def load(self): ...
    ...     def discard(self): ...

Installation:
    pip install pasitos              # Core library (zero deps)
    pip install pasitos[test]        # + pytest and hypothesis for the test suite
"""

from pasitos.combinators import (
    UNEXPECTED_END,
    CombinatorMixin,
    atom,
    attempt,
    choose,
    many,
    many1,
    next_token,
    optional,
    predicate,
    string,
)
from pasitos.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from pasitos.errors import CheckpointError, ParseError, PasitosError, RepetitionLimitError
from pasitos.protocols import Step, TokenStream
from pasitos.stream import SequenceStream, TextStream

__version__ = "0.1.0"

__all__ = [
    "CheckpointError",
    "CombinatorMixin",
    "ParseConfig",
    "ParseError",
    "PasitosError",
    "RepetitionLimitError",
    "SequenceStream",
    "Step",
    "TextStream",
    "TokenStream",
    "UNEXPECTED_END",
    "atom",
    "attempt",
    "choose",
    "get_parse_config",
    "many",
    "many1",
    "next_token",
    "optional",
    "parse_config_context",
    "predicate",
    "reset_parse_config",
    "set_parse_config",
    "string",
    "__version__",
]
