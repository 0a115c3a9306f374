"""Drive the combinators from your own stream class.

Only the TokenStream methods are needed; the combinators are plain
functions that take the stream as their first argument.
"""

from pasitos import ParseConfig, ParseError, choose, parse_config_context, string


class WordStream:
    """Whitespace-separated words, positions reported as word numbers."""

    def __init__(self, text: str) -> None:
        self.words = text.split()
        self.index = 0
        self.checkpoints: list[int] = []

    def preview(self) -> str | None:
        return self.words[self.index] if self.index < len(self.words) else None

    def consume(self) -> str | None:
        word = self.preview()
        if word is not None:
            self.index += 1
        return word

    def current_pos(self) -> tuple[int, int]:
        return (1, self.index + 1)

    def error(self, message: str) -> ParseError:
        return ParseError(message, lineno=1, col_offset=self.index + 1)

    def save(self) -> None:
        self.checkpoints.append(self.index)

    def load(self) -> None:
        self.index = self.checkpoints.pop()

    def discard(self) -> None:
        self.checkpoints.pop()


commands = [
    lambda s: string(s, ["turn", "on"], into=" ".join),
    lambda s: string(s, ["turn", "off"], into=" ".join),
]

print(choose(WordStream("turn off the lights"), commands))

with parse_config_context(ParseConfig(collect_alternatives=True)):
    try:
        choose(WordStream("turn around"), commands)
    except ParseError as exc:
        print(exc)
        for note in exc.__notes__:
            print(" ", note)
