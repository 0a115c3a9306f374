"""Parse and evaluate a sum like "12 + 3 + 45" with a TextStream."""

from pasitos import TextStream

DIGITS = "0123456789"


def number(s: TextStream) -> int:
    return int(s.many1(lambda s: s.predicate(DIGITS.__contains__), into="".join))


def spaces(s: TextStream) -> None:
    s.many(lambda s: s.atom(" "))


def term(s: TextStream) -> int:
    s.atom("+")
    spaces(s)
    value = number(s)
    spaces(s)
    return value


stream = TextStream("12 + 3 + 45")
first = number(stream)
spaces(stream)
print(first + sum(stream.many(term)))
