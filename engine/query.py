"""Query parsing: filtered query words → plus-words and minus-words."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

MINUS_MARKER = "-"


@dataclass
class Query:
    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)

    def __bool__(self) -> bool:
        return bool(self.plus_words or self.minus_words)


def parse_query(words: Iterable[str], minus_marker: str = MINUS_MARKER) -> Query:
    """Build a Query from words that were already stop-word filtered.

    Every word lands in `plus_words`, minus-marked ones included (so "-cat"
    is also scored as the literal term "-cat").  A marked word additionally
    adds its stripped form to `minus_words`; a bare marker adds "".
    """
    query = Query()
    for word in words:
        query.plus_words.add(word)
        if word.startswith(minus_marker):
            query.minus_words.add(word[len(minus_marker) :])
    return query
