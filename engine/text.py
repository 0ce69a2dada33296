"""Shared text preprocessing for indexing and querying.

Documents and queries must go through the same split + stop-word pipeline,
otherwise stop words could leak into the index or into minus-words.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def split_into_words(text: str) -> list[str]:
    """Split on the space character only; tabs and newlines stay inside words."""
    return [word for word in text.split(" ") if word]


class StopWords:
    """Exact-match, case-sensitive set of ignorable words."""

    def __init__(self, text: str = ""):
        self._words: set[str] = set()
        if text:
            self.add(text)

    def add(self, text: str) -> None:
        self._words.update(split_into_words(text))

    def is_stop_word(self, word: str) -> bool:
        return word in self._words

    def filter(self, words: Iterable[str]) -> list[str]:
        return [w for w in words if w not in self._words]

    def split(self, text: str) -> list[str]:
        """Tokenize → drop stop words."""
        return self.filter(split_into_words(text))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)
