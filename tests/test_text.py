from __future__ import annotations

from engine.text import StopWords, split_into_words


def test_split_on_single_spaces() -> None:
    assert split_into_words("white cat  and   fancy collar") == [
        "white", "cat", "and", "fancy", "collar",
    ]


def test_split_ignores_leading_and_trailing_spaces() -> None:
    assert split_into_words("  cat  ") == ["cat"]


def test_split_empty_and_blank_input() -> None:
    assert split_into_words("") == []
    assert split_into_words("    ") == []


def test_split_keeps_tabs_newlines_and_punctuation() -> None:
    assert split_into_words("cat\tdog end.\nnext") == ["cat\tdog", "end.\nnext"]


def test_stop_words_are_case_sensitive() -> None:
    stop = StopWords("the a")
    assert stop.is_stop_word("the")
    assert not stop.is_stop_word("The")
    assert "a" in stop
    assert "an" not in stop


def test_adding_stop_words_is_idempotent() -> None:
    stop = StopWords()
    stop.add("in the")
    stop.add("the  in")
    assert len(stop) == 2
    assert list(stop) == ["in", "the"]


def test_filter_preserves_order() -> None:
    stop = StopWords("and in")
    assert stop.filter(["dog", "and", "cat", "in", "dog"]) == ["dog", "cat", "dog"]


def test_split_drops_stop_words() -> None:
    stop = StopWords("the a")
    assert stop.split("the cat sat on a mat") == ["cat", "sat", "on", "mat"]
