from __future__ import annotations

from text_toolkit import extract_words, word_count


def test_extract_words_keeps_order_and_case() -> None:
    assert extract_words("Hello, world! How are you?") == ["Hello", "world", "How", "are", "you"]


def test_extract_words_empty_when_no_word_characters() -> None:
    assert extract_words("") == []
    assert extract_words("?!  ...") == []


def test_extract_words_treats_underscore_and_digits_as_word() -> None:
    assert extract_words("snake_case v2") == ["snake_case", "v2"]


def test_word_count_is_case_insensitive() -> None:
    assert word_count("hello world hello") == {"hello": 2, "world": 1}
    assert word_count("Hello HELLO hello") == {"hello": 3}
    assert word_count("") == {}
