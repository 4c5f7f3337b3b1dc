from __future__ import annotations

from text_toolkit import ALPHANUMERIC, random_string
from text_toolkit.utils.seeds import make_rng


def test_random_string_length_and_charset() -> None:
    first = random_string(10)
    second = random_string(10)
    assert len(first) == 10
    assert len(second) == 10
    assert first != second
    assert set(first) <= set(ALPHANUMERIC)


def test_random_string_custom_charset() -> None:
    value = random_string(50, "ab")
    assert len(value) == 50
    assert set(value) <= {"a", "b"}


def test_random_string_degenerate_inputs() -> None:
    assert random_string(0) == ""
    assert random_string(-3) == ""
    assert random_string(5, "") == ""


def test_random_string_reproducible_with_rng() -> None:
    assert random_string(16, rng=make_rng(42)) == random_string(16, rng=make_rng(42))

