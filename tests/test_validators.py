from __future__ import annotations

import pytest

from text_toolkit import is_email, is_url


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("test@example.com", True),
        ("first.last+tag@sub.example.org", True),
        ("invalid-email", False),
        ("no@tld", False),
        ("two@@example.com", False),
        ("spaces in@example.com", False),
        ("test@example.com\n", False),
        ("", False),
    ],
)
def test_is_email(text: str, expected: bool) -> None:
    assert is_email(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("https://example.com", True),
        ("http://localhost:8000/path?q=1", True),
        ("ftp://files.example.com/readme.txt", True),
        ("not-a-url", False),
        ("/relative/path", False),
        ("", False),
    ],
)
def test_is_url(text: str, expected: bool) -> None:
    assert is_url(text) is expected


def test_is_email_rejects_ecmascript_whitespace() -> None:
    assert is_email("te" + chr(0xFEFF) + "st@example.com") is False
    assert is_email("te\x85st@example.com") is True
