from __future__ import annotations

"""Truncation, slugs, whitespace and HTML escaping."""

import re
import unicodedata

from ..utils.patterns import WHITESPACE_CLASS, strip_whitespace

_COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")
_SLUG_DISALLOWED_RE = re.compile(f"[^A-Za-z0-9_{WHITESPACE_CLASS}-]")
_SLUG_GAP_RE = re.compile(f"[{WHITESPACE_CLASS}_-]+")
_WHITESPACE_RE = re.compile(f"[{WHITESPACE_CLASS}]+")
_HTML_RESERVED_RE = re.compile(r"[&<>\"']")

HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def truncate(
    text: str,
    length: int,
    *,
    suffix: str = "...",
    preserve_words: bool = False,
) -> str:
    """Shorten *text* to *length* characters plus *suffix*.

    Text that already fits is returned untouched. With *preserve_words* the
    cut moves back to the last space inside the kept part, unless that space
    is the first character.
    """

    if len(text) <= length:
        return text
    truncated = text[: max(length, 0)]
    if preserve_words:
        last_space = truncated.rfind(" ")
        if last_space > 0:
            return truncated[:last_space] + suffix
    return truncated + suffix


def slugify(
    text: str,
    *,
    lowercase: bool = True,
    separator: str = "-",
    remove_diacritics: bool = True,
) -> str:
    """Build a URL-friendly slug from *text*."""

    result = text
    if remove_diacritics:
        result = _COMBINING_MARKS_RE.sub("", unicodedata.normalize("NFD", result))
    result = strip_whitespace(_SLUG_DISALLOWED_RE.sub("", result))
    result = _SLUG_GAP_RE.sub(lambda _: separator, result)
    return result.lower() if lowercase else result


def normalize_whitespace(text: str) -> str:
    return strip_whitespace(_WHITESPACE_RE.sub(" ", text))


def escape_html(text: str) -> str:
    """Escape the five HTML-reserved characters ``& < > " '``."""

    return _HTML_RESERVED_RE.sub(lambda m: HTML_ESCAPES[m.group(0)], text)
