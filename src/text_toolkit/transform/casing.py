from __future__ import annotations

"""Case conversion helpers.

Word characters and boundaries are ASCII-only (``[A-Za-z0-9_]``) while
whitespace is the ECMAScript set from ``utils.patterns``.
"""

import re

from ..utils.patterns import WHITESPACE_CLASS

_CAMEL_START_RE = re.compile(r"(?:^\w|[A-Z]|\b\w)", re.ASCII)
_WHITESPACE_RE = re.compile(f"[{WHITESPACE_CLASS}]+")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_NON_ALPHA_RE = re.compile(r"[^a-zA-Z]")
_LOWER_UPPER_RE = re.compile(r"([a-z])([A-Z])")
_KEBAB_GAP_RE = re.compile(f"[{WHITESPACE_CLASS}_]+")
_SNAKE_GAP_RE = re.compile(f"[{WHITESPACE_CLASS}-]+")
_TITLE_WORD_RE = re.compile(f"[A-Za-z0-9_][^{WHITESPACE_CLASS}]*")


def to_camel_case(text: str, *, preserve_numbers: bool = True) -> str:
    """Convert *text* to camelCase.

    Every word-initial character and every upper-case letter is upper-cased,
    except the very first character, which is lower-cased. Anything that is
    not a letter (or digit, with *preserve_numbers*) is then dropped.
    """

    def _case(match: re.Match[str]) -> str:
        word = match.group(0)
        return word.lower() if match.start() == 0 else word.upper()

    result = _CAMEL_START_RE.sub(_case, text)
    result = _WHITESPACE_RE.sub("", result)
    pattern = _NON_ALNUM_RE if preserve_numbers else _NON_ALPHA_RE
    return pattern.sub("", result)


def to_kebab_case(text: str, *, separator: str = "-") -> str:
    result = _LOWER_UPPER_RE.sub(lambda m: m.group(1) + separator + m.group(2), text)
    result = _KEBAB_GAP_RE.sub(lambda _: separator, result)
    return result.lower()


def to_snake_case(text: str) -> str:
    result = _LOWER_UPPER_RE.sub(r"\1_\2", text)
    result = _SNAKE_GAP_RE.sub("_", result)
    return result.lower()


def to_title_case(text: str) -> str:
    """Capitalise the first letter of each word and lower-case the rest."""

    return _TITLE_WORD_RE.sub(
        lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text
    )
