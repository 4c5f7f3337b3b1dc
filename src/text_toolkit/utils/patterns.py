from __future__ import annotations

"""Shared regex fragments.

Whitespace here is the ECMAScript set used by ``\\s`` and ``trim``: it
includes U+FEFF and excludes U+001C..U+001F and U+0085, which Python's own
``\\s`` and ``str.strip`` treat differently.
"""

import re

_EXTRA_SPACE_CODES = (
    0x00A0,
    0x1680,
    *range(0x2000, 0x200B),
    0x2028,
    0x2029,
    0x202F,
    0x205F,
    0x3000,
    0xFEFF,
)

WHITESPACE_CHARS = "\t\n\v\f\r " + "".join(chr(code) for code in _EXTRA_SPACE_CODES)

# Body of a regex character class, e.g. f"[{WHITESPACE_CLASS}]+".
WHITESPACE_CLASS = re.escape(WHITESPACE_CHARS)


def strip_whitespace(text: str) -> str:
    return text.strip(WHITESPACE_CHARS)
