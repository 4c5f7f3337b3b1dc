from __future__ import annotations

"""Word extraction and frequency helpers."""

import re
from typing import Dict, List

_WORD_RE = re.compile(r"\b\w+\b", re.ASCII)


def extract_words(text: str) -> List[str]:
    """Return ASCII word runs in order of appearance, case preserved."""

    return _WORD_RE.findall(text)


def word_count(text: str) -> Dict[str, int]:
    """Case-insensitive word frequencies, keyed in first-seen order."""

    counts: Dict[str, int] = {}
    for word in extract_words(text.lower()):
        counts[word] = counts.get(word, 0) + 1
    return counts
