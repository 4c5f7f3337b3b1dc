from __future__ import annotations

"""Lightweight format checks for e-mail addresses and URLs."""

import logging
import re

from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..utils.patterns import WHITESPACE_CLASS

logger = logging.getLogger(__name__)

_EMAIL_PART = f"[^{WHITESPACE_CLASS}@]+"
_EMAIL_RE = re.compile(f"{_EMAIL_PART}@{_EMAIL_PART}\\.{_EMAIL_PART}")
_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_email(text: str) -> bool:
    """Return True for ``local@domain.tld`` shaped strings (not RFC 5322)."""

    return _EMAIL_RE.fullmatch(text) is not None


def is_url(text: str) -> bool:
    """Return True when *text* parses as an absolute URL."""

    try:
        _URL_ADAPTER.validate_python(text)
    except (ValidationError, TypeError, ValueError) as exc:
        logger.debug("Rejected URL %r: %s", text, exc)
        return False
    return True
