from __future__ import annotations

"""Random string generation.

Uses the ``random`` module (Mersenne Twister). The output is predictable and
must not be used for tokens, passwords or anything security sensitive.
"""

import random
import string
from typing import Optional

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


def random_string(
    length: int = 10,
    charset: str = ALPHANUMERIC,
    *,
    rng: Optional[random.Random] = None,
) -> str:
    """Return *length* characters drawn uniformly from *charset*.

    Pass a seeded ``random.Random`` as *rng* for reproducible output.
    """

    if length <= 0 or not charset:
        return ""
    source = rng if rng is not None else random
    return "".join(source.choice(charset) for _ in range(length))
