from __future__ import annotations

"""Seed helpers for reproducible random strings."""

import random
from typing import Optional


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return an isolated PRNG, seeded when *seed* is given."""

    return random.Random(seed)
