from __future__ import annotations

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Per-run generator; the same seed replays the same selections."""
    return random.Random(seed)


def random_int(rng: random.Random, low: int, high: int) -> int:
    """Uniform integer in [low, high], tolerant of a reversed range."""
    if high < low:
        low, high = high, low
    return rng.randint(low, high)


def sample(rng: random.Random, items: Sequence[T], k: int) -> List[T]:
    k = max(0, min(k, len(items)))
    return rng.sample(list(items), k)
