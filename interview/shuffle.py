"""Seedable Fisher-Yates shuffle."""
from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Return a shuffled copy of ``items`` drawn with ``rng``; the input is left untouched."""

    rng = rng or random.Random()
    result = list(items)
    index = len(result)
    while index > 1:
        pick = rng.randrange(index)
        index -= 1
        result[index], result[pick] = result[pick], result[index]
    return result


__all__ = ["shuffle"]
