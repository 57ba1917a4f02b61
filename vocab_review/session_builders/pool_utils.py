"""
Pool utilities for review queue builders.

Sampling primitives shared by the queue strategies. All randomness comes
from the rng argument so callers can seed it.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar


T = TypeVar("T")


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    """
    Use the caller's random source, or a fresh one local to this call.
    """
    return rng if rng is not None else random.Random()


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    """
    Fisher-Yates shuffle of a copy; the input sequence is left untouched.
    """
    result = list(items)
    rng.shuffle(result)
    return result


def weighted_sample_without_replacement(
    weighted_items: Sequence[tuple[T, float]],
    count: int,
    rng: random.Random
) -> list[T]:
    """
    Draw up to count items, each with probability proportional to its weight
    among the candidates still remaining.

    Args:
        weighted_items: (item, weight) pairs, weights > 0
        count: Number of items to draw
        rng: Random source

    Returns:
        Drawn items in draw order
    """
    remaining = list(weighted_items)
    selected: list[T] = []

    while len(selected) < count and remaining:
        total_weight = sum(weight for _, weight in remaining)
        threshold = rng.random() * total_weight

        # Fall back to the last candidate if float error leaves threshold > 0
        pick = len(remaining) - 1
        for index, (_, weight) in enumerate(remaining):
            threshold -= weight
            if threshold <= 0:
                pick = index
                break

        item, _ = remaining.pop(pick)
        selected.append(item)

    return selected
