"""
Typed pool models shared across review queue builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


PoolStatus = Literal["recent", "other"]


@dataclass(frozen=True)
class QueueQuotas:
    """
    How many items each partition contributes to a queue.
    """
    recent: int
    other: int

    @property
    def total(self) -> int:
        return self.recent + self.other


@dataclass
class ReviewPoolState:
    """
    Call-scoped partition of a review pool.

    recent holds items whose last review falls inside the recency window,
    other holds the rest. weights maps item id to selection weight.
    """
    recent: list[Any]
    other: list[Any]
    weights: dict[int, float]

    def status_of(self, item_id: int) -> PoolStatus:
        """
        Partition an item id belongs to.
        """
        if any(item.id == item_id for item in self.recent):
            return "recent"
        if any(item.id == item_id for item in self.other):
            return "other"
        raise KeyError(item_id)

    def weighted(self, status: PoolStatus) -> list[tuple[Any, float]]:
        """
        (item, weight) pairs for one partition, in pool order.
        """
        items = self.recent if status == "recent" else self.other
        return [(item, self.weights[item.id]) for item in items]
