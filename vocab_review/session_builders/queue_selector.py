"""
Review Queue - Two-Partition Quota Selection

Builds the queue of words to present next from two partitions:
1. Recent: words whose last review falls within the last 7 days
2. Other: everything else (never reviewed, or not for a while)

Queue Logic:
- recency_weight sets the share of the queue drawn from the recent partition
- A partition that cannot fill its quota hands the remainder to the other
- Inside each partition, words are drawn by selection weight without replacement
- The combined queue is shuffled; position carries no priority

An alternate "blended" strategy skips the partitions and draws once over the
whole pool using the blended selection/recency score.
"""

from __future__ import annotations

import math
import random
from datetime import datetime, timezone
from typing import Any, Literal, Optional, Sequence

from vocab_review.errors import InvalidArgument
from vocab_review.logging_utils import get_logger
from vocab_review.scoring.blending import calculate_item_priority
from vocab_review.scoring.constants import DEFAULT_RECENCY_WEIGHT, RECENT_WINDOW_DAYS
from vocab_review.scoring.recency import was_reviewed_recently
from vocab_review.scoring.selection_weight import calculate_selection_weight
from vocab_review.scoring.validation import (
    require_count,
    require_pool,
    require_unit_interval,
    require_window_days,
)
from vocab_review.session_builders.pool_types import QueueQuotas, ReviewPoolState
from vocab_review.session_builders.pool_utils import (
    resolve_rng,
    shuffled,
    weighted_sample_without_replacement,
)

LOG = get_logger()

QueueStrategy = Literal["quota", "blended"]
STRATEGIES = ("quota", "blended")


def build_review_pool_state(
    pool: Sequence[Any],
    now: Optional[datetime] = None,
    recent_window_days: float = RECENT_WINDOW_DAYS
) -> ReviewPoolState:
    """
    Partition a pool into recent / other and compute selection weights.

    Args:
        pool: Reviewable items (id, familiarity_score, times_reviewed, recent_reviews)
        now: Reference time (defaults to current UTC time)
        recent_window_days: Size of the recency window in days

    Returns:
        ReviewPoolState for this call
    """
    pool = require_pool(pool)
    recent_window_days = require_window_days(recent_window_days)
    if now is None:
        now = datetime.now(timezone.utc)

    recent: list[Any] = []
    other: list[Any] = []
    weights: dict[int, float] = {}

    for item in pool:
        weights[item.id] = calculate_selection_weight(item.familiarity_score, item.times_reviewed)
        if was_reviewed_recently(item.recent_reviews, now, recent_window_days):
            recent.append(item)
        else:
            other.append(item)

    return ReviewPoolState(recent=recent, other=other, weights=weights)


def compute_quotas(
    count: int,
    recency_weight: float,
    recent_size: int,
    other_size: int
) -> QueueQuotas:
    """
    Split count between the recent and other partitions.

    The recent share is round(count * recency_weight), rounding halves up.
    A partition smaller than its quota is capped at its size and the other
    partition takes up the slack, bounded by its own size.

    Args:
        count: Requested queue size
        recency_weight: Share of the queue for recently reviewed words (0-1)
        recent_size: Number of items in the recent partition
        other_size: Number of items in the other partition

    Returns:
        QueueQuotas with recent + other <= count
    """
    count = require_count(count)
    recency_weight = require_unit_interval(recency_weight)

    recent_quota = int(math.floor(count * recency_weight + 0.5))
    other_quota = count - recent_quota

    if recent_size < recent_quota:
        recent_quota = recent_size
        other_quota = count - recent_quota

    if other_size < other_quota:
        other_quota = other_size
        recent_quota = min(count - other_quota, recent_size)

    return QueueQuotas(recent=recent_quota, other=other_quota)


def select_words_for_review(
    pool: Sequence[Any],
    count: int,
    recency_weight: float = DEFAULT_RECENCY_WEIGHT,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    strategy: QueueStrategy = "quota",
    recent_window_days: float = RECENT_WINDOW_DAYS
) -> list[Any]:
    """
    Select a review queue of at most count words.

    Args:
        pool: Reviewable items; ids are unique (guaranteed by the store)
        count: Requested queue size (>= 0)
        recency_weight: Share of recently reviewed words (0.0 to 1.0)
        rng: Random source (defaults to a fresh random.Random)
        now: Reference time (defaults to current UTC time)
        strategy: "quota" (two partitions) or "blended" (single weighted draw)
        recent_window_days: Size of the recency window in days

    Returns:
        min(count, len(pool)) items from the pool, no duplicates, shuffled.
        Items are returned by reference and never modified.

    Raises:
        InvalidArgument: For a negative count, a non-sequence pool, a
            recency_weight outside [0, 1], an unknown strategy or a
            non-positive recent_window_days
    """
    count = require_count(count)
    pool = require_pool(pool)
    recency_weight = require_unit_interval(recency_weight)
    if strategy not in STRATEGIES:
        raise InvalidArgument(f"Unknown strategy: {strategy!r}. Must be one of {STRATEGIES}")
    recent_window_days = require_window_days(recent_window_days)

    rng = resolve_rng(rng)

    if len(pool) == 0:
        return []

    # Asking for everything: no sampling needed
    if count >= len(pool):
        return shuffled(pool, rng)

    if now is None:
        now = datetime.now(timezone.utc)

    if strategy == "blended":
        return _select_blended(pool, count, recency_weight, rng, now)

    pool_state = build_review_pool_state(pool, now, recent_window_days)
    quotas = compute_quotas(count, recency_weight, len(pool_state.recent), len(pool_state.other))

    selected_recent = weighted_sample_without_replacement(
        pool_state.weighted("recent"), quotas.recent, rng
    )
    selected_other = weighted_sample_without_replacement(
        pool_state.weighted("other"), quotas.other, rng
    )
    queue = shuffled(selected_recent + selected_other, rng)

    LOG.debug("review_queue_built", extra={
        "strategy": strategy,
        "pool_size": len(pool),
        "recent_size": len(pool_state.recent),
        "other_size": len(pool_state.other),
        "recent_quota": quotas.recent,
        "other_quota": quotas.other,
        "selected": len(queue),
    })
    return queue


def _select_blended(
    pool: Sequence[Any],
    count: int,
    recency_weight: float,
    rng: random.Random,
    now: datetime
) -> list[Any]:
    """
    Single weighted draw over the whole pool using blended priorities.
    """
    weighted_items = [
        (item, calculate_item_priority(item, recency_weight, now))
        for item in pool
    ]
    queue = shuffled(weighted_sample_without_replacement(weighted_items, count, rng), rng)

    LOG.debug("review_queue_built", extra={
        "strategy": "blended",
        "pool_size": len(pool),
        "selected": len(queue),
    })
    return queue
