"""
Recency - how recently a word was last reviewed

Review history is a chronological list of timestamps (oldest first). Only
the most recent entry matters here.

Corrupt history never blocks a review: unreadable timestamps fall back to
a neutral score and are reported as warnings.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from vocab_review.logging_utils import get_logger
from vocab_review.scoring.constants import (
    RECENCY_DECAY_PER_HOUR,
    RECENCY_DEFAULT,
    RECENCY_MAX,
    RECENCY_MIN,
    RECENT_WINDOW_DAYS,
)

LOG = get_logger()

Timestamp = Union[str, datetime]


def parse_review_timestamp(value: Timestamp) -> Optional[datetime]:
    """
    Parse a stored review timestamp into an aware UTC datetime.

    Accepts ISO 8601 strings (a trailing "Z" is allowed) and datetime
    objects. Values without an offset are taken as UTC.

    Returns:
        Aware datetime, or None if the value cannot be read
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _resolve_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def calculate_recency_score(
    recent_reviews: Optional[Sequence[Timestamp]],
    now: Optional[datetime] = None
) -> float:
    """
    Calculate a recency score from the review history.

    Formula:
        score = 10 * exp(-0.01 * hours_since_last_review)

    Interpretation:
    - 24 hours ago: ~7.9 (high)
    - 72 hours ago: ~4.9 (medium)
    - 7 days ago: ~1.9 (low)

    Special cases:
    - No history: 5.0 (neutral)
    - Unreadable last timestamp: 5.0, logged as a warning
    - Last timestamp in the future (clock skew): 10.0, logged as a warning

    Args:
        recent_reviews: Review timestamps, most recent last
        now: Reference time (defaults to current UTC time)

    Returns:
        Recency score between 0.1 and 10.0
    """
    if not recent_reviews:
        return RECENCY_DEFAULT

    last_raw = recent_reviews[-1]
    last_review = parse_review_timestamp(last_raw)
    if last_review is None:
        LOG.warning("invalid_review_timestamp", extra={"timestamp": str(last_raw)})
        return RECENCY_DEFAULT

    now = _resolve_now(now)
    if last_review > now:
        LOG.warning(
            "future_review_timestamp",
            extra={"timestamp": str(last_raw), "current_time": now.isoformat()}
        )
        return RECENCY_MAX

    hours_elapsed = (now - last_review).total_seconds() / 3600.0
    score = RECENCY_MAX * math.exp(-RECENCY_DECAY_PER_HOUR * hours_elapsed)

    return max(RECENCY_MIN, min(RECENCY_MAX, score))


def was_reviewed_recently(
    recent_reviews: Optional[Sequence[Timestamp]],
    now: Optional[datetime] = None,
    window_days: float = RECENT_WINDOW_DAYS
) -> bool:
    """
    True if the last review lies within window_days of now.

    Future timestamps count as recent. Missing or unreadable history does not.
    """
    if not recent_reviews:
        return False

    last_review = parse_review_timestamp(recent_reviews[-1])
    if last_review is None:
        return False

    days_elapsed = (_resolve_now(now) - last_review).total_seconds() / 86400.0
    return days_elapsed <= window_days
