"""
Review recording - caller-side bookkeeping after a graded review.

The engine computes the new familiarity score; the store increments
counters, appends the review timestamp and persists the item. apply_review
does that bookkeeping without touching the input and hands back a new item
plus the values the store needs for its event log.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from vocab_review.logging_utils import get_logger
from vocab_review.schemas import ReviewableItem
from vocab_review.scoring.constants import MAX_RECENT_REVIEWS
from vocab_review.scoring.familiarity import is_correct, update_familiarity_score
from vocab_review.scoring.validation import require_rating

LOG = get_logger()


@dataclass(frozen=True)
class ReviewOutcome:
    """
    Result of recording one review.
    """
    item: ReviewableItem
    rating: int
    familiarity_before: float
    familiarity_after: float
    reviewed_at: str  # ISO 8601, UTC


def format_review_timestamp(timestamp: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a trailing Z."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    utc = timestamp.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def append_review_timestamp(
    recent_reviews: Sequence[Union[str, datetime]],
    timestamp: Union[str, datetime],
    limit: int = MAX_RECENT_REVIEWS
) -> list[Union[str, datetime]]:
    """
    Append a timestamp to the history, dropping the oldest entries past limit.
    """
    history = list(recent_reviews) + [timestamp]
    return history[-limit:] if limit > 0 else []


def apply_review(
    item: ReviewableItem,
    rating: int,
    reviewed_at: Optional[datetime] = None
) -> ReviewOutcome:
    """
    Record a review of item with the given rating.

    Steps:
    1. Compute the new familiarity score
    2. Increment times_reviewed (and times_correct for ratings 4-5)
    3. Append the review timestamp to recent_reviews (max 10, oldest dropped)

    Args:
        item: Item as loaded from the store (not modified)
        rating: User rating (1-5)
        reviewed_at: Review time (defaults to now, UTC)

    Returns:
        ReviewOutcome with the updated item

    Raises:
        InvalidArgument: If rating or the item's state is out of range
    """
    rating = require_rating(rating)
    if reviewed_at is None:
        reviewed_at = datetime.now(timezone.utc)

    familiarity_before = item.familiarity_score
    familiarity_after = update_familiarity_score(familiarity_before, rating, item.times_reviewed)
    timestamp = format_review_timestamp(reviewed_at)

    updated = item.model_copy(update={
        "familiarity_score": familiarity_after,
        "times_reviewed": item.times_reviewed + 1,
        "times_correct": item.times_correct + (1 if is_correct(rating) else 0),
        "recent_reviews": tuple(append_review_timestamp(item.recent_reviews, timestamp)),
    })

    LOG.info("word_reviewed", extra={
        "word_id": item.id,
        "word_text": item.word,
        "rating": rating,
        "familiarity_before": familiarity_before,
        "familiarity_after": familiarity_after,
        "review_timestamp": timestamp,
    })

    return ReviewOutcome(
        item=updated,
        rating=rating,
        familiarity_before=familiarity_before,
        familiarity_after=familiarity_after,
        reviewed_at=timestamp,
    )
