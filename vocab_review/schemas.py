"""
Pydantic models for reviewable vocabulary items and review settings.

The store persists items with camelCase keys (familiarityScore,
timesReviewed, ...). Both spellings are accepted when validating.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from vocab_review.scoring.constants import (
    DEFAULT_QUEUE_SIZE,
    DEFAULT_RECENCY_WEIGHT,
    FAMILIARITY_MAX,
    FAMILIARITY_MIN,
    MAX_RECENT_REVIEWS,
    RECENT_WINDOW_DAYS,
)


# ---- Reviewable Item ----

class ReviewableItem(BaseModel):
    """
    A word as seen by the review engine.

    Immutable: updates produce a new item (see review_log.apply_review).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="Stable identifier assigned by the store")
    word: Optional[str] = Field(default=None, description="Display text, carried through untouched")

    # Learning state
    familiarity_score: float = Field(
        default=0.0,
        ge=FAMILIARITY_MIN,
        le=FAMILIARITY_MAX,
        alias="familiarityScore",
        description="0 = unknown, 100 = mastered"
    )
    times_reviewed: int = Field(default=0, ge=0, alias="timesReviewed")
    times_correct: int = Field(default=0, ge=0, alias="timesCorrect")  # reviews rated 4 or 5

    # ISO 8601 timestamps, oldest first, most recent last
    recent_reviews: tuple[Union[str, datetime], ...] = Field(
        default=(),
        max_length=MAX_RECENT_REVIEWS,
        alias="recentReviews"
    )


# ---- Review Settings ----

class ReviewConfig(BaseModel):
    """Review settings sourced from persisted app configuration."""
    model_config = ConfigDict(populate_by_name=True)

    review_recency_weight: float = Field(
        default=DEFAULT_RECENCY_WEIGHT,
        ge=0.0,
        le=1.0,
        alias="reviewRecencyWeight",
        description="Share of the queue drawn from recently reviewed words"
    )
    review_queue_size: int = Field(default=DEFAULT_QUEUE_SIZE, ge=0, alias="reviewQueueSize")
    recent_window_days: float = Field(default=RECENT_WINDOW_DAYS, gt=0, alias="recentWindowDays")
