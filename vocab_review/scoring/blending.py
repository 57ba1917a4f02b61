"""
Score Blending

Blends the spaced repetition weight and the recency score according to
the user's recency preference. A buffer keeps both signals between 20%
and 80% of the result, whatever the slider says.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from vocab_review.scoring.constants import MAX_BLEND_CONTRIBUTION, MIN_BLEND_CONTRIBUTION
from vocab_review.scoring.recency import calculate_recency_score
from vocab_review.scoring.selection_weight import calculate_selection_weight
from vocab_review.scoring.validation import require_unit_interval


def calculate_blended_score(sr_score: float, recency_score: float, recency_weight: float) -> float:
    """
    Blend a spaced repetition score with a recency score.

    Mapping of recency_weight to actual contributions:
    - 0.0 -> recency 20%, SR 80%
    - 0.5 -> recency 50%, SR 50%
    - 1.0 -> recency 80%, SR 20%

    Args:
        sr_score: Selection weight (from calculate_selection_weight)
        recency_score: Recency score (from calculate_recency_score)
        recency_weight: User preference (0.0 to 1.0)

    Returns:
        Blended score

    Raises:
        InvalidArgument: If recency_weight is outside [0, 1]
    """
    recency_weight = require_unit_interval(recency_weight)

    actual_recency_weight = MIN_BLEND_CONTRIBUTION + recency_weight * (
        MAX_BLEND_CONTRIBUTION - MIN_BLEND_CONTRIBUTION
    )
    actual_sr_weight = 1.0 - actual_recency_weight

    return sr_score * actual_sr_weight + recency_score * actual_recency_weight


def calculate_item_priority(item, recency_weight: float, now: Optional[datetime] = None) -> float:
    """Blended priority of a single item (selection weight + recency)."""
    sr_score = calculate_selection_weight(item.familiarity_score, item.times_reviewed)
    recency_score = calculate_recency_score(item.recent_reviews, now)
    return calculate_blended_score(sr_score, recency_score, recency_weight)
