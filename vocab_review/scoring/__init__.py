"""
Scoring - selection weights, recency, familiarity updates and blending

Pure functions only. Every function validates its arguments and raises
InvalidArgument before computing anything.

Quick start:
    from vocab_review import scoring

    weight = scoring.calculate_selection_weight(item.familiarity_score, item.times_reviewed)
    new_score = scoring.update_familiarity_score(50.0, scoring.Rating.KNOWN, 3)
"""

# Selection weight
from vocab_review.scoring.selection_weight import calculate_selection_weight, review_bonus

# Recency
from vocab_review.scoring.recency import (
    calculate_recency_score,
    parse_review_timestamp,
    was_reviewed_recently,
)

# Familiarity updates
from vocab_review.scoring.familiarity import is_correct, learning_rate, update_familiarity_score

# Blending
from vocab_review.scoring.blending import calculate_blended_score, calculate_item_priority

# Constants and parameters
from vocab_review.scoring.constants import (
    Rating,
    RATING_DELTA,
    WEIGHT_MIN,
    WEIGHT_MAX,
    RECENCY_DEFAULT,
    RECENT_WINDOW_DAYS,
    MAX_RECENT_REVIEWS,
)


__all__ = [
    # Selection weight
    "calculate_selection_weight",
    "review_bonus",

    # Recency
    "calculate_recency_score",
    "parse_review_timestamp",
    "was_reviewed_recently",

    # Familiarity updates
    "update_familiarity_score",
    "learning_rate",
    "is_correct",

    # Blending
    "calculate_blended_score",
    "calculate_item_priority",

    # Enums
    "Rating",

    # Parameters
    "RATING_DELTA",
    "WEIGHT_MIN",
    "WEIGHT_MAX",
    "RECENCY_DEFAULT",
    "RECENT_WINDOW_DAYS",
    "MAX_RECENT_REVIEWS",
]
