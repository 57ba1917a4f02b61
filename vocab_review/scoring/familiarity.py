"""
Familiarity Updates

Maps a graded review onto a new familiarity score (0-100).

Key principles:
- Each rating has a fixed base change; only "forgot" lowers the score
- Gains shrink as the word becomes familiar (harder to improve further)
- Forgetting a familiar word costs more than forgetting an unfamiliar one
"""

from __future__ import annotations

from vocab_review.scoring.constants import (
    CORRECT_RATING_THRESHOLD,
    FAMILIARITY_MAX,
    FAMILIARITY_MIN,
    GAIN_DAMPING,
    PENALTY_GROWTH,
    RATING_DELTA,
    Rating,
)
from vocab_review.scoring.validation import (
    require_familiarity,
    require_rating,
    require_review_count,
)


def update_familiarity_score(current_score: float, rating: int, times_reviewed: int) -> float:
    """
    Update familiarity after a review.

    Formula:
        new = clamp(score + delta(rating) * rate, 0, 100)

    Where:
        - delta = {1: -20, 2: +5, 3: +15, 4: +25, 5: +35}
        - rate = 1 - score / 150 for gains (1.0 at 0, ~0.33 at 100)
        - rate = 1 + score / 200 for losses (1.0 at 0, 1.5 at 100)

    times_reviewed is validated but does not change the result.

    Args:
        current_score: Familiarity before the review (0-100)
        rating: User rating (1-5)
        times_reviewed: Reviews completed before this one (>= 0)

    Returns:
        New familiarity score between 0 and 100

    Raises:
        InvalidArgument: If any input is outside its domain
    """
    current_score = require_familiarity(current_score, name="current_score")
    rating = require_rating(rating)
    require_review_count(times_reviewed)

    base_change = RATING_DELTA[Rating(rating)]
    change = base_change * learning_rate(current_score, base_change)

    return max(FAMILIARITY_MIN, min(FAMILIARITY_MAX, current_score + change))


def learning_rate(current_score: float, base_change: float) -> float:
    """Asymmetric multiplier on the base change."""
    if base_change > 0:
        return 1.0 - current_score / GAIN_DAMPING
    return 1.0 + current_score / PENALTY_GROWTH


def is_correct(rating: int) -> bool:
    """Whether a rating counts towards times_correct."""
    return require_rating(rating) >= CORRECT_RATING_THRESHOLD
