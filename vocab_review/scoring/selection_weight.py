"""
Selection Weight - priority of a word for weighted random review selection

Higher weight means a word is more likely to be drawn into the next queue.

Key principles:
- Weight decays exponentially with familiarity
- Rarely reviewed words get a bonus that fades as reviews accumulate
- A familiarity gap of 20 points outweighs any review-count difference
"""

from __future__ import annotations

import math

from vocab_review.scoring.constants import (
    FAMILIARITY_DECAY,
    NEW_WORD_BONUS,
    WEIGHT_MAX,
    WEIGHT_MIN,
)
from vocab_review.scoring.validation import require_familiarity, require_review_count


def calculate_selection_weight(familiarity_score: float, times_reviewed: int) -> float:
    """
    Calculate the selection weight of a word.

    Formula:
        weight = W_max * exp(-k * familiarity) * bonus(times_reviewed)

    Where:
        - W_max = 10.0, k = 0.05
        - bonus(0) = 2.0 (never reviewed)
        - bonus(n) = 1 + max(0, 1 - log10(n + 1)) otherwise

    The result is clamped to [0.1, 10.0].

    Args:
        familiarity_score: Current familiarity (0-100)
        times_reviewed: Number of completed reviews (>= 0)

    Returns:
        Selection weight between 0.1 and 10.0

    Raises:
        InvalidArgument: If either input is outside its domain
    """
    familiarity_score = require_familiarity(familiarity_score)
    times_reviewed = require_review_count(times_reviewed)

    familiarity_weight = WEIGHT_MAX * math.exp(-FAMILIARITY_DECAY * familiarity_score)
    final_weight = familiarity_weight * review_bonus(times_reviewed)

    return max(WEIGHT_MIN, min(WEIGHT_MAX, final_weight))


def review_bonus(times_reviewed: int) -> float:
    """
    Multiplier favouring rarely reviewed words.

    Non-increasing in times_reviewed and reaches 1.0 from 9 reviews on:
    0 -> 2.0, 1 -> 1.70, 4 -> 1.30, 9 -> 1.0
    """
    if times_reviewed == 0:
        return NEW_WORD_BONUS
    return 1.0 + max(0.0, 1.0 - math.log10(times_reviewed + 1))
