"""
Scoring Constants and Parameters

All tunable parameters for selection weights, recency decay, familiarity
updates and score blending in one place.
"""

from __future__ import annotations

from enum import IntEnum


# ---- Review Ratings ----

class Rating(IntEnum):
    """User self-assessment after seeing a word."""
    FORGOT = 1     # Did not recognise the word
    VAGUE = 2      # Some faint memory of it
    FAMILIAR = 3   # Recognised with effort
    KNOWN = 4      # Recognised quickly
    MASTERED = 5   # Fully known, no hesitation


VALID_RATINGS = frozenset(int(r) for r in Rating)

# Ratings counted as a correct answer (times_correct)
CORRECT_RATING_THRESHOLD = Rating.KNOWN


# ---- Familiarity Score ----

FAMILIARITY_MIN = 0.0
FAMILIARITY_MAX = 100.0


# ---- Selection Weight ----

WEIGHT_MIN = 0.1
WEIGHT_MAX = 10.0
FAMILIARITY_DECAY = 0.05      # k in weight = max * exp(-k * familiarity)
NEW_WORD_BONUS = 2.0          # Flat multiplier for never-reviewed words


# ---- Recency Score ----

RECENCY_MIN = 0.1
RECENCY_MAX = 10.0
RECENCY_DEFAULT = 5.0         # Neutral score for missing or unreadable history
RECENCY_DECAY_PER_HOUR = 0.01
# 24h -> ~7.9, 72h -> ~4.9, 168h -> ~1.9


# ---- Familiarity Updates ----

RATING_DELTA = {
    Rating.FORGOT: -20.0,
    Rating.VAGUE: 5.0,
    Rating.FAMILIAR: 15.0,
    Rating.KNOWN: 25.0,
    Rating.MASTERED: 35.0,
}

GAIN_DAMPING = 150.0          # rate = 1 - score / GAIN_DAMPING for positive deltas
PENALTY_GROWTH = 200.0        # rate = 1 + score / PENALTY_GROWTH otherwise


# ---- Score Blending ----

MIN_BLEND_CONTRIBUTION = 0.2  # Neither signal drops below 20%
MAX_BLEND_CONTRIBUTION = 0.8


# ---- Review Queue ----

DEFAULT_RECENCY_WEIGHT = 0.5
DEFAULT_QUEUE_SIZE = 20
RECENT_WINDOW_DAYS = 7.0      # Reviewed within this window -> "recent" partition
MAX_RECENT_REVIEWS = 10       # History cap, oldest dropped first
