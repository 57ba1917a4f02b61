"""
Argument checks shared by the scoring and selection functions.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from numbers import Integral, Real

from vocab_review.errors import InvalidArgument
from vocab_review.scoring.constants import FAMILIARITY_MAX, FAMILIARITY_MIN, VALID_RATINGS


def _is_real(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)


def _is_integral(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def require_familiarity(value, name: str = "familiarity_score") -> float:
    if not _is_real(value) or not FAMILIARITY_MIN <= value <= FAMILIARITY_MAX:
        raise InvalidArgument(
            f"Invalid {name}: {value!r}. Must be in range [{FAMILIARITY_MIN:g}, {FAMILIARITY_MAX:g}]"
        )
    return float(value)


def require_review_count(value, name: str = "times_reviewed") -> int:
    if not _is_integral(value) or value < 0:
        raise InvalidArgument(f"Invalid {name}: {value!r}. Must be a non-negative integer")
    return int(value)


def require_rating(value) -> int:
    if not _is_integral(value) or int(value) not in VALID_RATINGS:
        raise InvalidArgument(f"Invalid rating: {value!r}. Must be 1, 2, 3, 4, or 5")
    return int(value)


def require_unit_interval(value, name: str = "recency_weight") -> float:
    if not _is_real(value) or not 0.0 <= value <= 1.0:
        raise InvalidArgument(f"Invalid {name}: {value!r}. Must be in range [0, 1]")
    return float(value)


def require_count(value) -> int:
    if not _is_integral(value) or value < 0:
        raise InvalidArgument(f"Invalid count: {value!r}. Must be non-negative")
    return int(value)


def require_pool(pool) -> Sequence:
    """A pool is any ordered sequence of items; strings and mappings are rejected."""
    if not isinstance(pool, Sequence) or isinstance(pool, (str, bytes, bytearray, Mapping)):
        raise InvalidArgument(f"pool must be a sequence of items, got {type(pool).__name__}")
    return pool


def require_window_days(value) -> float:
    if not _is_real(value) or value <= 0:
        raise InvalidArgument(f"Invalid recent_window_days: {value!r}. Must be positive")
    return float(value)


def require_review_history(value) -> list:
    """Review history must be a sequence of timestamps, not a single string."""
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray, Mapping)):
        raise InvalidArgument(
            f"recentReviews must be a list of timestamps, got {type(value).__name__}"
        )
    return list(value)
