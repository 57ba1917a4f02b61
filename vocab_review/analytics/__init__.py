"""
Analytics package exports.
"""

from vocab_review.analytics.metrics import (
    build_items_frame,
    compute_review_stats,
    familiarity_distribution,
)
from vocab_review.analytics.types import ReviewStats

__all__ = [
    "build_items_frame",
    "compute_review_stats",
    "familiarity_distribution",
    "ReviewStats",
]
