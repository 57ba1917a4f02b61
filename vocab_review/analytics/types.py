"""
Types for review statistics.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReviewStats:
    """
    Summary of a review pool.
    """
    total_words: int
    reviewed_words: int
    average_familiarity: float
