"""
Metric computations over a review pool.
"""

from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from vocab_review.analytics.types import ReviewStats
from vocab_review.scoring.validation import require_pool


FAMILIARITY_BANDS = [0, 20, 40, 60, 80, 100]
FAMILIARITY_BAND_LABELS = ["0-20", "20-40", "40-60", "60-80", "80-100"]

ITEM_COLUMNS = ["id", "familiarity_score", "times_reviewed", "times_correct"]


def build_items_frame(pool: Sequence[Any]) -> pd.DataFrame:
    """
    One row per item. times_correct is 0 for items that do not track it.
    """
    pool = require_pool(pool)
    rows = [
        {
            "id": item.id,
            "familiarity_score": float(item.familiarity_score),
            "times_reviewed": int(item.times_reviewed),
            "times_correct": int(getattr(item, "times_correct", 0)),
        }
        for item in pool
    ]
    return pd.DataFrame(rows, columns=ITEM_COLUMNS)


def compute_review_stats(pool: Sequence[Any]) -> ReviewStats:
    """
    Total words, words reviewed at least once, and mean familiarity (0 if empty).
    """
    items_df = build_items_frame(pool)
    if items_df.empty:
        return ReviewStats(total_words=0, reviewed_words=0, average_familiarity=0.0)

    return ReviewStats(
        total_words=int(len(items_df)),
        reviewed_words=int((items_df["times_reviewed"] > 0).sum()),
        average_familiarity=float(items_df["familiarity_score"].mean()),
    )


def familiarity_distribution(pool: Sequence[Any]) -> pd.Series:
    """
    Count of items per 20-point familiarity band.

    Bands are closed on the left except the last, which includes 100.
    """
    items_df = build_items_frame(pool)
    if items_df.empty:
        return pd.Series(0, index=FAMILIARITY_BAND_LABELS, dtype="int64")

    bands = pd.cut(
        items_df["familiarity_score"],
        bins=FAMILIARITY_BANDS,
        labels=FAMILIARITY_BAND_LABELS,
        right=False,
    )
    # right=False leaves exactly 100 outside the last band
    bands = bands.fillna(FAMILIARITY_BAND_LABELS[-1])
    return bands.value_counts().reindex(FAMILIARITY_BAND_LABELS, fill_value=0).astype("int64")
