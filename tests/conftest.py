"""
Shared fixtures for review engine tests.

Everything here is in-memory; no environment or network setup is needed.
"""

import os
import random
from datetime import datetime, timedelta, timezone

import pytest

os.environ.setdefault("LOG_FORMAT", "text")

from vocab_review.schemas import ReviewableItem


NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference time for recency calculations."""
    return NOW


@pytest.fixture
def rng():
    """Seeded random source so selections are reproducible."""
    return random.Random(1234)


@pytest.fixture
def make_item(now):
    """
    Factory for ReviewableItem.

    hours_ago adds a single review timestamp that many hours before now;
    recent_reviews overrides it with an explicit history.
    """
    def _make(item_id, familiarity=0.0, reviewed=0, hours_ago=None, recent_reviews=None, **kwargs):
        if recent_reviews is None:
            recent_reviews = ()
            if hours_ago is not None:
                recent_reviews = ((now - timedelta(hours=hours_ago)).isoformat(),)
        return ReviewableItem(
            id=item_id,
            familiarity_score=familiarity,
            times_reviewed=reviewed,
            recent_reviews=tuple(recent_reviews),
            **kwargs,
        )
    return _make


@pytest.fixture
def mixed_pool(make_item):
    """
    20 words: ids 1-8 reviewed within the week, ids 9-20 not.
    """
    recent = [make_item(i, familiarity=10.0 * i, reviewed=i, hours_ago=12 * i) for i in range(1, 9)]
    stale = [make_item(i, familiarity=5.0 * (i - 8), reviewed=(i - 9) % 3, hours_ago=24 * 30) for i in range(9, 15)]
    never = [make_item(i) for i in range(15, 21)]
    return recent + stale + never
