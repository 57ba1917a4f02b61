"""
Tests for score blending.
"""

import pytest

from vocab_review.errors import InvalidArgument
from vocab_review.scoring import (
    calculate_blended_score,
    calculate_item_priority,
    calculate_recency_score,
    calculate_selection_weight,
)


class TestBlendedScore:
    @pytest.mark.parametrize("recency_weight, expected", [
        (0.0, 8.0 * 0.8 + 2.0 * 0.2),
        (0.5, 8.0 * 0.5 + 2.0 * 0.5),
        (1.0, 8.0 * 0.2 + 2.0 * 0.8),
    ])
    def test_buffered_weights(self, recency_weight, expected):
        assert calculate_blended_score(8.0, 2.0, recency_weight) == pytest.approx(expected)

    def test_both_signals_always_present(self):
        # Extreme slider positions still move with the other signal
        assert calculate_blended_score(10.0, 0.1, 1.0) > calculate_blended_score(0.1, 0.1, 1.0)
        assert calculate_blended_score(0.1, 10.0, 0.0) > calculate_blended_score(0.1, 0.1, 0.0)

    def test_equal_inputs_pass_through(self):
        for w in (0.0, 0.3, 0.7, 1.0):
            assert calculate_blended_score(4.2, 4.2, w) == pytest.approx(4.2)

    def test_higher_preference_favours_recency(self):
        low = calculate_blended_score(2.0, 9.0, 0.1)
        high = calculate_blended_score(2.0, 9.0, 0.9)
        assert high > low

    @pytest.mark.parametrize("recency_weight", [-0.1, 1.01, float("nan"), "0.5"])
    def test_rejects_bad_weight(self, recency_weight):
        with pytest.raises(InvalidArgument):
            calculate_blended_score(5.0, 5.0, recency_weight)


class TestItemPriority:
    def test_combines_item_signals(self, make_item, now):
        item = make_item(1, familiarity=30.0, reviewed=4, hours_ago=48)
        expected = calculate_blended_score(
            calculate_selection_weight(30.0, 4),
            calculate_recency_score(item.recent_reviews, now),
            0.25,
        )
        assert calculate_item_priority(item, 0.25, now) == pytest.approx(expected)

    def test_no_history_uses_neutral_recency(self, make_item, now):
        item = make_item(2, familiarity=100.0, reviewed=100)
        # SR weight clamps to 0.1, recency defaults to 5.0
        assert calculate_item_priority(item, 0.5, now) == pytest.approx(0.1 * 0.5 + 5.0 * 0.5)
