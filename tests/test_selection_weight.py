"""
Tests for selection weights (familiarity + review-count bonus).
"""

import math

import pytest

from vocab_review.errors import InvalidArgument
from vocab_review.scoring import WEIGHT_MAX, WEIGHT_MIN, calculate_selection_weight, review_bonus


FAMILIARITY_GRID = list(range(0, 101, 5))
REVIEW_GRID = [0, 1, 2, 3, 5, 8, 9, 10, 20, 50, 100, 1000]


class TestScenarios:
    def test_unknown_word_weight_is_high(self):
        assert calculate_selection_weight(0, 5) > 9.0

    def test_mastered_word_weight_is_low(self):
        weight = calculate_selection_weight(100, 100)
        assert WEIGHT_MIN <= weight < 1.0

    def test_new_word_hits_upper_clamp(self):
        # 10 * exp(0) * 2.0 = 20 -> clamped
        assert calculate_selection_weight(0, 0) == WEIGHT_MAX

    def test_matches_formula_inside_clamp(self):
        expected = 10.0 * math.exp(-0.05 * 40) * (1.0 + 1.0 - math.log10(4))
        assert calculate_selection_weight(40, 3) == pytest.approx(expected)

    def test_accepts_float_familiarity(self):
        assert calculate_selection_weight(33.3, 2) == pytest.approx(
            10.0 * math.exp(-0.05 * 33.3) * (2.0 - math.log10(3))
        )


class TestReviewBonus:
    def test_never_reviewed_doubles(self):
        assert review_bonus(0) == 2.0

    def test_bonus_fades_to_one(self):
        assert review_bonus(9) == pytest.approx(1.0)
        assert review_bonus(500) == 1.0

    def test_bonus_non_increasing(self):
        bonuses = [review_bonus(n) for n in range(0, 30)]
        assert all(a >= b for a, b in zip(bonuses, bonuses[1:]))


class TestProperties:
    @pytest.mark.parametrize("times_reviewed", REVIEW_GRID)
    def test_weight_non_increasing_in_familiarity(self, times_reviewed):
        for score in range(0, 100):
            assert calculate_selection_weight(score, times_reviewed) >= calculate_selection_weight(
                score + 1, times_reviewed
            )

    @pytest.mark.parametrize("score", FAMILIARITY_GRID)
    def test_weight_non_increasing_in_review_count(self, score):
        for t1 in REVIEW_GRID:
            for t2 in REVIEW_GRID:
                if t1 < t2:
                    assert calculate_selection_weight(score, t1) >= calculate_selection_weight(score, t2)

    @pytest.mark.parametrize("score", range(0, 81))
    def test_twenty_point_gap_dominates_review_count(self, score):
        for t1 in REVIEW_GRID:
            for t2 in REVIEW_GRID:
                assert calculate_selection_weight(score, t1) > calculate_selection_weight(score + 20, t2)

    @pytest.mark.parametrize("score", FAMILIARITY_GRID)
    @pytest.mark.parametrize("times_reviewed", REVIEW_GRID)
    def test_weight_within_bounds(self, score, times_reviewed):
        assert WEIGHT_MIN <= calculate_selection_weight(score, times_reviewed) <= WEIGHT_MAX


class TestValidation:
    @pytest.mark.parametrize("score", [-0.01, 100.01, -5, 150, float("nan")])
    def test_rejects_out_of_range_familiarity(self, score):
        with pytest.raises(InvalidArgument):
            calculate_selection_weight(score, 0)

    @pytest.mark.parametrize("times_reviewed", [-1, 2.5, True, "3"])
    def test_rejects_bad_review_count(self, times_reviewed):
        with pytest.raises(InvalidArgument):
            calculate_selection_weight(50, times_reviewed)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_selection_weight(101, 0)
