"""
Tests for record schemas and migrate-on-read helpers.
"""

import pydantic
import pytest

from vocab_review.errors import InvalidArgument
from vocab_review.migration import migrate_config, migrate_item
from vocab_review.schemas import ReviewableItem, ReviewConfig


class TestReviewableItem:
    def test_accepts_store_keys(self):
        item = ReviewableItem.model_validate({
            "id": 1,
            "word": "fiets",
            "familiarityScore": 42.0,
            "timesReviewed": 3,
            "timesCorrect": 2,
            "recentReviews": ["2024-05-30T10:00:00.000Z"],
        })
        assert item.familiarity_score == 42.0
        assert item.times_reviewed == 3
        assert item.recent_reviews == ("2024-05-30T10:00:00.000Z",)

    def test_is_frozen(self):
        item = ReviewableItem(id=1, familiarity_score=10.0)
        with pytest.raises(pydantic.ValidationError):
            item.familiarity_score = 20.0

    @pytest.mark.parametrize("field, value", [
        ("familiarity_score", 101.0),
        ("familiarity_score", -1.0),
        ("times_reviewed", -1),
    ])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(pydantic.ValidationError):
            ReviewableItem(id=1, **{field: value})

    def test_keeps_malformed_timestamps_as_text(self):
        item = ReviewableItem(id=1, recent_reviews=["garbage"])
        assert item.recent_reviews == ("garbage",)


class TestMigrateItem:
    def test_fills_missing_fields(self):
        item = migrate_item({"id": 5, "word": "huis", "familiarityScore": 12.5})
        assert item.recent_reviews == ()
        assert item.times_reviewed == 0
        assert item.times_correct == 0
        assert item.familiarity_score == 12.5

    def test_null_history_becomes_empty(self):
        assert migrate_item({"id": 5, "familiarityScore": 0, "recentReviews": None}).recent_reviews == ()

    def test_preserves_existing_fields(self):
        raw = {
            "id": 9,
            "familiarityScore": 70,
            "timesReviewed": 4,
            "timesCorrect": 3,
            "recentReviews": ["2024-05-01T00:00:00Z"],
            "definitions": [{"text": "house"}],
        }
        item = migrate_item(raw)
        assert item.times_reviewed == 4
        assert item.times_correct == 3
        assert item.recent_reviews == ("2024-05-01T00:00:00Z",)

    def test_accepts_snake_case_records(self):
        item = migrate_item({"id": 2, "familiarity_score": 33, "times_reviewed": 1, "recent_reviews": ["x"]})
        assert item.familiarity_score == 33
        assert item.times_reviewed == 1
        assert item.recent_reviews == ("x",)

    def test_trims_overlong_history(self):
        history = [f"2024-05-{day:02d}T00:00:00Z" for day in range(1, 16)]
        item = migrate_item({"id": 1, "familiarityScore": 0, "recentReviews": history})
        assert list(item.recent_reviews) == history[-10:]

    def test_does_not_modify_raw_record(self):
        raw = {"id": 1, "familiarityScore": 10}
        migrate_item(raw)
        assert raw == {"id": 1, "familiarityScore": 10}

    @pytest.mark.parametrize("raw", [
        {"familiarityScore": 10},
        {"id": 1, "familiarityScore": 120},
        {"id": 1, "familiarityScore": 10, "timesReviewed": -2},
    ])
    def test_invalid_records(self, raw):
        with pytest.raises(InvalidArgument):
            migrate_item(raw)

    def test_rejects_non_mapping(self):
        with pytest.raises(InvalidArgument):
            migrate_item(["id", 1])

    @pytest.mark.parametrize("history", [
        "2024-05-01T00:00:00Z",
        b"2024-05-01T00:00:00Z",
        {"last": "2024-05-01T00:00:00Z"},
        42,
    ])
    def test_rejects_history_that_is_not_a_list(self, history):
        with pytest.raises(InvalidArgument):
            migrate_item({"id": 1, "familiarityScore": 0, "recentReviews": history})


class TestMigrateConfig:
    def test_default_recency_weight(self):
        config = migrate_config({"projectName": "Dutch", "contentFontSize": 1.2})
        assert config.review_recency_weight == 0.5

    def test_keeps_stored_weight(self):
        assert migrate_config({"reviewRecencyWeight": 0.66}).review_recency_weight == 0.66

    def test_invalid_weight(self):
        with pytest.raises(InvalidArgument):
            migrate_config({"reviewRecencyWeight": 1.5})

    def test_defaults(self):
        config = ReviewConfig()
        assert config.review_queue_size == 20
        assert config.recent_window_days == 7.0
