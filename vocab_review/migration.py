"""
Migrate-on-read helpers for stored records.

Older records may lack fields added later (recentReviews, timesCorrect) and
older configs may lack reviewRecencyWeight. These helpers fill the gaps
while preserving every existing field, then validate.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from vocab_review.errors import InvalidArgument
from vocab_review.schemas import ReviewableItem, ReviewConfig
from vocab_review.scoring.constants import DEFAULT_RECENCY_WEIGHT, MAX_RECENT_REVIEWS
from vocab_review.scoring.validation import require_review_history


def _first_present(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return default


def migrate_item(raw: Mapping[str, Any]) -> ReviewableItem:
    """
    Build a ReviewableItem from a stored record, filling missing fields.

    - recentReviews missing/None -> []
    - recentReviews longer than the cap -> most recent entries kept
    - recentReviews that is not a list (e.g. a bare string) is rejected
    - timesReviewed / timesCorrect missing -> 0

    Raises:
        InvalidArgument: If the record still fails validation
    """
    if not isinstance(raw, Mapping):
        raise InvalidArgument(f"record must be a mapping, got {type(raw).__name__}")

    recent_reviews = require_review_history(
        _first_present(raw, "recentReviews", "recent_reviews", default=[])
    )
    record = {
        **raw,
        "recentReviews": recent_reviews[-MAX_RECENT_REVIEWS:],
        "timesReviewed": _first_present(raw, "timesReviewed", "times_reviewed", default=0),
        "timesCorrect": _first_present(raw, "timesCorrect", "times_correct", default=0),
    }
    for snake_key in ("recent_reviews", "times_reviewed", "times_correct"):
        record.pop(snake_key, None)

    try:
        return ReviewableItem.model_validate(record)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid review record {raw.get('id')!r}: {exc}") from exc


def migrate_config(raw: Mapping[str, Any]) -> ReviewConfig:
    """
    Build ReviewConfig from stored app config; reviewRecencyWeight defaults to 0.5.

    Unrelated config keys (projectName, contentFontSize, ...) are ignored.
    """
    if not isinstance(raw, Mapping):
        raise InvalidArgument(f"config must be a mapping, got {type(raw).__name__}")

    record = {
        **raw,
        "reviewRecencyWeight": _first_present(
            raw, "reviewRecencyWeight", "review_recency_weight", default=DEFAULT_RECENCY_WEIGHT
        ),
    }
    record.pop("review_recency_weight", None)

    try:
        return ReviewConfig.model_validate(record)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid review config: {exc}") from exc
