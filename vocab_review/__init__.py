"""
vocab_review - review selection and familiarity scoring for vocabulary learning

Main API:
- calculate_selection_weight / calculate_recency_score: priority of a word
- update_familiarity_score: new familiarity after a graded review
- calculate_blended_score: buffered mix of selection weight and recency
- select_words_for_review: bounded, duplicate-free, shuffled review queue

Quick start:
    from vocab_review import select_words_for_review, apply_review, migrate_item

    pool = [migrate_item(record) for record in stored_records]
    queue = select_words_for_review(pool, 20, recency_weight=0.5)

    outcome = apply_review(queue[0], rating=4)
    store.save(outcome.item)  # persistence is the caller's job
"""

from vocab_review.errors import InvalidArgument

from vocab_review.scoring import (
    Rating,
    calculate_blended_score,
    calculate_item_priority,
    calculate_recency_score,
    calculate_selection_weight,
    update_familiarity_score,
)
from vocab_review.session_builders import (
    build_review_pool_state,
    compute_quotas,
    select_words_for_review,
)
from vocab_review.schemas import ReviewableItem, ReviewConfig
from vocab_review.migration import migrate_config, migrate_item
from vocab_review.review_log import ReviewOutcome, append_review_timestamp, apply_review
from vocab_review.config import load_review_config


__all__ = [
    "InvalidArgument",

    # Scoring
    "Rating",
    "calculate_selection_weight",
    "calculate_recency_score",
    "update_familiarity_score",
    "calculate_blended_score",
    "calculate_item_priority",

    # Queue
    "select_words_for_review",
    "build_review_pool_state",
    "compute_quotas",

    # Records and settings
    "ReviewableItem",
    "ReviewConfig",
    "migrate_item",
    "migrate_config",
    "load_review_config",

    # Review recording
    "apply_review",
    "append_review_timestamp",
    "ReviewOutcome",
]
