"""Review queue builders."""

from vocab_review.session_builders.queue_selector import (
    build_review_pool_state,
    compute_quotas,
    select_words_for_review,
)
from vocab_review.session_builders.pool_types import QueueQuotas, ReviewPoolState

__all__ = [
    "build_review_pool_state",
    "compute_quotas",
    "select_words_for_review",
    "QueueQuotas",
    "ReviewPoolState",
]
