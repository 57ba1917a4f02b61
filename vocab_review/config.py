"""
Environment configuration for the review engine.

Values come from the process environment (a .env file is loaded if
present) and are validated through ReviewConfig.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from vocab_review.errors import InvalidArgument
from vocab_review.schemas import ReviewConfig
from vocab_review.scoring.constants import (
    DEFAULT_QUEUE_SIZE,
    DEFAULT_RECENCY_WEIGHT,
    RECENT_WINDOW_DAYS,
)

# Environment variable names
RECENCY_WEIGHT_ENV = "REVIEW_RECENCY_WEIGHT"
QUEUE_SIZE_ENV = "REVIEW_QUEUE_SIZE"
RECENT_WINDOW_ENV = "REVIEW_RECENT_WINDOW_DAYS"


def load_review_config() -> ReviewConfig:
    """
    Read review settings from the environment.

    Returns:
        Validated ReviewConfig

    Raises:
        InvalidArgument: If a variable is set to an invalid value
    """
    # Search upward from the working directory
    load_dotenv(find_dotenv(usecwd=True))

    values = {
        "review_recency_weight": os.getenv(RECENCY_WEIGHT_ENV, str(DEFAULT_RECENCY_WEIGHT)),
        "review_queue_size": os.getenv(QUEUE_SIZE_ENV, str(DEFAULT_QUEUE_SIZE)),
        "recent_window_days": os.getenv(RECENT_WINDOW_ENV, str(RECENT_WINDOW_DAYS)),
    }

    try:
        return ReviewConfig.model_validate(values)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid review configuration: {exc}") from exc
