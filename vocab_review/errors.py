"""
Error taxonomy for the review engine.

Every contract violation raises InvalidArgument before any computation
happens. There is no partial-failure mode and no internal retry.
"""

from __future__ import annotations


class InvalidArgument(ValueError):
    """An input lies outside its documented domain."""
