"""Utility functions package."""

from skillfade.utils.timeutils import as_utc, to_naive_utc, utcnow

__all__ = ["as_utc", "to_naive_utc", "utcnow"]
