"""Stats module for summarizing links."""

from .aggregator import compute_stats

__all__ = ["compute_stats"]
