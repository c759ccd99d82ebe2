"""
Cross-file matching of individual records.
"""

from .engine import group_by_key, reconcile
from .keys import DEFAULT_KEY_OPTIONS, KeyOptions, comparison_key
from .models import MatchCounts, MatchStatus, ReconciliationResult, Side

__all__ = [
    "DEFAULT_KEY_OPTIONS",
    "KeyOptions",
    "MatchCounts",
    "MatchStatus",
    "ReconciliationResult",
    "Side",
    "comparison_key",
    "group_by_key",
    "reconcile",
]
