"""
GEDCOM Reconcile

Finds which individuals of one GEDCOM file also appear in another, by name,
sex and birth details rather than by xref id.

    from gedcom_reconcile import parse_individuals, reconcile

    result = reconcile(parse_individuals(text_a), parse_individuals(text_b))
    result.counts.as_dict()   # {"MATCH": ..., "UNIQUE_A": ..., "UNIQUE_B": ...}
"""

from gedcom_reconcile.matching import (
    KeyOptions,
    MatchCounts,
    MatchStatus,
    ReconciliationResult,
    comparison_key,
    group_by_key,
    reconcile,
)
from gedcom_reconcile.records import (
    BirthDetails,
    IndividualRecord,
    load_individuals,
    parse_individuals,
)

__version__ = "0.1.0"

__all__ = [
    "BirthDetails",
    "IndividualRecord",
    "KeyOptions",
    "MatchCounts",
    "MatchStatus",
    "ReconciliationResult",
    "comparison_key",
    "group_by_key",
    "load_individuals",
    "parse_individuals",
    "reconcile",
]
