from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Union


class MatchStatus(str, Enum):
    """Outcome of reconciliation for a single record id."""

    MATCH = "MATCH"
    UNIQUE_A = "UNIQUE_A"
    UNIQUE_B = "UNIQUE_B"


class Side(str, Enum):
    A = "A"
    B = "B"


@dataclass
class MatchCounts:
    """
    Number of record ids per status.

    Ids are counted, not keys: two twins sharing a key in file A and one
    matching record in file B add 3 to ``match``.
    """

    match: int = 0
    unique_a: int = 0
    unique_b: int = 0

    _FIELDS = {
        MatchStatus.MATCH: "match",
        MatchStatus.UNIQUE_A: "unique_a",
        MatchStatus.UNIQUE_B: "unique_b",
    }

    def add(self, status: MatchStatus, amount: int) -> None:
        attr = self._FIELDS[MatchStatus(status)]
        setattr(self, attr, getattr(self, attr) + amount)

    def __getitem__(self, status: Union[MatchStatus, str]) -> int:
        try:
            return getattr(self, self._FIELDS[MatchStatus(status)])
        except ValueError:
            raise KeyError(status) from None

    @property
    def total(self) -> int:
        return self.match + self.unique_a + self.unique_b

    @property
    def total_unique(self) -> int:
        return self.unique_a + self.unique_b

    def as_dict(self) -> Dict[str, int]:
        return {
            MatchStatus.MATCH.value: self.match,
            MatchStatus.UNIQUE_A.value: self.unique_a,
            MatchStatus.UNIQUE_B.value: self.unique_b,
        }


@dataclass
class ReconciliationResult:
    """Per-id classification of both files plus the aggregate counts."""

    status_a: Dict[str, MatchStatus] = field(default_factory=dict)
    status_b: Dict[str, MatchStatus] = field(default_factory=dict)
    counts: MatchCounts = field(default_factory=MatchCounts)

    def statuses(self, side: Union[Side, str]) -> Dict[str, MatchStatus]:
        return self.status_a if Side(side) is Side.A else self.status_b

    def status_for(self, side: Union[Side, str], record_id: str) -> MatchStatus:
        return self.statuses(side)[record_id]

    def ids_with_status(self, side: Union[Side, str], status: MatchStatus) -> List[str]:
        return [rid for rid, st in self.statuses(side).items() if st is status]

    def unique_ids(self, side: Union[Side, str]) -> List[str]:
        return [rid for rid, st in self.statuses(side).items() if st is not MatchStatus.MATCH]

    @property
    def all_matched(self) -> bool:
        return self.counts.total > 0 and self.counts.total_unique == 0
