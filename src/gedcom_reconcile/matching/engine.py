"""
engine.py
Reconciliation of two individual collections.

Records are hash-joined on their comparison key. Each key is classified once
(present in both files, only in A, only in B) and that status is then given
to every record id filed under the key. Records that share a key inside one
file (twins entered with identical data, duplicated entries) therefore
always share a status; no attempt is made to pair them up one-to-one.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from gedcom_reconcile.logging import get_logger
from gedcom_reconcile.records.models import IndividualRecord

from .keys import DEFAULT_KEY_OPTIONS, KeyOptions, comparison_key
from .models import MatchCounts, MatchStatus, ReconciliationResult

log = get_logger(__name__)

KeyedRecords = List[Tuple[str, IndividualRecord]]


def _keyed(records: Iterable[IndividualRecord], options: KeyOptions) -> KeyedRecords:
    return [(comparison_key(record, options), record) for record in records]


def _group(keyed: KeyedRecords) -> Dict[str, List[IndividualRecord]]:
    groups: Dict[str, List[IndividualRecord]] = {}
    for key, record in keyed:
        groups.setdefault(key, []).append(record)
    return groups


def group_by_key(
    records: Iterable[IndividualRecord],
    options: Optional[KeyOptions] = None,
) -> Dict[str, List[IndividualRecord]]:
    """Group records by comparison key, keeping every record that shares a key."""
    return _group(_keyed(records, options or DEFAULT_KEY_OPTIONS))


def reconcile(
    records_a: Sequence[IndividualRecord],
    records_b: Sequence[IndividualRecord],
    options: Optional[KeyOptions] = None,
) -> ReconciliationResult:
    """
    Classify every record of both collections as MATCH, UNIQUE_A or UNIQUE_B.

    Both collections are expected to be non-empty and callers check that
    first. An empty side is not an error here: every record of the other
    side simply comes out unique.

    The status maps follow the input order of each collection, and the
    counts satisfy ``counts.total == len(records_a) + len(records_b)``.
    """
    options = options or DEFAULT_KEY_OPTIONS
    keyed_a = _keyed(records_a, options)
    keyed_b = _keyed(records_b, options)
    groups_a = _group(keyed_a)
    groups_b = _group(keyed_b)

    counts = MatchCounts()
    key_status: Dict[str, MatchStatus] = {}

    for key in dict.fromkeys([*groups_a, *groups_b]):
        bucket_a = groups_a.get(key, [])
        bucket_b = groups_b.get(key, [])

        if bucket_a and bucket_b:
            status = MatchStatus.MATCH
            counts.add(status, len(bucket_a) + len(bucket_b))
        elif bucket_a:
            status = MatchStatus.UNIQUE_A
            counts.add(status, len(bucket_a))
        else:
            status = MatchStatus.UNIQUE_B
            counts.add(status, len(bucket_b))

        key_status[key] = status

    result = ReconciliationResult(
        status_a={record.id: key_status[key] for key, record in keyed_a},
        status_b={record.id: key_status[key] for key, record in keyed_b},
        counts=counts,
    )

    log.debug(
        f"Reconciled {len(keyed_a)} + {len(keyed_b)} record(s) over {len(key_status)} key(s): "
        f"{counts.as_dict()}"
    )
    return result
