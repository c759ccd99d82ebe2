"""
json_exporter.py
Structured JSON export of a comparison run.

Output layout:

    {
      "files":   {"A": "tree_a.ged", "B": "tree_b.ged"},
      "counts":  {"MATCH": 2, "UNIQUE_A": 1, "UNIQUE_B": 0},
      "all_matched": false,
      "individuals_a": [{"id": ..., "name": ..., "details": {...},
                         "key": ..., "status": "MATCH"}, ...],
      "individuals_b": [...]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Union

from gedcom_reconcile.logging import get_logger
from gedcom_reconcile.matching.keys import KeyOptions, comparison_key
from gedcom_reconcile.matching.models import MatchStatus

log = get_logger(__name__)


def _individual_rows(
    records: Sequence[Any],
    statuses: Mapping[str, MatchStatus],
    options: KeyOptions,
) -> List[Dict[str, Any]]:
    rows = []
    for record in records:
        row = record.to_dict()
        row["key"] = comparison_key(record, options)
        row["status"] = statuses[record.id].value
        rows.append(row)
    return rows


def build_report_dict(report: Any) -> Dict[str, Any]:
    """Convert a ComparisonReport into a JSON-safe dict."""
    result = report.result
    return {
        "files": {"A": Path(report.path_a).name, "B": Path(report.path_b).name},
        "counts": result.counts.as_dict(),
        "all_matched": result.all_matched,
        "individuals_a": _individual_rows(report.records_a, result.status_a, report.options),
        "individuals_b": _individual_rows(report.records_b, result.status_b, report.options),
    }


def report_to_json(report: Any, indent: Union[int, None] = 2) -> str:
    data = build_report_dict(report)
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def export_report_json(report: Any, output_path: Union[str, Path], indent: Union[int, None] = 2) -> Path:
    """Write the comparison report to ``output_path``, creating parent dirs."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report_to_json(report, indent=indent), encoding="utf-8")
    log.info(f"Comparison report written: {path}")
    return path
