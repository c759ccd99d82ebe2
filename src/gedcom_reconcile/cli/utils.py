
from __future__ import annotations

import time
from pathlib import Path
from typing import Mapping, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from gedcom_reconcile.matching import MatchStatus
from gedcom_reconcile.records import IndividualRecord, load_individuals

console = Console()

STATUS_STYLES = {
    MatchStatus.MATCH: "green",
    MatchStatus.UNIQUE_A: "red",
    MatchStatus.UNIQUE_B: "red",
}


def load_individual_file(path: Path, *, close_scopes: bool = False, verbose: bool = False) -> Tuple[IndividualRecord, ...]:
    """
    Parse one GEDCOM file, timing the run when verbose.
    """
    t0 = time.perf_counter()
    records = load_individuals(path, close_scopes=close_scopes)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {path.name} in {elapsed:.2f}s")

    return records


def summary_table(report) -> Table:
    counts = report.result.counts

    table = Table(title="Comparison Summary")
    table.add_column("Outcome", style="bold")
    table.add_column("Records", justify="right")

    table.add_row("[green]Identical matches[/green]", str(counts.match))
    table.add_row(f"[red]Unique to {report.path_a.name}[/red]", str(counts.unique_a))
    table.add_row(f"[red]Unique to {report.path_b.name}[/red]", str(counts.unique_b))
    table.add_row("Total unique", str(counts.total_unique))
    table.add_row("Total records", str(counts.total))
    return table


def records_table(
    title: str,
    records: Sequence[IndividualRecord],
    statuses: Mapping[str, MatchStatus],
    only: Sequence[MatchStatus],
) -> Table:
    table = Table(title=title)
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Sex")
    table.add_column("Birth date")
    table.add_column("Birth place")
    table.add_column("Status")

    for record in records:
        status = statuses[record.id]
        if status not in only:
            continue
        birth = record.birth
        style = STATUS_STYLES[status]
        table.add_row(
            record.id,
            record.name,
            record.sex or "",
            birth.date if birth else "",
            birth.place if birth else "",
            f"[{style}]{status.value}[/{style}]",
        )
    return table


def write_json(payload: str, *, out: Path | None) -> None:
    """
    Write JSON to stdout (``out`` is None or ``-``) or to a file.
    """
    if out is None or str(out) == "-":
        print(payload)
        return

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(payload, encoding="utf-8")
