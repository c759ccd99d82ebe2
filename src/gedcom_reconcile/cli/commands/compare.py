from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_reconcile.cli.utils import records_table, summary_table, write_json
from gedcom_reconcile.config import get_config
from gedcom_reconcile.core import NoIndividualsError, compare_files
from gedcom_reconcile.exporter import report_to_json
from gedcom_reconcile.matching import MatchStatus

console = Console()


class ShowMode(str, Enum):
    all = "all"
    unique = "unique"
    match = "match"
    none = "none"


_SHOWN = {
    ShowMode.all: (MatchStatus.MATCH, MatchStatus.UNIQUE_A, MatchStatus.UNIQUE_B),
    ShowMode.unique: (MatchStatus.UNIQUE_A, MatchStatus.UNIQUE_B),
    ShowMode.match: (MatchStatus.MATCH,),
    ShowMode.none: (),
}


def compare_command(
    file_a: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="First GEDCOM file"),
    file_b: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Second GEDCOM file"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the JSON report to a file ('-' for stdout)",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    show: ShowMode = typer.Option(
        ShowMode.unique,
        "--show",
        help="Which individuals to list after the summary",
    ),
    strict_place: bool = typer.Option(
        False,
        "--strict-place",
        help="Keep digits and punctuation when comparing birth places",
    ),
    close_scopes: bool = typer.Option(
        False,
        "--close-scopes",
        help="End an individual at any level-0 record and its birth at any other level-1 event",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Compare the individuals of two GEDCOM files by name, sex and birth.
    """
    options = get_config().key_options(strict_place=True) if strict_place else None

    if verbose:
        console.log(f"Comparing {file_a.name} with {file_b.name}")

    try:
        report = compare_files(
            file_a,
            file_b,
            options=options,
            close_scopes=True if close_scopes else None,
        )
    except NoIndividualsError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)

    if out is not None:
        write_json(report_to_json(report, indent=2 if pretty else None), out=out)
        if str(out) == "-":
            return

    result = report.result
    console.print(summary_table(report))

    if result.all_matched:
        console.print(
            f"[bold green]All {result.counts.match} records based on Name, Sex, "
            f"and Birth details match across both files![/bold green]"
        )

    only = _SHOWN[show]
    if only:
        console.print(records_table(report.path_a.name, report.records_a, result.status_a, only))
        console.print(records_table(report.path_b.name, report.records_b, result.status_b, only))

    if verbose:
        console.log("Comparison complete")
