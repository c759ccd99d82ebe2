
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_reconcile.cli.utils import load_individual_file
from gedcom_reconcile.config import get_config
from gedcom_reconcile.matching import group_by_key
from gedcom_reconcile.records import UNKNOWN_VALUE

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for the individuals of a GEDCOM file.
    """
    cfg = get_config()
    records = load_individual_file(gedcom, close_scopes=cfg.close_scopes(), verbose=verbose)
    births = [r.birth for r in records if r.birth is not None]
    groups = group_by_key(records, cfg.key_options())

    table = Table(title=f"{gedcom.name} Statistics")
    table.add_column("Field", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(len(records)))
    table.add_row("With sex", str(sum(1 for r in records if r.sex)))
    table.add_row("With birth", str(len(births)))
    table.add_row("With birth date", str(sum(1 for b in births if b.date != UNKNOWN_VALUE)))
    table.add_row("With birth place", str(sum(1 for b in births if b.place != UNKNOWN_VALUE)))
    table.add_row("Distinct comparison keys", str(len(groups)))
    table.add_row("Records sharing a key", str(sum(len(g) for g in groups.values() if len(g) > 1)))

    console.print(table)
