
from __future__ import annotations

import typer

from gedcom_reconcile.cli.commands.compare import compare_command
from gedcom_reconcile.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-reconcile",
    help="Compare the individuals of two GEDCOM files",
    add_completion=False,
)

app.command("compare")(compare_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
