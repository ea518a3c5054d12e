from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_tree.cli.utils import console, load_gedcom


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    document = load_gedcom(gedcom, verbose=verbose)
    tree, registry = document.tree, document.registry

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Lines parsed", str(len(tree.nodes)))
    table.add_row("Top-level records", str(len(tree.roots)))
    table.add_row("Individuals", str(len(registry.individuals)))
    table.add_row("Families", str(len(registry.families)))
    table.add_row("Notes", str(len(registry.notes)))
    table.add_row("Sources", str(len(registry.sources)))

    console.print(table)
