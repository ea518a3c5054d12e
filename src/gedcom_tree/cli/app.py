from __future__ import annotations

import typer

from gedcom_tree.cli.commands.export import export_command
from gedcom_tree.cli.commands.pedigree import pedigree_command
from gedcom_tree.cli.commands.stats import stats_command
from gedcom_tree.cli.commands.view import families_command, individuals_command, note_command

app = typer.Typer(
    name="gedcom-tree",
    help="GEDCOM tree builder, inspector, and exporter",
    add_completion=False,
)

app.command("individuals")(individuals_command)
app.command("families")(families_command)
app.command("note")(note_command)
app.command("pedigree")(pedigree_command)
app.command("export")(export_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
