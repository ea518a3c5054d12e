from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from gedcom_tree.cli.utils import console, load_gedcom
from gedcom_tree.registry.references import resolve_reference


def _event_summary(events) -> str:
    return "\n".join(
        escape(f"{e.type} {e.date or '?'}" + (f", {e.place}" if e.place else ""))
        for e in events
    )


def individuals_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
):
    """
    List individuals with their events.
    """
    registry = load_gedcom(gedcom).registry

    table = Table(title="Individuals")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Sex")
    table.add_column("Events")

    for ind in registry.individuals.values():
        table.add_row(
            escape(ind.id), escape(ind.name), escape(ind.sex), _event_summary(ind.events)
        )

    console.print(table)


def families_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
):
    """
    List families with spouses and children.
    """
    registry = load_gedcom(gedcom).registry

    table = Table(title="Families")
    table.add_column("ID", style="bold")
    table.add_column("Husband")
    table.add_column("Wife")
    table.add_column("Children")

    for fam in registry.families.values():
        table.add_row(
            escape(fam.id),
            escape(fam.husband_id),
            escape(fam.wife_id),
            escape(", ".join(fam.children_ids)),
        )

    console.print(table)


def note_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    note_id: str = typer.Argument(..., help="Note id, e.g. N1"),
):
    """
    Print the resolved text of a note.
    """
    registry = load_gedcom(gedcom).registry
    resolved = resolve_reference(note_id.strip("@"), registry.notes)

    if resolved.resolved:
        console.print(resolved.text, markup=False, highlight=False)
    else:
        console.print(f"[yellow]{escape(resolved.display())}[/yellow]")
