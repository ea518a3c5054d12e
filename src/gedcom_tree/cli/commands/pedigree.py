from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.tree import Tree

from gedcom_tree.cli.utils import console, err_console, load_gedcom
from gedcom_tree.core.exceptions import CyclicAncestryError, UnknownIndividualError
from gedcom_tree.pedigree import PedigreeNode, build_pedigree


def _label(node: PedigreeNode) -> str:
    ind = node.individual
    name = escape(ind.name) if ind.name else "(no name)"
    return f"[bold]{ind.id}[/bold] {name} [dim]{node.role}, generation {node.depth}[/dim]"


def _add_branch(parent: Tree, node: PedigreeNode) -> None:
    branch = parent.add(_label(node))
    for p in node.parents:
        _add_branch(branch, p)


def pedigree_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    individual_id: str = typer.Argument(..., help="Starting individual id, e.g. I1"),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        "-d",
        min=0,
        help="Stop after this many generations",
    ),
):
    """
    Show the ancestors of an individual.
    """
    registry = load_gedcom(gedcom).registry

    try:
        root = build_pedigree(
            individual_id.strip("@"),
            registry.individuals,
            registry.families,
            max_depth=max_depth,
        )
    except UnknownIndividualError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    except CyclicAncestryError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    tree = Tree(_label(root))
    for p in root.parents:
        _add_branch(tree, p)

    console.print(tree)
