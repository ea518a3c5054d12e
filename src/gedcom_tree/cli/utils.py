from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console

from gedcom_tree.core.exceptions import ParseExecutionError
from gedcom_tree.core.pipeline import GedcomDocument, parse_gedcom

console = Console()
err_console = Console(stderr=True)


def load_gedcom(path: Path, *, verbose: bool = False) -> GedcomDocument:
    """
    Run the full pipeline on ``path``; parse failures exit with code 1.
    """
    t0 = time.perf_counter()

    try:
        document = parse_gedcom(path)
    except ParseExecutionError as exc:
        err_console.print(f"[red]Failed to parse {path}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        counts = document.registry.counts()
        console.log(
            f"Loaded GEDCOM in {elapsed:.2f}s "
            f"({counts['individuals']} individuals, {counts['families']} families)"
        )

    return document


def write_text(payload: str, *, out: Path | None) -> None:
    """
    Write text to stdout or file.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload + "\n", encoding="utf-8")
    else:
        typer.echo(payload)
