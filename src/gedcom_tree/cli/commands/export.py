from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_tree.cli.utils import console, load_gedcom, write_text
from gedcom_tree.config import get_config
from gedcom_tree.exporter import serialize_registry_to_json_string


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    references: bool = typer.Option(
        False,
        "--references",
        "-r",
        help="Include resolved notes and sources",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export individuals and families to JSON (stdout by default).
    """
    document = load_gedcom(gedcom, verbose=verbose)
    export_cfg = get_config().export

    payload = serialize_registry_to_json_string(
        document.registry,
        indent=int(export_cfg.get("indent", 2)) if pretty else None,
        include_references=references or bool(export_cfg.get("include_references", False)),
    )

    write_text(payload, out=out)

    if verbose:
        console.log(f"Export complete -> {out or 'stdout'}")
