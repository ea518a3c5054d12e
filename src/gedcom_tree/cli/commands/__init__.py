"""
CLI command modules for gedcom_tree.

Each command module defines Typer-compatible command functions.
"""

from gedcom_tree.cli.commands.export import export_command
from gedcom_tree.cli.commands.pedigree import pedigree_command
from gedcom_tree.cli.commands.stats import stats_command
from gedcom_tree.cli.commands.view import families_command, individuals_command, note_command

__all__ = [
    "export_command",
    "families_command",
    "individuals_command",
    "note_command",
    "pedigree_command",
    "stats_command",
]
