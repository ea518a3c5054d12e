# src/gedcom_tree/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_tree.loader import (
        Token,
        GedcomSyntaxError,
        GEDCOMNode,
        GEDCOMTree,
        tokenize_line,
        tokenize_lines,
        tokenize_file,
        build_tree,
        parse_lines,
    )
"""

from __future__ import annotations

from .tokenizer import (
    GedcomSyntaxError,
    Token,
    tokenize_file,
    tokenize_line,
    tokenize_lines,
)
from .tree_builder import GEDCOMNode, GEDCOMTree, build_tree, parse_lines

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "GEDCOMNode",
    "GEDCOMTree",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_file",
    "build_tree",
    "parse_lines",
]
