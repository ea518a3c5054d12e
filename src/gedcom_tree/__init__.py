"""
gedcom-tree: parse GEDCOM files into a node tree and typed genealogy records.

    from gedcom_tree import parse_gedcom

    document = parse_gedcom("family.ged")
    document.registry.individuals["I1"].name
"""

from __future__ import annotations

from gedcom_tree.core.pipeline import GedcomDocument, parse_gedcom, parse_gedcom_lines

__version__ = "0.1.0"

__all__ = [
    "GedcomDocument",
    "parse_gedcom",
    "parse_gedcom_lines",
]
