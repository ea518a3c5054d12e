from __future__ import annotations

from typing import Dict, Tuple

from gedcom_tree.loader.tree_builder import GEDCOMTree
from gedcom_tree.registry.build_note import resolve_notes


def resolve_sources(tree: GEDCOMTree) -> Dict[str, str]:
    """
    Map every indexed SOUR declaration to its declared value.

    Sub-structure (TITL, AUTH, ...) is not descended into.
    """
    return {
        xref_id: node.value
        for xref_id, node in tree.iter_xref_nodes()
        if node.tag == "SOUR"
    }


def resolve_notes_and_sources(
    tree: GEDCOMTree,
    *,
    conc_inline: bool = False,
) -> Tuple[Dict[str, str], Dict[str, str]]:
    """Return ``(notes, sources)`` for the tree's cross-reference index."""
    return resolve_notes(tree, conc_inline=conc_inline), resolve_sources(tree)
