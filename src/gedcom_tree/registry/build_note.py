from __future__ import annotations

from typing import Dict, List

from gedcom_tree.loader.tree_builder import GEDCOMNode, GEDCOMTree

CONTINUATION_TAGS = frozenset({"CONT", "CONC"})


def resolve_note_text(tree: GEDCOMTree, node: GEDCOMNode, *, conc_inline: bool = False) -> str:
    """
    Reconstruct the free text of a NOTE node.

    The declared value comes first, then the value of every direct CONT or
    CONC child in document order, each on a new line. With
    ``conc_inline=True`` a CONC value is appended to the current line
    instead.
    """
    if node.tag != "NOTE":
        raise ValueError(f"Expected NOTE node, got {node.tag}")

    parts: List[str] = [node.value]

    for child in tree.children(node):
        if child.tag not in CONTINUATION_TAGS:
            continue
        if child.tag == "CONC" and conc_inline:
            parts.append(child.value)
        else:
            parts.append("\n" + child.value)

    return "".join(parts)


def resolve_notes(tree: GEDCOMTree, *, conc_inline: bool = False) -> Dict[str, str]:
    """Map every indexed NOTE declaration to its reconstructed text."""
    return {
        xref_id: resolve_note_text(tree, node, conc_inline=conc_inline)
        for xref_id, node in tree.iter_xref_nodes()
        if node.tag == "NOTE"
    }
