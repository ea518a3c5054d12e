from __future__ import annotations

from gedcom_tree.events.event import extract_event, is_family_event_tag
from gedcom_tree.loader.tree_builder import GEDCOMNode, GEDCOMTree
from gedcom_tree.registry.entities import Family
from gedcom_tree.utils.pointers import strip_pointer


def build_family(tree: GEDCOMTree, node: GEDCOMNode) -> Family:
    """
    Build a Family from a GEDCOMNode with tag 'FAM'.

    PURE FUNCTION:
      - no registry access
      - no cross-entity linking

    HUSB and WIFE are single-valued (last one wins); CHIL references keep
    document order.
    """
    if node.tag != "FAM":
        raise ValueError(f"Expected FAM node, got {node.tag}")

    xref_id = node.xref_id
    if not xref_id:
        raise ValueError("FAM node is missing pointer")

    family = Family(id=xref_id)

    for child in tree.children(node):
        tag = child.tag

        if tag == "HUSB":
            family.husband_id = strip_pointer(child.value)

        elif tag == "WIFE":
            family.wife_id = strip_pointer(child.value)

        elif tag == "CHIL":
            family.children_ids.append(strip_pointer(child.value))

        elif is_family_event_tag(tag):
            family.events.append(extract_event(tree, child))

        elif tag == "NOTE":
            family.notes.append(strip_pointer(child.value))

        elif tag == "SOUR":
            family.sources.append(strip_pointer(child.value))

    return family
