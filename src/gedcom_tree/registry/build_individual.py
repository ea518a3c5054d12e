from __future__ import annotations

from gedcom_tree.events.event import extract_event, is_individual_event_tag
from gedcom_tree.loader.tree_builder import GEDCOMNode, GEDCOMTree
from gedcom_tree.registry.entities import Individual
from gedcom_tree.utils.pointers import strip_pointer


def build_individual(tree: GEDCOMTree, node: GEDCOMNode) -> Individual:
    """
    Build an Individual from a GEDCOMNode with tag 'INDI'.

    PURE FUNCTION:
      - no registry access
      - one pass over direct children, dispatching by tag

    NAME, SEX and FAMC are single-valued: a repeated tag overwrites the
    earlier value.
    """
    if node.tag != "INDI":
        raise ValueError(f"Expected INDI node, got {node.tag}")

    xref_id = node.xref_id
    if not xref_id:
        raise ValueError("INDI node is missing pointer")

    individual = Individual(id=xref_id)

    for child in tree.children(node):
        tag = child.tag

        if tag == "NAME":
            individual.name = child.value

        elif tag == "SEX":
            individual.sex = child.value

        elif is_individual_event_tag(tag):
            individual.events.append(extract_event(tree, child))

        elif tag == "FAMC":
            individual.famc = strip_pointer(child.value)

        elif tag == "FAMS":
            individual.fams.append(strip_pointer(child.value))

        elif tag == "NOTE":
            individual.notes.append(strip_pointer(child.value))

        elif tag == "SOUR":
            individual.sources.append(strip_pointer(child.value))

    return individual
