from __future__ import annotations

from typing import Dict, Optional, Tuple

from gedcom_tree.config import get_config
from gedcom_tree.loader.tree_builder import GEDCOMTree
from gedcom_tree.logging import get_logger
from gedcom_tree.registry.build_family import build_family
from gedcom_tree.registry.build_individual import build_individual
from gedcom_tree.registry.build_source import resolve_notes_and_sources
from gedcom_tree.registry.entities import Family, GedcomRegistry, Individual

log = get_logger(__name__)


def extract_entities(tree: GEDCOMTree) -> Tuple[Dict[str, Individual], Dict[str, Family]]:
    """
    Single pass over the cross-reference index.

    INDI declarations become Individuals, FAM declarations become Families;
    every other indexed node is left to the note/source resolver or ignored.
    Records without a declared id never reach the index and so are never
    extracted.
    """
    individuals: Dict[str, Individual] = {}
    families: Dict[str, Family] = {}

    for xref_id, node in tree.iter_xref_nodes():
        if node.tag == "INDI":
            individuals[xref_id] = build_individual(tree, node)

        elif node.tag == "FAM":
            families[xref_id] = build_family(tree, node)

    return individuals, families


def build_registry(tree: GEDCOMTree, *, conc_inline: Optional[bool] = None) -> GedcomRegistry:
    """
    Run entity extraction and note/source resolution over ``tree``.

    ``conc_inline`` defaults to ``notes.conc_inline`` from the config.
    """
    if conc_inline is None:
        conc_inline = get_config().conc_inline

    individuals, families = extract_entities(tree)
    notes, sources = resolve_notes_and_sources(tree, conc_inline=conc_inline)

    registry = GedcomRegistry(
        individuals=individuals,
        families=families,
        notes=notes,
        sources=sources,
    )

    log.info(
        "Registry built (INDI=%d, FAM=%d, NOTE=%d, SOUR=%d)",
        len(individuals),
        len(families),
        len(notes),
        len(sources),
    )
    return registry
