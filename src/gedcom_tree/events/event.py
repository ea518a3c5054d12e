# src/gedcom_tree/events/event.py

from __future__ import annotations

from dataclasses import dataclass

from gedcom_tree.loader.tree_builder import GEDCOMNode, GEDCOMTree


# ---------------------------------------------------------------------------
# Event Tag Definitions
# ---------------------------------------------------------------------------

# Birth/death class: the only individual events extracted.
INDIVIDUAL_EVENT_TAGS: frozenset[str] = frozenset({
    "BIRT", "CHR", "BAPM",
    "DEAT", "BURI", "CREM",
})

# Marriage class: the only family events extracted.
FAMILY_EVENT_TAGS: frozenset[str] = frozenset({
    "MARR", "MARB", "MARC", "MARL", "MARS", "ENGA",
})

DATE_TAG = "DATE"
PLACE_TAG = "PLAC"


@dataclass(frozen=True)
class Event:
    """A dated/placed occurrence taken from a GEDCOM event node."""
    type: str
    date: str = ""
    place: str = ""


# ---------------------------------------------------------------------------
# Tag Helpers
# ---------------------------------------------------------------------------

def is_individual_event_tag(tag: str) -> bool:
    return tag in INDIVIDUAL_EVENT_TAGS if tag else False


def is_family_event_tag(tag: str) -> bool:
    return tag in FAMILY_EVENT_TAGS if tag else False


def is_event_tag(tag: str) -> bool:
    """Return True if the tag is any recognized individual or family event tag."""
    return is_individual_event_tag(tag) or is_family_event_tag(tag)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def extract_event(tree: GEDCOMTree, node: GEDCOMNode) -> Event:
    """
    Build an Event from ``node``.

    Only direct children are inspected. A missing DATE or PLAC leaves the
    field empty; a repeated one overwrites the earlier value.
    """
    date = ""
    place = ""

    for child in tree.children(node):
        if child.tag == DATE_TAG:
            date = child.value
        elif child.tag == PLACE_TAG:
            place = child.value

    return Event(type=node.tag, date=date, place=place)
