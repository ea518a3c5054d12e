from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gedcom_tree.events.event import Event


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Individual:
    """
    An INDI record.

    ``famc``/``fams`` hold bare family ids. ``notes``/``sources`` hold bare
    ids for pointer references and the text itself for inline values.
    """
    id: str
    name: str = ""
    sex: str = ""
    events: List[Event] = field(default_factory=list)
    famc: str = ""
    fams: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Family:
    """A FAM record; member ids are bare individual ids."""
    id: str
    husband_id: str = ""
    wife_id: str = ""
    children_ids: List[str] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)


# -----------------------------
# Registry
# -----------------------------

@dataclass(slots=True)
class GedcomRegistry:
    """
    In-memory record maps, keyed by bare cross-reference id.

    Registering an id that is already present replaces the earlier record.
    """
    individuals: Dict[str, Individual] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)
    notes: Dict[str, str] = field(default_factory=dict)
    sources: Dict[str, str] = field(default_factory=dict)

    def register_individual(self, ind: Individual) -> None:
        self.individuals[ind.id] = ind

    def register_family(self, fam: Family) -> None:
        self.families[fam.id] = fam

    def get_individual(self, xref_id: str) -> Optional[Individual]:
        return self.individuals.get(xref_id)

    def get_family(self, xref_id: str) -> Optional[Family]:
        return self.families.get(xref_id)

    def get_note(self, xref_id: str) -> Optional[str]:
        return self.notes.get(xref_id)

    def get_source(self, xref_id: str) -> Optional[str]:
        return self.sources.get(xref_id)

    def counts(self) -> Dict[str, int]:
        return {
            "individuals": len(self.individuals),
            "families": len(self.families),
            "notes": len(self.notes),
            "sources": len(self.sources),
        }
