from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping

UNRESOLVED_MARKER = "(unresolved)"


@dataclass(frozen=True)
class ResolvedReference:
    """
    Outcome of looking a note/source reference up in its map.

    ``text`` is the mapped text when ``resolved`` is True, otherwise the raw
    reference (an unknown id, or inline text that was never a pointer).
    """
    key: str
    text: str
    resolved: bool

    def display(self) -> str:
        if self.resolved:
            return self.text
        return f"{self.key} {UNRESOLVED_MARKER}"


def resolve_reference(ref: str, mapping: Mapping[str, str]) -> ResolvedReference:
    """Look ``ref`` up in ``mapping``; a miss is flagged, never raised."""
    if ref in mapping:
        return ResolvedReference(key=ref, text=mapping[ref], resolved=True)
    return ResolvedReference(key=ref, text=ref, resolved=False)


def resolve_references(refs: Iterable[str], mapping: Mapping[str, str]) -> List[ResolvedReference]:
    return [resolve_reference(ref, mapping) for ref in refs]
