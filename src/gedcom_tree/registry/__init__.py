from __future__ import annotations

from .build_family import build_family
from .build_individual import build_individual
from .build_note import resolve_note_text, resolve_notes
from .build_registry import build_registry, extract_entities
from .build_source import resolve_notes_and_sources, resolve_sources
from .entities import Family, GedcomRegistry, Individual
from .references import ResolvedReference, resolve_reference, resolve_references

__all__ = [
    "Family",
    "GedcomRegistry",
    "Individual",
    "ResolvedReference",
    "build_family",
    "build_individual",
    "build_registry",
    "extract_entities",
    "resolve_note_text",
    "resolve_notes",
    "resolve_notes_and_sources",
    "resolve_reference",
    "resolve_references",
    "resolve_sources",
]
