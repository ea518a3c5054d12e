"""
json_exporter.py
JSON exporter for GedcomRegistry objects.

Output shape:

    {
      "individuals": [{"id", "name", "sex", "events": [{"type", "date", "place"}]}],
      "families":    [{"id", "husband", "wife", "children": [...]}]
    }

With ``include_references=True`` each record also carries resolved
``notes``/``sources`` lists, and the note/source maps are added at the top
level.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Mapping

from gedcom_tree.logging import get_logger
from gedcom_tree.registry.entities import Family, GedcomRegistry, Individual
from gedcom_tree.registry.references import resolve_references

log = get_logger(__name__)


def _references_to_json(refs: List[str], mapping: Mapping[str, str]) -> List[Dict[str, Any]]:
    return [
        {"ref": r.key, "text": r.text, "resolved": r.resolved}
        for r in resolve_references(refs, mapping)
    ]


def individual_to_dict(
    ind: Individual,
    registry: GedcomRegistry,
    *,
    include_references: bool = False,
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": ind.id,
        "name": ind.name,
        "sex": ind.sex,
        "events": [asdict(e) for e in ind.events],
    }
    if include_references:
        data["notes"] = _references_to_json(ind.notes, registry.notes)
        data["sources"] = _references_to_json(ind.sources, registry.sources)
    return data


def family_to_dict(
    fam: Family,
    registry: GedcomRegistry,
    *,
    include_references: bool = False,
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": fam.id,
        "husband": fam.husband_id,
        "wife": fam.wife_id,
        "children": list(fam.children_ids),
    }
    if include_references:
        data["events"] = [asdict(e) for e in fam.events]
        data["notes"] = _references_to_json(fam.notes, registry.notes)
        data["sources"] = _references_to_json(fam.sources, registry.sources)
    return data


def build_export_dict(registry: GedcomRegistry, *, include_references: bool = False) -> Dict[str, Any]:
    """
    Convert the in-memory registry into a JSON-safe dict.
    """
    data: Dict[str, Any] = {
        "individuals": [
            individual_to_dict(ind, registry, include_references=include_references)
            for ind in registry.individuals.values()
        ],
        "families": [
            family_to_dict(fam, registry, include_references=include_references)
            for fam in registry.families.values()
        ],
    }
    if include_references:
        data["notes"] = dict(registry.notes)
        data["sources"] = dict(registry.sources)
    return data


def serialize_registry_to_json_string(
    registry: GedcomRegistry,
    *,
    indent: int | None = 2,
    include_references: bool = False,
) -> str:
    return json.dumps(
        build_export_dict(registry, include_references=include_references),
        indent=indent,
        ensure_ascii=False,
    )


def export_registry_json(
    registry: GedcomRegistry,
    output_path: str | Path,
    *,
    indent: int | None = 2,
    include_references: bool = False,
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting registry JSON to: %s (INDI=%d, FAM=%d)",
        output_path,
        len(registry.individuals),
        len(registry.families),
    )

    json_str = serialize_registry_to_json_string(
        registry, indent=indent, include_references=include_references
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)
        f.write("\n")

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
    return output_path
