from __future__ import annotations

import json

from gedcom_tree.core.pipeline import parse_gedcom
from gedcom_tree.exporter import (
    build_export_dict,
    export_registry_json,
    serialize_registry_to_json_string,
)
from gedcom_tree.utils import mock_file_path


def _registry():
    return parse_gedcom(mock_file_path("family.ged")).registry


def test_export_dict_reference_shape():
    data = build_export_dict(_registry())

    assert set(data) == {"individuals", "families"}

    john = next(i for i in data["individuals"] if i["id"] == "I1")
    assert john == {
        "id": "I1",
        "name": "John /Smith/",
        "sex": "M",
        "events": [
            {"type": "BIRT", "date": "12 MAR 1950", "place": "Springfield, Illinois"},
        ],
    }

    f1 = next(f for f in data["families"] if f["id"] == "F1")
    assert f1 == {"id": "F1", "husband": "I2", "wife": "I3", "children": ["I1"]}


def test_export_dict_with_references():
    data = build_export_dict(_registry(), include_references=True)

    assert data["notes"] == {"N1": "John kept a diary\nfrom 1965 to 1970."}
    assert data["sources"] == {"S1": "Springfield birth register"}

    john = next(i for i in data["individuals"] if i["id"] == "I1")
    assert john["notes"] == [
        {"ref": "N1", "text": "John kept a diary\nfrom 1965 to 1970.", "resolved": True}
    ]

    f2 = next(f for f in data["families"] if f["id"] == "F2")
    assert f2["sources"] == [{"ref": "S9", "text": "S9", "resolved": False}]


def test_serialize_is_valid_json():
    payload = serialize_registry_to_json_string(_registry(), indent=None)

    assert len(json.loads(payload)["individuals"]) == 6


def test_export_registry_json_writes_file(tmp_path):
    out = tmp_path / "nested" / "export.json"

    written = export_registry_json(_registry(), out)

    assert written == out
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["families"]) == 3
