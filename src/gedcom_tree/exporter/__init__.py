"""
Exporter package.

Re-exports the JSON export entry points.
"""

from __future__ import annotations

from .json_exporter import (
    build_export_dict,
    export_registry_json,
    serialize_registry_to_json_string,
)

__all__ = [
    "build_export_dict",
    "export_registry_json",
    "serialize_registry_to_json_string",
]
