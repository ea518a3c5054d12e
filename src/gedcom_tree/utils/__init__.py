# src/gedcom_tree/utils/__init__.py

from .pathing import (
    mock_file_path,
    project_root,
    resolve_project_path,
)
from .pointers import is_pointer, strip_pointer

__all__ = [
    "is_pointer",
    "mock_file_path",
    "project_root",
    "resolve_project_path",
    "strip_pointer",
]
