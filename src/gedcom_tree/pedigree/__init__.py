from __future__ import annotations

from .ancestors import (
    ROLE_FATHER,
    ROLE_MOTHER,
    ROLE_SELF,
    PedigreeNode,
    build_pedigree,
    iter_ancestors,
    parents_of,
)

__all__ = [
    "ROLE_FATHER",
    "ROLE_MOTHER",
    "ROLE_SELF",
    "PedigreeNode",
    "build_pedigree",
    "iter_ancestors",
    "parents_of",
]
