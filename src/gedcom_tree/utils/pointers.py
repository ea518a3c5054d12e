# src/gedcom_tree/utils/pointers.py

from __future__ import annotations

from typing import Optional

POINTER_DELIMITER = "@"


def is_pointer(token: Optional[str]) -> bool:
    """
    Return True if ``token`` is a delimited cross-reference such as ``@I1@``.

    A lone ``@`` or ``@@`` is not a pointer.
    """
    if not token or len(token) <= 2:
        return False
    return token.startswith(POINTER_DELIMITER) and token.endswith(POINTER_DELIMITER)


def strip_pointer(token: Optional[str]) -> str:
    """
    Return the bare identifier for a delimited pointer (``@I1@`` -> ``I1``).

    Anything that is not a pointer (inline text, empty values) is returned
    trimmed but otherwise unchanged.
    """
    if token is None:
        return ""
    t = token.strip()
    if is_pointer(t):
        return t[1:-1]
    return t
