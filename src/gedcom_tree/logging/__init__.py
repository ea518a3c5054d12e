"""
Logging package for ``gedcom_tree``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers.
"""

from .logger import get_logger

__all__ = ["get_logger"]
