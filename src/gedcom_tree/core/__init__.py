from __future__ import annotations

from .context import ParseContext
from .exceptions import (
    CyclicAncestryError,
    ParseExecutionError,
    PipelineError,
    UnknownIndividualError,
)

__all__ = [
    "CyclicAncestryError",
    "ParseContext",
    "ParseExecutionError",
    "PipelineError",
    "UnknownIndividualError",
]
