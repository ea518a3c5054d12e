from __future__ import annotations

from typing import Sequence


class PipelineError(Exception):
    """Base exception for gedcom-tree failures."""


class ParseExecutionError(PipelineError):
    """Raised when parsing an input source fails as a whole."""


class UnknownIndividualError(PipelineError, LookupError):
    """Raised when a query starts from an id missing from the individual map."""

    def __init__(self, individual_id: str):
        super().__init__(f"Unknown individual: {individual_id}")
        self.individual_id = individual_id


class CyclicAncestryError(PipelineError):
    """
    Raised when an individual turns out to be their own ancestor.

    ``chain`` is the descent path from the starting individual to the
    repeated id, inclusive at both ends.
    """

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__("Cyclic ancestry: " + " -> ".join(self.chain))
