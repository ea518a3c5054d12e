# src/gedcom_tree/pedigree/ancestors.py

"""
Ancestor (pedigree) resolution.

Starting from one individual, follow ``famc`` to the family in which they
are a child, then into that family's husband and wife, one generation back
per step. Walking stops at a missing/unknown family, an empty parent
reference, or a parent id absent from the individual map.

The ids on the current descent path are tracked; meeting one of them again
raises CyclicAncestryError. Reaching the same ancestor along two different
lines (pedigree collapse) is allowed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Tuple

from gedcom_tree.core.exceptions import CyclicAncestryError, UnknownIndividualError
from gedcom_tree.logging import get_logger
from gedcom_tree.registry.entities import Family, Individual

log = get_logger(__name__)

ROLE_SELF = "self"
ROLE_FATHER = "father"
ROLE_MOTHER = "mother"


@dataclass
class PedigreeNode:
    individual: Individual
    depth: int
    role: str = ROLE_SELF
    parents: List["PedigreeNode"] = field(default_factory=list)

    @property
    def individual_id(self) -> str:
        return self.individual.id

    def iter_nodes(self) -> Iterator["PedigreeNode"]:
        """Pre-order: self, then father's line, then mother's line."""
        yield self
        for parent in self.parents:
            yield from parent.iter_nodes()

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_nodes())


def parents_of(
    individual: Individual,
    individuals: Mapping[str, Individual],
    families: Mapping[str, Family],
) -> List[Tuple[str, Individual]]:
    """
    Return ``[(role, parent), ...]`` for ``individual``, husband first.

    Unresolvable links are dropped silently.
    """
    if not individual.famc:
        return []

    family = families.get(individual.famc)
    if family is None:
        log.debug("FAMC %s of %s is not a known family", individual.famc, individual.id)
        return []

    result: List[Tuple[str, Individual]] = []
    for role, parent_id in ((ROLE_FATHER, family.husband_id), (ROLE_MOTHER, family.wife_id)):
        if not parent_id:
            continue
        parent = individuals.get(parent_id)
        if parent is None:
            log.debug("Parent %s in family %s is not a known individual", parent_id, family.id)
            continue
        result.append((role, parent))
    return result


def iter_ancestors(
    start_id: str,
    individuals: Mapping[str, Individual],
    families: Mapping[str, Family],
    *,
    max_depth: Optional[int] = None,
) -> Iterator[Tuple[int, str, Individual]]:
    """
    Lazily yield ``(depth, role, individual)`` in pedigree pre-order.

    The starting individual comes first at depth 0 with role ``self``.
    Uses an explicit stack, so deep pedigrees do not hit the recursion limit.

    Raises:
        UnknownIndividualError: ``start_id`` is not in ``individuals``.
        CyclicAncestryError: an individual is reached again below itself.
    """
    start = individuals.get(start_id)
    if start is None:
        raise UnknownIndividualError(start_id)

    # Each entry carries the descent path leading to it (root first).
    stack: List[Tuple[Individual, int, str, Tuple[str, ...]]] = [
        (start, 0, ROLE_SELF, (start.id,))
    ]

    while stack:
        individual, depth, role, path = stack.pop()
        yield depth, role, individual

        if max_depth is not None and depth >= max_depth:
            continue

        pending = []
        for parent_role, parent in parents_of(individual, individuals, families):
            if parent.id in path:
                raise CyclicAncestryError(path + (parent.id,))
            pending.append((parent, depth + 1, parent_role, path + (parent.id,)))

        # Reverse so the father's line is yielded before the mother's.
        stack.extend(reversed(pending))


def build_pedigree(
    start_id: str,
    individuals: Mapping[str, Individual],
    families: Mapping[str, Family],
    *,
    max_depth: Optional[int] = None,
) -> PedigreeNode:
    """
    Materialize the pedigree of ``start_id`` as a PedigreeNode tree.

    Same termination and error rules as ``iter_ancestors``.
    """
    walk = iter_ancestors(start_id, individuals, families, max_depth=max_depth)

    # The walk always yields the starting individual first, at depth 0.
    depth, role, individual = next(walk)
    root = PedigreeNode(individual=individual, depth=depth, role=role)

    # open_nodes[d] is the most recent node yielded at depth d.
    open_nodes: List[PedigreeNode] = [root]

    for depth, role, individual in walk:
        node = PedigreeNode(individual=individual, depth=depth, role=role)
        del open_nodes[depth:]
        open_nodes[-1].parents.append(node)
        open_nodes.append(node)

    return root
