from __future__ import annotations

import pytest

from gedcom_tree.core.exceptions import CyclicAncestryError, UnknownIndividualError
from gedcom_tree.loader import parse_lines
from gedcom_tree.pedigree import build_pedigree, iter_ancestors, parents_of
from gedcom_tree.registry import Family, Individual, extract_entities


def _maps(gedcom_lines, text):
    return extract_entities(parse_lines(gedcom_lines(text)))


def test_scenario_two_parents_then_stop(gedcom_lines):
    individuals, families = _maps(gedcom_lines, """
        0 @I1@ INDI
        1 FAMC @F1@
        0 @I2@ INDI
        0 @I3@ INDI
        0 @F1@ FAM
        1 HUSB @I2@
        1 WIFE @I3@
        1 CHIL @I1@
    """)

    root = build_pedigree("I1", individuals, families)

    assert len(root) == 3
    assert [(n.individual_id, n.depth, n.role) for n in root.iter_nodes()] == [
        ("I1", 0, "self"),
        ("I2", 1, "father"),
        ("I3", 1, "mother"),
    ]
    assert all(p.parents == [] for p in root.parents)


def test_scenario_cycle_raises(gedcom_lines):
    individuals, families = _maps(gedcom_lines, """
        0 @A@ INDI
        1 FAMC @F1@
        0 @F1@ FAM
        1 HUSB @A@
    """)

    with pytest.raises(CyclicAncestryError) as excinfo:
        build_pedigree("A", individuals, families)

    assert excinfo.value.chain == ["A", "A"]


def test_longer_cycle_raises_from_lazy_walk():
    individuals = {
        "I1": Individual(id="I1", famc="F1"),
        "I2": Individual(id="I2", famc="F2"),
    }
    families = {
        "F1": Family(id="F1", wife_id="I2"),
        "F2": Family(id="F2", husband_id="I1"),
    }

    walk = iter_ancestors("I1", individuals, families)
    assert next(walk)[2].id == "I1"
    assert next(walk)[2].id == "I2"
    with pytest.raises(CyclicAncestryError) as excinfo:
        next(walk)
    assert excinfo.value.chain == ["I1", "I2", "I1"]


def test_pedigree_collapse_is_not_a_cycle():
    # I1's parents are first cousins sharing grandparents G1/G2.
    individuals = {
        "I1": Individual(id="I1", famc="F1"),
        "P1": Individual(id="P1", famc="FA"),
        "P2": Individual(id="P2", famc="FB"),
        "A": Individual(id="A", famc="FG"),
        "B": Individual(id="B", famc="FG"),
        "G1": Individual(id="G1"),
        "G2": Individual(id="G2"),
    }
    families = {
        "F1": Family(id="F1", husband_id="P1", wife_id="P2"),
        "FA": Family(id="FA", husband_id="A"),
        "FB": Family(id="FB", wife_id="B"),
        "FG": Family(id="FG", husband_id="G1", wife_id="G2"),
    }

    ids = [ind.id for _, _, ind in iter_ancestors("I1", individuals, families)]
    assert ids == ["I1", "P1", "A", "G1", "G2", "P2", "B", "G1", "G2"]


def test_dead_ends_are_not_errors():
    individuals = {
        "I1": Individual(id="I1", famc="F1"),
        "I2": Individual(id="I2", famc="F404"),
    }
    families = {"F1": Family(id="F1", husband_id="I2", wife_id="I999")}

    root = build_pedigree("I1", individuals, families)

    assert [n.individual_id for n in root.iter_nodes()] == ["I1", "I2"]


def test_empty_famc_has_no_parents():
    ind = Individual(id="I1", famc="")
    assert parents_of(ind, {"I1": ind}, {}) == []


def test_max_depth_limits_generations():
    individuals = {
        "I1": Individual(id="I1", famc="F1"),
        "I2": Individual(id="I2", famc="F2"),
        "I3": Individual(id="I3"),
    }
    families = {
        "F1": Family(id="F1", husband_id="I2"),
        "F2": Family(id="F2", husband_id="I3"),
    }

    assert len(build_pedigree("I1", individuals, families, max_depth=1)) == 2
    assert len(build_pedigree("I1", individuals, families)) == 3


def test_unknown_start_raises():
    with pytest.raises(UnknownIndividualError):
        build_pedigree("nobody", {}, {})

    with pytest.raises(LookupError):
        list(iter_ancestors("nobody", {}, {}))


def test_deep_pedigree_does_not_hit_recursion_limit():
    depth = 1500
    individuals = {f"I{n}": Individual(id=f"I{n}", famc=f"F{n}") for n in range(depth)}
    individuals[f"I{depth}"] = Individual(id=f"I{depth}")
    families = {f"F{n}": Family(id=f"F{n}", husband_id=f"I{n + 1}") for n in range(depth)}

    last = None
    for last in iter_ancestors("I0", individuals, families):
        pass

    assert last[0] == depth
    assert last[2].id == f"I{depth}"


def test_pedigree_of_individual_without_parents_is_root_only():
    individuals = {
        "I1": Individual(id="I1", famc="F1"),
        "I2": Individual(id="I2"),
    }
    families = {"F1": Family(id="F1", husband_id="I2")}

    lone = build_pedigree("I2", individuals, families)
    assert (lone.individual_id, lone.depth, lone.role, lone.parents) == ("I2", 0, "self", [])

    capped = build_pedigree("I1", individuals, families, max_depth=0)
    assert len(capped) == 1
    assert capped.individual_id == "I1"
