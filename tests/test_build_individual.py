from __future__ import annotations

import pytest

from gedcom_tree.events import Event
from gedcom_tree.loader import parse_lines
from gedcom_tree.registry.build_individual import build_individual


def test_scenario_name_and_sex_without_events(gedcom_lines):
    tree = parse_lines(gedcom_lines("""
        0 @I1@ INDI
        1 NAME John /Doe/
        1 SEX M
    """))

    ind = build_individual(tree, tree.records[0])

    assert ind.id == "I1"
    assert ind.name == "John /Doe/"
    assert ind.sex == "M"
    assert ind.events == []


def test_build_individual_full(gedcom_lines):
    tree = parse_lines(gedcom_lines("""
        0 @I3@ INDI
        1 NAME Jane /Roe/
        1 SEX F
        1 BIRT
        2 DATE 2 FEB 1902
        2 PLAC Dublin
        1 OCCU Weaver
        1 DEAT
        2 DATE 1980
        1 FAMC @F1@
        1 FAMS @F2@
        1 FAMS @F3@
        1 NOTE @N1@
        1 NOTE Remembered for her garden
        1 SOUR @S1@
    """))

    ind = build_individual(tree, tree.records[0])

    assert ind.events == [
        Event(type="BIRT", date="2 FEB 1902", place="Dublin"),
        Event(type="DEAT", date="1980", place=""),
    ]
    assert ind.famc == "F1"
    assert ind.fams == ["F2", "F3"]
    assert ind.notes == ["N1", "Remembered for her garden"]
    assert ind.sources == ["S1"]


def test_missing_single_valued_fields_are_empty_strings(gedcom_lines):
    tree = parse_lines(gedcom_lines("""
        0 @I9@ INDI
    """))

    ind = build_individual(tree, tree.records[0])

    assert ind.name == ""
    assert ind.sex == ""
    assert ind.famc == ""
    assert ind.fams == []
    assert ind.notes == []
    assert ind.sources == []


def test_repeated_single_valued_tags_last_wins(gedcom_lines):
    tree = parse_lines(gedcom_lines("""
        0 @I1@ INDI
        1 NAME Birth /Name/
        1 NAME Married /Name/
        1 FAMC @F1@
        1 FAMC @F2@
    """))

    ind = build_individual(tree, tree.records[0])

    assert ind.name == "Married /Name/"
    assert ind.famc == "F2"


def test_build_individual_rejects_other_tags(gedcom_lines):
    tree = parse_lines(gedcom_lines("""
        0 @F1@ FAM
    """))

    with pytest.raises(ValueError):
        build_individual(tree, tree.records[0])
