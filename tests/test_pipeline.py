from __future__ import annotations

import pytest

from gedcom_tree import parse_gedcom, parse_gedcom_lines
from gedcom_tree.config import get_config
from gedcom_tree.core import ParseContext, ParseExecutionError
from gedcom_tree.core.pipeline import Pipeline
from gedcom_tree.logging import get_logger
from gedcom_tree.utils import mock_file_path


def test_parse_gedcom_end_to_end():
    document = parse_gedcom(mock_file_path("family.ged"))

    assert len(document.tree.roots) == 13
    assert document.registry.individuals["I5"].notes == ["Inline note about Emma"]


def test_parse_gedcom_lines(gedcom_lines):
    document = parse_gedcom_lines(gedcom_lines("""
        0 @I1@ INDI
        1 NAME John /Doe/
        1 SEX M
    """))

    ind = document.registry.individuals["I1"]
    assert (ind.name, ind.sex, ind.events) == ("John /Doe/", "M", [])


def test_non_ascii_digit_level_does_not_abort_document():
    document = parse_gedcom_lines(["0 @I1@ INDI", "² NAME bad", "1 SEX M"])

    ind = document.registry.individuals["I1"]
    assert (ind.name, ind.sex) == ("", "M")


def test_pipeline_records_stats():
    ctx = ParseContext(
        config=get_config(),
        logger=get_logger("test_pipeline"),
        input_path=str(mock_file_path("family.ged")),
    )

    Pipeline(ctx).run()

    assert ctx.stats["nodes"] == 62
    assert ctx.stats["records"] == 13
    assert ctx.stats["individuals"] == 6
    assert ctx.stats["families"] == 3


def test_missing_input_is_wrapped(tmp_path):
    with pytest.raises(ParseExecutionError) as excinfo:
        parse_gedcom(tmp_path / "missing.ged")

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_pipeline_without_input_fails():
    ctx = ParseContext(config=get_config(), logger=get_logger("test_pipeline"))

    with pytest.raises(ParseExecutionError):
        Pipeline(ctx).run()
