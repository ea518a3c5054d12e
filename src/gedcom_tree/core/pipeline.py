from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from gedcom_tree.config import get_config
from gedcom_tree.core.context import ParseContext
from gedcom_tree.core.exceptions import ParseExecutionError
from gedcom_tree.loader.tokenizer import tokenize_file, tokenize_lines
from gedcom_tree.loader.tree_builder import GEDCOMTree, build_tree
from gedcom_tree.logging import get_logger
from gedcom_tree.registry.build_registry import build_registry
from gedcom_tree.registry.entities import GedcomRegistry


@dataclass
class GedcomDocument:
    """Everything one parse produces: the node tree and the record maps."""

    tree: GEDCOMTree
    registry: GedcomRegistry


class Pipeline:
    """
    Orchestrates the GEDCOM parsing pipeline:

        lines -> tokens -> tree -> {entities, notes/sources}

    No business logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self, lines: Optional[Iterable[str]] = None) -> GedcomDocument:
        """
        Parse ``lines`` if given, otherwise the context's ``input_path``.
        """
        self.log.info("Pipeline starting")

        try:
            if lines is not None:
                tokens = list(tokenize_lines(lines))
            else:
                if not self.ctx.input_path:
                    raise ParseExecutionError("No input path and no lines given")
                tokens = list(tokenize_file(self.ctx.input_path))

            tree = build_tree(tokens)
            registry = build_registry(tree, conc_inline=self.ctx.config.conc_inline)

        except ParseExecutionError:
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc

        self.ctx.stats.update(
            {
                "tokens": len(tokens),
                "nodes": len(tree.nodes),
                "records": len(tree.roots),
                **registry.counts(),
            }
        )
        self.log.info("Pipeline completed successfully: %s", self.ctx.stats)

        return GedcomDocument(tree=tree, registry=registry)


def _make_context(input_path: Optional[str] = None) -> ParseContext:
    cfg = get_config()
    return ParseContext(
        config=cfg,
        logger=get_logger("pipeline"),
        input_path=input_path,
        debug=cfg.debug,
    )


def parse_gedcom(path: Union[str, Path]) -> GedcomDocument:
    """Parse a GEDCOM file end to end."""
    return Pipeline(_make_context(str(path))).run()


def parse_gedcom_lines(lines: Iterable[str]) -> GedcomDocument:
    """Parse already-read GEDCOM lines end to end."""
    return Pipeline(_make_context()).run(lines)
