# src/gedcom_tree/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from gedcom_tree.logging import get_logger
from gedcom_tree.utils.pointers import strip_pointer

from .tokenizer import Token, tokenize_lines

log = get_logger(__name__)


@dataclass
class GEDCOMNode:
    """
    One line of a GEDCOM file placed in the tree.

    Nodes live in the arena of their owning GEDCOMTree; ``children`` holds
    arena indices, in file order.

    Attributes:
        index: Position of this node in ``GEDCOMTree.nodes``.
        level: GEDCOM level number.
        tag: The GEDCOM tag (INDI, BIRT, DATE, NOTE, ...).
        value: Trimmed line payload.
        pointer: Optional @XREF@ pointer declared on this line.
        lineno: Line number in the original input (for debugging).
        children: Arena indices of direct children.
    """

    index: int
    level: int
    tag: str
    value: str = ""
    pointer: Optional[str] = None
    lineno: int = 0
    children: List[int] = field(default_factory=list)

    @property
    def xref_id(self) -> Optional[str]:
        return strip_pointer(self.pointer) if self.pointer else None

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GEDCOMNode #{self.index} {self.level}{ptr} {self.tag}: {self.value!r}>"


@dataclass
class GEDCOMTree:
    """
    Arena-backed forest produced from a GEDCOM token stream.

    Attributes:
        nodes:
            Every node, in file order. A node's position is its ``index``.
        roots:
            Indices of nodes that had no open ancestor when they were read
            (normally the level-0 records).
        xrefs:
            Cross-reference index: bare identifier (``I1``) -> node index.
            A later declaration of the same identifier replaces the earlier
            one.
    """

    nodes: List[GEDCOMNode] = field(default_factory=list)
    roots: List[int] = field(default_factory=list)
    xrefs: Dict[str, int] = field(default_factory=dict)

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[GEDCOMNode]:
        return iter(self.records)

    def node(self, index: int) -> GEDCOMNode:
        return self.nodes[index]

    @property
    def records(self) -> List[GEDCOMNode]:
        """Root nodes in file order."""
        return [self.nodes[i] for i in self.roots]

    def children(self, node: GEDCOMNode) -> List[GEDCOMNode]:
        return [self.nodes[i] for i in node.children]

    def child_nodes_by_tag(self, node: GEDCOMNode, tag: str) -> List[GEDCOMNode]:
        """Return all direct children of ``node`` with the given tag."""
        return [c for c in self.children(node) if c.tag == tag]

    def iter_subtree(self, node: GEDCOMNode) -> Iterator[GEDCOMNode]:
        """Yield ``node`` and all its descendants in depth-first order."""
        stack = [node.index]
        while stack:
            current = self.nodes[stack.pop()]
            yield current
            stack.extend(reversed(current.children))

    def iter_nodes(self) -> Iterator[GEDCOMNode]:
        """Iterate over every node, roots first, depth-first."""
        for root in self.records:
            yield from self.iter_subtree(root)

    # ------------------------------------------------------------------ #
    # Cross-reference index
    # ------------------------------------------------------------------ #

    def find_by_xref(self, xref_id: str) -> Optional[GEDCOMNode]:
        """
        Return the node declaring ``xref_id`` (``I1`` or ``@I1@``), if any.
        """
        if not xref_id:
            return None
        index = self.xrefs.get(strip_pointer(xref_id))
        return None if index is None else self.nodes[index]

    def iter_xref_nodes(self) -> Iterator[Tuple[str, GEDCOMNode]]:
        """Yield ``(xref_id, node)`` for every entry of the index."""
        for xref_id, index in self.xrefs.items():
            yield xref_id, self.nodes[index]

    def find_records_by_tag(self, tag: str) -> List[GEDCOMNode]:
        """Return all root records with the given tag (case-insensitive)."""
        if not tag:
            return []
        t = tag.upper()
        return [n for n in self.records if n.tag.upper() == t]

    # ------------------------------------------------------------------ #
    # Re-serialization
    # ------------------------------------------------------------------ #

    def subtree_lines(self, node: GEDCOMNode, *, relative: bool = True) -> List[str]:
        """
        Render ``node`` and its descendants back into leveled GEDCOM lines.

        With ``relative=True`` the subtree root is written at level 0 and
        descendants by their depth below it; otherwise original levels are
        kept. Parsing the result yields an isomorphic tree.
        """
        lines: List[str] = []

        def emit(current: GEDCOMNode, depth: int) -> None:
            level = depth if relative else current.level
            parts = [str(level)]
            if current.pointer:
                parts.append(current.pointer)
            parts.append(current.tag)
            if current.value:
                parts.append(current.value)
            lines.append(" ".join(parts))
            for child in self.children(current):
                emit(child, depth + 1)

        emit(node, 0)
        return lines

    def __repr__(self) -> str:
        return f"<GEDCOMTree nodes={len(self.nodes)} roots={len(self.roots)} xrefs={len(self.xrefs)}>"


def build_tree(tokens: Iterable[Token]) -> GEDCOMTree:
    """
    Build a GEDCOMTree from a token stream with a level stack.

    For each token the stack is popped while its top has a level >= the new
    node's level. The node then becomes a root (empty stack) or the last
    child of the stack top, and is pushed. A level jump of more than one is
    tolerated: the node simply hangs under the nearest open lower level.
    """
    tree = GEDCOMTree()
    stack: List[GEDCOMNode] = []

    for tok in tokens:
        node = GEDCOMNode(
            index=len(tree.nodes),
            level=tok.level,
            tag=tok.tag,
            value=tok.value,
            pointer=tok.pointer,
            lineno=tok.lineno,
        )
        tree.nodes.append(node)

        xref_id = node.xref_id
        if xref_id:
            if xref_id in tree.xrefs:
                log.debug(
                    "Duplicate xref %s at line %d replaces line %d",
                    xref_id,
                    node.lineno,
                    tree.nodes[tree.xrefs[xref_id]].lineno,
                )
            tree.xrefs[xref_id] = node.index

        while stack and stack[-1].level >= node.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node.index)
        else:
            tree.roots.append(node.index)

        stack.append(node)

    log.debug("Built %r", tree)
    return tree


def parse_lines(lines: Iterable[str]) -> GEDCOMTree:
    """Tokenize raw lines and build the tree in one call."""
    return build_tree(tokenize_lines(lines))
