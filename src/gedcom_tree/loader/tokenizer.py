# src/gedcom_tree/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from gedcom_tree.logging import get_logger
from gedcom_tree.utils.pointers import is_pointer, strip_pointer

log = get_logger(__name__)


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original input (0 if unknown).
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier as written, e.g. "@I1@".
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NOTE", "CONT".
        value: Line payload, trimmed at both ends (may be empty).
        raw: The original line content without trailing newline characters.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str

    @property
    def xref_id(self) -> Optional[str]:
        """The pointer without its ``@`` delimiters, or None."""
        return strip_pointer(self.pointer) if self.pointer else None


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Accepted shape:
        <level> [<pointer>] <tag> [<value>]

    The value keeps its internal whitespace exactly; only the ends are
    trimmed.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "0 @N1@ NOTE First line"
    """
    raw = _strip_eol(line)

    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    if not raw.strip():
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    # --- 1. Level ---------------------------------------------------------
    fields = raw.split(None, 1)
    level_str = fields[0]
    # isdigit() alone also accepts characters such as "²" that int() rejects.
    if not (level_str.isascii() and level_str.isdigit()):
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )
    level = int(level_str)

    if len(fields) == 1:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag (only level found) -> {raw!r}"
        )

    # --- 2. Optional pointer, then tag and value ---------------------------
    # str.split(None, n) leaves the remainder with its leading whitespace
    # removed and internal whitespace untouched.
    rest = fields[1].split(None, 1)
    pointer: Optional[str] = None

    if is_pointer(rest[0]):
        pointer = rest[0]
        if len(rest) == 1:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but no tag -> {raw!r}"
            )
        rest = rest[1].split(None, 1)

    tag = rest[0]
    value = rest[1].strip() if len(rest) > 1 else ""

    return Token(
        lineno=lineno,
        level=level,
        pointer=pointer,
        tag=tag,
        value=value,
        raw=raw,
    )


def tokenize_lines(lines: Iterable[str]) -> Iterator[Token]:
    """
    Yield a Token for every parseable line.

    Blank and malformed lines are skipped; a rejected line never stops the
    stream.
    """
    for lineno, raw_line in enumerate(lines, start=1):
        stripped = _strip_eol(raw_line)

        if not stripped.strip():
            continue

        try:
            yield tokenize_line(stripped, lineno=lineno)
        except GedcomSyntaxError as exc:
            log.debug("Skipping unparseable line: %s", exc)


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """
    Yield Token objects for every parseable line in the given file.

    Raises:
        FileNotFoundError: if `path` does not exist.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        yield from tokenize_lines(f)
