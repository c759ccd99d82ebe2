# src/gedcom_reconcile/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from gedcom_reconcile.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "NAME", "BIRT", "DATE".
        value: The line payload with surrounding whitespace removed (may be empty).
        raw: The original line content, stripped.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line does not follow ``<level> [<pointer>] <tag> [<value>]``."""


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    The line is split on whitespace runs in the required order:
        <level> [<pointer>] <tag> [<value>]

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 PLAC London, England"
    """
    raw = line.lstrip("\ufeff").strip()
    if not raw:
        raise GedcomSyntaxError(f"Line {lineno}: empty or whitespace-only line")

    # --- 1. Level ---------------------------------------------------------
    parts = raw.split(None, 1)
    if len(parts) == 1:
        raise GedcomSyntaxError(f"Line {lineno}: missing tag (only level found) -> {raw!r}")

    level_str, rest = parts
    if not (level_str.isascii() and level_str.isdigit()):
        raise GedcomSyntaxError(f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}")

    # --- 2. Optional pointer ---------------------------------------------
    pointer: Optional[str] = None
    if rest.startswith("@"):
        ptr_parts = rest.split(None, 1)
        if len(ptr_parts) == 1:
            raise GedcomSyntaxError(f"Line {lineno}: pointer present but no tag -> {raw!r}")
        pointer, rest = ptr_parts

    # --- 3. Tag and optional value ---------------------------------------
    tag_parts = rest.split(None, 1)
    tag = tag_parts[0]
    value = tag_parts[1].strip() if len(tag_parts) == 2 else ""

    return Token(
        lineno=lineno,
        level=int(level_str),
        pointer=pointer,
        tag=tag,
        value=value,
        raw=raw,
    )


def tokenize_lines(lines: Iterable[str]) -> Iterator[Token]:
    """
    Yield a Token for every line that can be tokenized.

    Blank lines are skipped. Lines that fail ``tokenize_line`` are logged at
    DEBUG and skipped.
    """
    skipped = 0
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield tokenize_line(line, lineno=lineno)
        except GedcomSyntaxError as exc:
            skipped += 1
            log.debug(f"Skipping line: {exc}")

    if skipped:
        log.debug(f"Skipped {skipped} malformed line(s)")


def tokenize_text(text: str) -> Iterator[Token]:
    """Tokenize a whole GEDCOM document held in memory."""
    return tokenize_lines(text.split("\n"))
