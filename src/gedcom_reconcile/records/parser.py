"""
parser.py
INDI record extraction from GEDCOM text.

Only a small subset of the grammar is understood:

    0 @I1@ INDI
    1 NAME John /Doe/
    1 SEX M
    1 BIRT
    2 DATE 1 JAN 1900
    2 PLAC London

Everything else is tolerated and ignored, so the parser never fails on
real-world files; an input without INDI records simply yields ``()``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from gedcom_reconcile.loader.file_loader import read_gedcom_text
from gedcom_reconcile.loader.tokenizer import Token, tokenize_text
from gedcom_reconcile.logging import get_logger

from .models import BIRTH, SEX, BirthDetails, IndividualRecord

log = get_logger(__name__)

_INDI_POINTER = re.compile(r"^@(\w+)@$", re.ASCII)
_TAG = re.compile(r"^\w+$", re.ASCII)


def _individual_id(token: Token) -> Optional[str]:
    """Return the xref id when ``token`` is an ``0 @<id>@ INDI`` line."""
    if token.level != 0 or token.tag != "INDI" or token.value or not token.pointer:
        return None
    match = _INDI_POINTER.match(token.pointer)
    return match.group(1) if match else None


def parse_tokens(tokens: Iterable[Token], close_scopes: bool = False) -> Tuple[IndividualRecord, ...]:
    """
    Build individual records from a token stream.

    Scan state is the record currently open and the Birth details currently
    receiving DATE/PLAC lines. Only an INDI line resets that state, so by
    default a ``2 DATE`` under ``1 DEAT`` (or under a later family's
    ``1 MARR``) overwrites the open birth date. A repeated INDI id replaces
    the earlier record but keeps its first-seen position.

    ``close_scopes=True`` follows the hierarchy instead: any other level-0
    line closes the open record and any level-1 line other than BIRT closes
    the Birth details.
    """
    people: Dict[str, IndividualRecord] = {}
    current: Optional[IndividualRecord] = None
    birth: Optional[BirthDetails] = None

    for token in tokens:
        record_id = _individual_id(token)
        if record_id is not None:
            if record_id in people:
                log.debug(f"Line {token.lineno}: duplicate INDI id {record_id!r} replaces earlier record")
            current = IndividualRecord(id=record_id)
            people[record_id] = current
            birth = None
            continue

        if token.level == 0:
            if close_scopes:
                current, birth = None, None
            continue

        if current is None or token.pointer is not None or not _TAG.match(token.tag):
            continue

        if token.level == 1:
            if close_scopes:
                birth = None
            if token.tag == "NAME":
                current.name = token.value.replace("/", "").strip()
            elif token.tag == "SEX":
                current.details[SEX] = token.value
            elif token.tag == "BIRT":
                birth = BirthDetails()
                current.details[BIRTH] = birth
        elif token.level == 2 and birth is not None:
            if token.tag == "DATE":
                birth.date = token.value
            elif token.tag == "PLAC":
                birth.place = token.value

    return tuple(people.values())


def parse_individuals(text: str, close_scopes: bool = False) -> Tuple[IndividualRecord, ...]:
    """Parse GEDCOM text into individual records, in first-seen order."""
    records = parse_tokens(tokenize_text(text), close_scopes=close_scopes)
    log.debug(f"Parsed {len(records)} individual(s)")
    return records


def load_individuals(path: Union[str, Path], close_scopes: bool = False) -> Tuple[IndividualRecord, ...]:
    """Read a GEDCOM file from disk and parse its individuals."""
    records = parse_individuals(read_gedcom_text(path), close_scopes=close_scopes)
    log.info(f"{Path(path).name}: {len(records)} individual(s)")
    return records
