"""
keys.py
Comparison keys for cross-file matching.

A key is built from human-meaningful data only:

    NAME | SEX | BIRTH DATE | BIRTH PLACE

so that ``John /Doe/`` born ``1 JAN 1900`` in ``London`` carries the same key
in any file, whatever xref id the exporting program assigned to him.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from gedcom_reconcile.records.models import BIRTH, SEX

_NON_LETTERS = re.compile(r"[^A-Z]")


@dataclass(frozen=True)
class KeyOptions:
    """
    delimiter: separator placed between the four key parts.
    strict_place: keep digits and punctuation in birth places instead of
        reducing them to letters (``"12 High St"`` vs ``"14 High St"``).
    """
    delimiter: str = "|"
    strict_place: bool = False


DEFAULT_KEY_OPTIONS = KeyOptions()


def letters_only(value: Optional[str]) -> str:
    """Uppercase and drop every character outside A-Z (``"O'Brien"`` -> ``"OBRIEN"``)."""
    if not value:
        return ""
    return _NON_LETTERS.sub("", value.upper())


def upper_or_empty(value: Optional[str]) -> str:
    return value.upper() if value else ""


def canonical_place(value: Optional[str], strict: bool = False) -> str:
    if not value:
        return ""
    if strict:
        return " ".join(value.upper().split())
    return letters_only(value)


def comparison_key(record: Any, options: KeyOptions = DEFAULT_KEY_OPTIONS) -> str:
    """
    Build the comparison key of an individual record.

    Works on anything shaped like ``IndividualRecord`` (``name`` plus a
    ``details`` mapping). Missing fields contribute an empty part.
    """
    details = getattr(record, "details", None) or {}
    birth = details.get(BIRTH)

    parts = (
        letters_only(getattr(record, "name", None)),
        upper_or_empty(details.get(SEX)),
        upper_or_empty(getattr(birth, "date", None)),
        canonical_place(getattr(birth, "place", None), strict=options.strict_place),
    )
    return options.delimiter.join(parts)
