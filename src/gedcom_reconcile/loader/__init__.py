# src/gedcom_reconcile/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_reconcile.loader import (
        Token,
        GedcomSyntaxError,
        tokenize_line,
        tokenize_lines,
        tokenize_text,
        read_gedcom_text,
        resolve_input_path,
    )
"""

from __future__ import annotations

from .file_loader import read_gedcom_text
from .file_locator import resolve_input_path
from .tokenizer import GedcomSyntaxError, Token, tokenize_line, tokenize_lines, tokenize_text

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_text",
    "read_gedcom_text",
    "resolve_input_path",
]
