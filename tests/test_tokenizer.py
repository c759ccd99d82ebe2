# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_reconcile.loader import GedcomSyntaxError, tokenize_line, tokenize_text


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_with_value_is_trimmed() -> None:
    token = tokenize_line("  2 PLAC   London, England  \r", lineno=7)
    assert token.level == 2
    assert token.tag == "PLAC"
    assert token.value == "London, England"
    assert token.raw == "2 PLAC   London, England"


def test_tokenize_line_with_bom() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_line_pointer_without_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 @I1@", lineno=1)


def test_tokenize_text_skips_blank_and_malformed_lines() -> None:
    text = "0 HEAD\n\nnot a gedcom line\n0 @I1@ INDI\r\n1 NAME John /Doe/\n"
    tokens = list(tokenize_text(text))

    assert [t.tag for t in tokens] == ["HEAD", "INDI", "NAME"]
    # line numbers refer to the original text
    assert [t.lineno for t in tokens] == [1, 4, 5]
