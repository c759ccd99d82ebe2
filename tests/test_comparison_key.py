# tests/test_comparison_key.py

from __future__ import annotations

from gedcom_reconcile.matching import KeyOptions, comparison_key
from gedcom_reconcile.matching.keys import canonical_place, letters_only
from gedcom_reconcile.records import BirthDetails, IndividualRecord, parse_individuals


def make_person(name="John Doe", sex=None, date=None, place=None, record_id="I1"):
    details = {}
    if sex is not None:
        details["Sex"] = sex
    if date is not None or place is not None:
        details["Birth"] = BirthDetails(date=date or "", place=place or "")
    return IndividualRecord(id=record_id, name=name, details=details)


def test_key_parts_and_delimiter() -> None:
    person = make_person("John Doe", "m", "1 Jan 1900", "London, England")
    assert comparison_key(person) == "JOHNDOE|M|1 JAN 1900|LONDONENGLAND"


def test_name_is_case_and_punctuation_insensitive() -> None:
    keys = {letters_only(n) for n in ("O'Brien", "OBRIEN", "obrien ")}
    assert keys == {"OBRIEN"}


def test_missing_fields_become_empty_parts() -> None:
    assert comparison_key(make_person("Jane Smith")) == "JANESMITH|||"


def test_unknown_written_by_parser_is_canonicalized_as_text() -> None:
    (person,) = parse_individuals("0 @I1@ INDI\n1 NAME Ann\n1 BIRT\n")
    assert comparison_key(person) == "ANN||UNKNOWN|UNKNOWN"


def test_place_loses_digits_by_default() -> None:
    a = make_person(place="12 High Street")
    b = make_person(place="14 High Street")
    assert comparison_key(a) == comparison_key(b)


def test_strict_place_keeps_digits() -> None:
    options = KeyOptions(strict_place=True)
    a = make_person(place="12 High Street")
    b = make_person(place="14  high street")
    assert comparison_key(a, options) != comparison_key(b, options)
    assert canonical_place(" 14  high street ", strict=True) == "14 HIGH STREET"


def test_custom_delimiter() -> None:
    person = make_person("Ann", "F")
    assert comparison_key(person, KeyOptions(delimiter="::")) == "ANN::F::::"


def test_date_keeps_digits_and_spaces() -> None:
    a = make_person(date="1 JAN 1900")
    b = make_person(date="1 JAN 1901")
    assert comparison_key(a) != comparison_key(b)
