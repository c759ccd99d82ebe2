# tests/test_pipeline.py

from __future__ import annotations

import json

import pytest

from gedcom_reconcile.core import ComparisonReport, NoIndividualsError, compare_files
from gedcom_reconcile.exporter import build_report_dict
from gedcom_reconcile.matching import KeyOptions, MatchStatus
from gedcom_reconcile.utils import mock_file_path


def test_compare_mock_files() -> None:
    report = compare_files(mock_file_path("family_a.ged"), mock_file_path("family_b.ged"))

    assert isinstance(report, ComparisonReport)
    assert report.path_a.name == "family_a.ged"
    assert len(report.records_a) == 4
    assert len(report.records_b) == 3
    assert report.result.status_a["I2"] is MatchStatus.UNIQUE_A
    assert report.result.status_b["P9"] is MatchStatus.MATCH


def test_empty_file_is_rejected() -> None:
    with pytest.raises(NoIndividualsError) as excinfo:
        compare_files(mock_file_path("family_a.ged"), mock_file_path("header_only.ged"))

    assert excinfo.value.path.name == "header_only.ged"
    assert "no individuals" in str(excinfo.value)


def test_missing_file_raises_file_not_found(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        compare_files(tmp_path / "missing.ged", mock_file_path("family_b.ged"))


def test_strict_place_option_is_used(tmp_path) -> None:
    a = tmp_path / "a.ged"
    b = tmp_path / "b.ged"
    a.write_text("0 @I1@ INDI\n1 NAME Tom\n1 BIRT\n2 PLAC 12 High St\n", encoding="utf-8")
    b.write_text("0 @X7@ INDI\n1 NAME Tom\n1 BIRT\n2 PLAC 14 High St\n", encoding="utf-8")

    loose = compare_files(a, b)
    strict = compare_files(a, b, options=KeyOptions(strict_place=True))

    assert loose.result.counts.match == 2
    assert strict.result.counts.as_dict() == {"MATCH": 0, "UNIQUE_A": 1, "UNIQUE_B": 1}


def test_report_is_exported_as_json(tmp_path) -> None:
    out = tmp_path / "reports" / "comparison.json"
    report = compare_files(
        mock_file_path("family_a.ged"),
        mock_file_path("family_b.ged"),
        output_path=out,
    )

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data == build_report_dict(report)
    assert data["files"] == {"A": "family_a.ged", "B": "family_b.ged"}
    assert data["counts"] == {"MATCH": 5, "UNIQUE_A": 1, "UNIQUE_B": 1}
    assert data["all_matched"] is False

    first = data["individuals_a"][0]
    assert first["id"] == "I1"
    assert first["status"] == "MATCH"
    assert first["key"] == "JOHNDOE|M|1 JAN 1900|LONDON"
    assert first["details"]["Birth"] == {"date": "1 JAN 1900", "place": "London"}


def test_close_scopes_option_is_used(tmp_path) -> None:
    a = tmp_path / "a.ged"
    b = tmp_path / "b.ged"
    a.write_text("0 @I1@ INDI\n1 NAME Tom\n1 BIRT\n2 DATE 1900\n1 DEAT\n2 DATE 1950\n", encoding="utf-8")
    b.write_text("0 @X1@ INDI\n1 NAME Tom\n1 BIRT\n2 DATE 1950\n", encoding="utf-8")

    default = compare_files(a, b)
    closed = compare_files(a, b, close_scopes=True)

    assert default.result.counts.as_dict() == {"MATCH": 2, "UNIQUE_A": 0, "UNIQUE_B": 0}
    assert closed.records_a[0].birth.date == "1900"
    assert closed.result.counts.as_dict() == {"MATCH": 0, "UNIQUE_A": 1, "UNIQUE_B": 1}
