"""Tests for domain models: documents, findings, reports and the run tally."""

from __future__ import annotations

from pathlib import Path

import pytest

from wowui_xml_lint.domain.errors import TargetDirectoryNotFoundError, XmlLintError
from wowui_xml_lint.domain.models import (
    Document,
    FileReport,
    FileStatus,
    Finding,
    FindingCode,
    RunStatus,
    RunTally,
    Severity,
)


def _error(message: str = "boom") -> Finding:
    return Finding(Severity.ERROR, FindingCode.DEPRECATED_BACKDROP, message)


def _warning(message: str = "hmm") -> Finding:
    return Finding(Severity.WARNING, FindingCode.FRAME_WITHOUT_NAME, message)


class TestDocument:
    def test_from_text(self):
        doc = Document.from_text("<Ui/>", path="sub/Frame.xml")
        assert doc.name == "Frame.xml"
        assert doc.raw == b"<Ui/>"
        assert doc.text == "<Ui/>"

    def test_from_path_keeps_raw_bytes(self, tmp_path: Path):
        path = tmp_path / "Bad.xml"
        path.write_bytes(b"<Ui>\xff</Ui>")
        doc = Document.from_path(path)
        assert doc.raw == b"<Ui>\xff</Ui>"
        assert doc.text.startswith("<Ui>")

    def test_immutable(self):
        doc = Document.from_text("<Ui/>")
        with pytest.raises(AttributeError):
            doc.text = "<Window/>"


class TestFinding:
    def test_location(self):
        assert Finding(Severity.ERROR, FindingCode.XML_SYNTAX, "x", 3, 7).location == (
            "Line: 3, Column: 7"
        )

    def test_no_location(self):
        assert _warning().location is None
        assert not _warning().is_error
        assert _error().is_error


class TestFileReport:
    def test_clean(self):
        report = FileReport(path=Path("A.xml"))
        assert report.status == FileStatus.PASSED
        assert report.passed

    def test_warnings_only(self):
        report = FileReport(path=Path("A.xml"), findings=[_warning(), _warning()])
        assert report.status == FileStatus.PASSED_WITH_WARNINGS
        assert report.passed
        assert len(report.warnings) == 2

    def test_errors_and_warnings(self):
        report = FileReport(path=Path("A.xml"), findings=[_warning(), _error()])
        assert report.status == FileStatus.FAILED
        assert not report.passed
        assert report.errors == [_error()]


class TestRunTally:
    def test_starts_at_zero(self):
        tally = RunTally()
        assert (tally.files, tally.errors, tally.warnings) == (0, 0, 0)
        assert tally.exit_code == 0
        assert tally.status == RunStatus.PASSED

    def test_add_returns_new_tally(self):
        start = RunTally()
        after = start.add(FileReport(path=Path("A.xml"), findings=[_error(), _warning()]))
        assert start == RunTally()
        assert (after.files, after.errors, after.warnings) == (1, 1, 1)

    def test_fold(self):
        reports = [
            FileReport(path=Path("A.xml")),
            FileReport(path=Path("B.xml"), findings=[_warning(), _warning()]),
        ]
        tally = RunTally()
        for report in reports:
            tally = tally.add(report)
        assert tally == RunTally(files=2, errors=0, warnings=2)
        assert tally.status == RunStatus.PASSED_WITH_WARNINGS
        assert tally.exit_code == 0

    def test_any_error_fails(self):
        tally = RunTally().add(FileReport(path=Path("A.xml"), findings=[_error()]))
        assert tally.status == RunStatus.FAILED
        assert tally.exit_code == 1


class TestErrors:
    def test_target_directory_not_found(self):
        exc = TargetDirectoryNotFoundError(Path("addons/LayoutLedger"))
        assert isinstance(exc, XmlLintError)
        assert str(exc) == "LayoutLedger directory not found"
