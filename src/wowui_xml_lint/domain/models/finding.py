"""Findings and per-file reports produced by the validation stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Severity(str, Enum):
    """Severity level for a finding."""

    ERROR = "error"  # Fails the file and the run
    WARNING = "warning"  # Advisory, never affects the exit status


class FindingCode(str, Enum):
    """Machine-readable codes for every check."""

    XML_SYNTAX = "XML_SYNTAX"  # Not well-formed
    PARSE_FAILURE = "PARSE_FAILURE"  # Tree could not be built or file unreadable
    ROOT_ELEMENT = "ROOT_ELEMENT"  # Root is not <Ui>
    MISSING_NAMESPACE = "MISSING_NAMESPACE"
    MISMATCHED_INSETS = "MISMATCHED_INSETS"
    DEPRECATED_BACKDROP = "DEPRECATED_BACKDROP"
    MISCLOSED_INSETS = "MISCLOSED_INSETS"
    SELF_CLOSING_CONTAINER = "SELF_CLOSING_CONTAINER"
    FRAME_WITHOUT_NAME = "FRAME_WITHOUT_NAME"


class FileStatus(str, Enum):
    """Outcome of validating one file."""

    PASSED = "passed"
    PASSED_WITH_WARNINGS = "passed-with-warnings"
    FAILED = "failed"


@dataclass(frozen=True)
class Finding:
    """A single detected defect."""

    severity: Severity
    code: FindingCode
    message: str
    line: int | None = None
    column: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    @property
    def location(self) -> str | None:
        if self.line is None:
            return None
        return f"Line: {self.line}, Column: {self.column}"


@dataclass
class FileReport:
    """All findings for one document.

    Attributes:
        path: Location of the validated file.
        findings: Findings in evaluation order (stage, then rule catalog,
            then text position).
    """

    path: Path
    findings: list[Finding] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.WARNING]

    @property
    def passed(self) -> bool:
        """True if no errors were found."""
        return not self.errors

    @property
    def status(self) -> FileStatus:
        if self.errors:
            return FileStatus.FAILED
        if self.warnings:
            return FileStatus.PASSED_WITH_WARNINGS
        return FileStatus.PASSED
