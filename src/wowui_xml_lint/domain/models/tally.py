"""Run-wide accumulator folded over every file report."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from wowui_xml_lint.domain.models.finding import FileReport


class RunStatus(str, Enum):
    """Overall outcome of a validation run."""

    PASSED = "passed"
    PASSED_WITH_WARNINGS = "passed-with-warnings"
    FAILED = "failed"


@dataclass(frozen=True)
class RunTally:
    """Files examined and findings counted across one run."""

    files: int = 0
    errors: int = 0
    warnings: int = 0

    def add(self, report: FileReport) -> RunTally:
        """Return a new tally that includes *report*."""
        return replace(
            self,
            files=self.files + 1,
            errors=self.errors + len(report.errors),
            warnings=self.warnings + len(report.warnings),
        )

    @property
    def status(self) -> RunStatus:
        if self.errors:
            return RunStatus.FAILED
        if self.warnings:
            return RunStatus.PASSED_WITH_WARNINGS
        return RunStatus.PASSED

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0
