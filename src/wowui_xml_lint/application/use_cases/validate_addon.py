"""Use Case: Validate an addon's XML tree.

Discovers candidate files, checks them one at a time, and folds every
``FileReport`` into a ``RunTally``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from wowui_xml_lint.config.models import LintConfig
from wowui_xml_lint.domain.models.finding import FileReport
from wowui_xml_lint.domain.models.tally import RunTally
from wowui_xml_lint.infrastructure.discovery import discover_xml_files
from wowui_xml_lint.validators.checker import XmlFileChecker

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of one validation run."""

    directory: Path
    files: list[Path] = field(default_factory=list)
    reports: list[FileReport] = field(default_factory=list)
    tally: RunTally = field(default_factory=RunTally)

    @property
    def exit_code(self) -> int:
        return self.tally.exit_code


class ValidateAddonUseCase:
    """Orchestrate discovery, per-file checking and tallying."""

    def __init__(
        self,
        checker: XmlFileChecker | None = None,
        config: LintConfig | None = None,
    ) -> None:
        self._config = config or LintConfig()
        self._checker = checker or XmlFileChecker(
            root_element=self._config.dialect.root_element
        )

    def discover(self, directory: Path | None = None) -> list[Path]:
        """List the files a run over *directory* would check.

        Raises:
            TargetDirectoryNotFoundError: If the directory is missing.
        """
        discovery = self._config.discovery
        return discover_xml_files(
            directory or discovery.target_path,
            excluded_dirs=discovery.excluded_dirs,
            extension=discovery.extension,
        )

    def execute(self, directory: Path | None = None) -> RunResult:
        """Validate every candidate file under *directory*.

        Args:
            directory: Addon directory. Defaults to the configured target.

        Returns:
            A RunResult with one report per file and the folded tally.

        Raises:
            TargetDirectoryNotFoundError: If the directory is missing.
        """
        directory = Path(directory or self._config.discovery.target_path)
        result = RunResult(directory=directory, files=self.discover(directory))

        for path in result.files:
            report = self._checker.check_path(path)
            result.reports.append(report)
            result.tally = result.tally.add(report)

        logger.info(
            "Checked %d file(s): %d error(s), %d warning(s)",
            result.tally.files,
            result.tally.errors,
            result.tally.warnings,
        )
        return result
