"""Per-file validation pipeline.

Runs the three stages in order and stops at the first failing gate:

  1. Well-formedness   (one error, stop)
  2. Structure / root  (one error, stop)
  3. Dialect rules     (all rules run, errors and warnings collected)

Nothing raised while checking a single document escapes ``check_path``;
failures become findings on the returned ``FileReport``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from wowui_xml_lint.domain.models.document import Document
from wowui_xml_lint.domain.models.finding import FileReport, Finding, FindingCode, Severity
from wowui_xml_lint.domain.rules.constants import ROOT_ELEMENT
from wowui_xml_lint.rules.engine import RuleEngine
from wowui_xml_lint.validators.structure import parse_structure
from wowui_xml_lint.validators.well_formedness import check_well_formed

logger = logging.getLogger(__name__)


class XmlFileChecker:
    """Validate WoW UI XML documents one at a time."""

    def __init__(
        self,
        engine: RuleEngine | None = None,
        root_element: str = ROOT_ELEMENT,
    ) -> None:
        self._engine = engine or RuleEngine()
        self._root_element = root_element

    def check(self, document: Document) -> FileReport:
        """Run every stage on *document* and return its report."""
        report = FileReport(path=document.path)

        syntax_error = check_well_formed(document)
        if syntax_error is not None:
            logger.debug("%s: not well-formed (%s)", document.name, syntax_error.message)
            report.findings.append(syntax_error)
            return report

        structure = parse_structure(document, self._root_element)
        if not structure.ok:
            logger.debug("%s: structural check failed (%s)", document.name, structure.finding.message)
            report.findings.append(structure.finding)
            return report

        report.findings.extend(self._engine.run(document.text, structure.root))
        logger.debug(
            "%s: %d error(s), %d warning(s)",
            document.name,
            len(report.errors),
            len(report.warnings),
        )
        return report

    def check_path(self, path: Path) -> FileReport:
        """Read *path* and check it; an unreadable file is reported, not raised."""
        try:
            document = Document.from_path(path)
        except OSError as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return FileReport(
                path=Path(path),
                findings=[
                    Finding(
                        severity=Severity.ERROR,
                        code=FindingCode.PARSE_FAILURE,
                        message=f"Could not read file - {exc}",
                    )
                ],
            )
        return self.check(document)
