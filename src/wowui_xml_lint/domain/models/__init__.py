"""Domain models — documents, findings and the run tally."""

from wowui_xml_lint.domain.models.document import Document
from wowui_xml_lint.domain.models.finding import (
    FileReport,
    FileStatus,
    Finding,
    FindingCode,
    Severity,
)
from wowui_xml_lint.domain.models.tally import RunStatus, RunTally

__all__ = [
    "Document",
    "FileReport",
    "FileStatus",
    "Finding",
    "FindingCode",
    "RunStatus",
    "RunTally",
    "Severity",
]
