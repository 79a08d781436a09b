"""Structural gate — build the element tree and check the root element."""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from wowui_xml_lint.domain.models.document import Document
from wowui_xml_lint.domain.models.finding import Finding, FindingCode, Severity
from wowui_xml_lint.domain.rules.constants import ROOT_ELEMENT
from wowui_xml_lint.validators.well_formedness import strict_parser


@dataclass(frozen=True)
class StructureResult:
    """Either the parsed root element or the finding that stopped parsing."""

    root: etree._Element | None = None
    finding: Finding | None = None

    @property
    def ok(self) -> bool:
        return self.finding is None


def parse_structure(document: Document, root_element: str = ROOT_ELEMENT) -> StructureResult:
    """Parse *document* and confirm its root is ``<root_element>``.

    The namespace is ignored when comparing the root name, so both
    ``<Ui>`` and ``<Ui xmlns="...">`` are accepted.
    """
    try:
        root = etree.fromstring(document.raw, strict_parser())
    except (etree.LxmlError, ValueError) as exc:
        return StructureResult(
            finding=Finding(
                severity=Severity.ERROR,
                code=FindingCode.PARSE_FAILURE,
                message=f"Failed to parse XML - {exc}",
            )
        )

    if etree.QName(root).localname != root_element:
        return StructureResult(
            finding=Finding(
                severity=Severity.ERROR,
                code=FindingCode.ROOT_ELEMENT,
                message=f"Root element must be <{root_element}>",
            )
        )
    return StructureResult(root=root)
