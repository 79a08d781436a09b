"""Well-formedness gate.

Generic XML syntax only (balanced tags, legal characters, attribute syntax);
nothing dialect specific happens here. Parsing is delegated to ``lxml`` in
strict mode so the first violation is reported with its line and column.
"""

from __future__ import annotations

from lxml import etree

from wowui_xml_lint.domain.models.document import Document
from wowui_xml_lint.domain.models.finding import Finding, FindingCode, Severity


def strict_parser() -> etree.XMLParser:
    """Non-recovering parser with network access and entity expansion disabled."""
    return etree.XMLParser(
        recover=False,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def check_well_formed(document: Document) -> Finding | None:
    """Return ``None`` if *document* is well-formed, else one error finding."""
    try:
        etree.fromstring(document.raw, strict_parser())
    except etree.XMLSyntaxError as exc:
        line, column = exc.position
        return Finding(
            severity=Severity.ERROR,
            code=FindingCode.XML_SYNTAX,
            message=exc.msg or str(exc),
            line=line,
            column=column,
        )
    except ValueError as exc:
        # lxml refuses some inputs (e.g. empty documents) before parsing starts
        return Finding(
            severity=Severity.ERROR,
            code=FindingCode.XML_SYNTAX,
            message=str(exc),
        )
    return None
