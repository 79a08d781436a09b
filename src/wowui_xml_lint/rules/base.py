"""Base interface for dialect rules.

Every rule follows the same contract:
  1. Receives the raw document text (and, optionally, the parsed root)
  2. Returns zero or more ``Finding`` objects, in text order

Rules are stateless and independent of each other. They assume the input
already passed the well-formedness and root-element checks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from wowui_xml_lint.domain.models.finding import Finding, FindingCode, Severity

if TYPE_CHECKING:
    from lxml import etree


class BaseRule(ABC):
    """Abstract base for every rule in the engine.

    Subclasses must implement ``check(text, root) -> list[Finding]``.
    The engine calls rules in catalog order and concatenates their findings.
    """

    @property
    @abstractmethod
    def code(self) -> FindingCode:
        """Code attached to every finding of this rule."""

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Severity of every finding of this rule."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line summary used by ``wowui-xml-lint rules``."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def check(self, text: str, root: etree._Element | None = None) -> list[Finding]:
        """Inspect *text* and return the findings for this rule."""

    # Convenience helper used by concrete rules
    def _finding(self, message: str) -> Finding:
        return Finding(severity=self.severity, code=self.code, message=message)
