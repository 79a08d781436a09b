"""Missing namespace declaration (warning).

The WoW client tolerates files without the UI namespace, but editors lose
schema completion and some tooling refuses them.
"""

from __future__ import annotations

from wowui_xml_lint.domain.models.finding import Finding, FindingCode, Severity
from wowui_xml_lint.domain.rules.constants import NAMESPACE_URI
from wowui_xml_lint.rules.base import BaseRule


class MissingNamespaceRule(BaseRule):
    """Warn when the UI namespace URI appears nowhere in the document."""

    @property
    def code(self) -> FindingCode:
        return FindingCode.MISSING_NAMESPACE

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def description(self) -> str:
        return f"Document should declare xmlns=\"{NAMESPACE_URI}\""

    def check(self, text: str, root=None) -> list[Finding]:
        if NAMESPACE_URI in text:
            return []
        return [
            self._finding(
                f'Missing xmlns declaration - should include xmlns="{NAMESPACE_URI}"'
            )
        ]
