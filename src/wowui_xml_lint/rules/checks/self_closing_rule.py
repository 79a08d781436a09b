"""Self-closing tags on elements that normally carry children (warning)."""

from __future__ import annotations

import re

from wowui_xml_lint.domain.models.finding import Finding, FindingCode, Severity
from wowui_xml_lint.domain.rules.constants import CHILD_BEARING_ELEMENTS
from wowui_xml_lint.rules.base import BaseRule


class SelfClosingContainerRule(BaseRule):
    """Warn once per tag type when ``<Frame/>``, ``<Button/>`` or ``<Backdrop/>`` is found."""

    def __init__(self, tags: tuple[str, ...] = CHILD_BEARING_ELEMENTS) -> None:
        self._patterns = [(tag, re.compile(rf"<{tag}(?:\s[^>]*)?/>")) for tag in tags]

    @property
    def code(self) -> FindingCode:
        return FindingCode.SELF_CLOSING_CONTAINER

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def description(self) -> str:
        tags = ", ".join(f"<{tag}/>" for tag, _ in self._patterns)
        return f"Self-closing {tags} probably lost their children"

    def check(self, text: str, root=None) -> list[Finding]:
        return [
            self._finding(f"Self-closing <{tag}/> tag found - may need child elements")
            for tag, pattern in self._patterns
            if pattern.search(text)
        ]
