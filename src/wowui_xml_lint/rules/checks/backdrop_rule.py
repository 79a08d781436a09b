"""Deprecated ``<Backdrop>`` element (error)."""

from __future__ import annotations

import re

from wowui_xml_lint.domain.models.finding import Finding, FindingCode, Severity
from wowui_xml_lint.domain.rules.constants import DEPRECATED_ELEMENT
from wowui_xml_lint.rules.base import BaseRule


class DeprecatedBackdropRule(BaseRule):
    """Error when the removed ``<Backdrop>`` element is used anywhere.

    Reported once per document no matter how many tags are found.
    """

    # <Backdrop>, <Backdrop ...>, <Backdrop/> and </Backdrop>, not <BackdropFoo>
    _TAG_RE = re.compile(rf"</?{DEPRECATED_ELEMENT}(?=[\s/>])")

    @property
    def code(self) -> FindingCode:
        return FindingCode.DEPRECATED_BACKDROP

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> str:
        return f"<{DEPRECATED_ELEMENT}> was removed in 9.0; use SetBackdrop() in Lua"

    def check(self, text: str, root=None) -> list[Finding]:
        if not self._TAG_RE.search(text):
            return []
        return [
            self._finding(
                f"DEPRECATED: <{DEPRECATED_ELEMENT}> element is not valid in modern WoW (9.0+). "
                "Use SetBackdrop() in Lua instead."
            )
        ]
