"""Rules for the paired ``<BackgroundInsets>`` element.

Generic well-formedness cannot catch these: a file can be valid XML while
the insets pairing that hand-written backdrop blocks rely on is broken.
"""

from __future__ import annotations

import re

from wowui_xml_lint.domain.models.finding import Finding, FindingCode, Severity
from wowui_xml_lint.domain.rules.constants import DEPRECATED_ELEMENT, INSETS_ELEMENT
from wowui_xml_lint.rules.base import BaseRule

_INSETS_OPEN = f"<{INSETS_ELEMENT}>"
_INSETS_CLOSE = f"</{INSETS_ELEMENT}>"
_BACKDROP_CLOSE = f"</{DEPRECATED_ELEMENT}>"


class MismatchedInsetsRule(BaseRule):
    """Error when opening and closing ``BackgroundInsets`` counts differ."""

    # Opening tags with or without attributes, but not the self-closing form
    _OPEN_RE = re.compile(rf"<{INSETS_ELEMENT}(?:\s[^>]*)?(?<!/)>")
    _CLOSE_RE = re.compile(rf"</{INSETS_ELEMENT}\s*>")

    @property
    def code(self) -> FindingCode:
        return FindingCode.MISMATCHED_INSETS

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> str:
        return f"Every <{INSETS_ELEMENT}> must have a matching {_INSETS_CLOSE}"

    def check(self, text: str, root=None) -> list[Finding]:
        opened = len(self._OPEN_RE.findall(text))
        closed = len(self._CLOSE_RE.findall(text))
        if opened == closed:
            return []
        return [
            self._finding(
                f"Mismatched <{INSETS_ELEMENT}> tags ({opened} opening, {closed} closing)"
            )
        ]


class MisclosedInsetsRule(BaseRule):
    """Error when ``</Backdrop>`` was probably typed instead of ``</BackgroundInsets>``.

    Heuristic, not a proof. Fires only when the first ``<BackgroundInsets>``
    precedes the first ``</Backdrop>`` and no ``</BackgroundInsets>`` closes
    it before that ``</Backdrop>``. The mirror case (``</BackgroundInsets>``
    typed for ``</Backdrop>``) is not reported.
    """

    @property
    def code(self) -> FindingCode:
        return FindingCode.MISCLOSED_INSETS

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> str:
        return f"{_BACKDROP_CLOSE} used where {_INSETS_CLOSE} was intended"

    def check(self, text: str, root=None) -> list[Finding]:
        backdrop_pos = text.find(_BACKDROP_CLOSE)
        insets_pos = text.find(_INSETS_OPEN)
        if backdrop_pos == -1 or insets_pos == -1 or insets_pos >= backdrop_pos:
            return []

        next_backdrop_close = text.find(_BACKDROP_CLOSE, insets_pos)
        next_insets_close = text.find(_INSETS_CLOSE, insets_pos)
        if next_insets_close == -1 or next_backdrop_close < next_insets_close:
            return [
                self._finding(
                    f"Possible incorrect closing tag: {_BACKDROP_CLOSE} should be {_INSETS_CLOSE}"
                )
            ]
        return []
