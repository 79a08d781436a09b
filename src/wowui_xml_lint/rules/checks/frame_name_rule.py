"""Frames without a ``name`` attribute (warning, one per tag)."""

from __future__ import annotations

import re

from wowui_xml_lint.domain.models.finding import Finding, FindingCode, Severity
from wowui_xml_lint.domain.rules.constants import FRAME_ELEMENT
from wowui_xml_lint.rules.base import BaseRule


class FrameWithoutNameRule(BaseRule):
    """Warn for every ``<Frame>`` opening tag that has no ``name`` attribute.

    Each unnamed frame is reported on its own: every one of them is
    unreachable through ``_G[name]`` lookups from Lua.

    With a parsed tree the frames are read from it, so a ``>`` inside an
    attribute value cannot cut a tag short. Raw text alone falls back to
    tag matching.
    """

    # <Frame>, <Frame/> and <Frame ...>, but not <Frames> or <FrameStrata>
    _FRAME_TAG_RE = re.compile(rf"<{FRAME_ELEMENT}(?=[\s/>])[^>]*>")
    _NAME_ATTR_RE = re.compile(r"\sname\s*=")

    @property
    def code(self) -> FindingCode:
        return FindingCode.FRAME_WITHOUT_NAME

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def description(self) -> str:
        return f"Every <{FRAME_ELEMENT}> should carry a name attribute"

    def check(self, text: str, root=None) -> list[Finding]:
        if root is not None:
            # {*} matches the element in any namespace, or none
            unnamed = sum(
                1 for frame in root.iter(f"{{*}}{FRAME_ELEMENT}") if frame.get("name") is None
            )
        else:
            unnamed = sum(
                1
                for match in self._FRAME_TAG_RE.finditer(text)
                if not self._NAME_ATTR_RE.search(match.group(0))
            )
        return [
            self._finding(
                f"{FRAME_ELEMENT} without name attribute - may cause issues accessing from Lua"
            )
            for _ in range(unnamed)
        ]
