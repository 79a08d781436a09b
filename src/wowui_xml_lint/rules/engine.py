"""Dialect rule engine.

Runs a fixed battery of independent ``BaseRule`` instances against a
document that already passed the well-formedness and root-element checks:

  1. MissingNamespaceRule       (warning)
  2. MismatchedInsetsRule       (error)
  3. DeprecatedBackdropRule     (error)
  4. MisclosedInsetsRule        (error)
  5. SelfClosingContainerRule   (warning)
  6. FrameWithoutNameRule       (warning, one per frame)

Every rule runs even when an earlier one reported an error; the findings
of all rules are returned together in catalog order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wowui_xml_lint.domain.models.finding import Finding
from wowui_xml_lint.rules.base import BaseRule
from wowui_xml_lint.rules.checks.backdrop_rule import DeprecatedBackdropRule
from wowui_xml_lint.rules.checks.frame_name_rule import FrameWithoutNameRule
from wowui_xml_lint.rules.checks.insets_rules import MisclosedInsetsRule, MismatchedInsetsRule
from wowui_xml_lint.rules.checks.namespace_rule import MissingNamespaceRule
from wowui_xml_lint.rules.checks.self_closing_rule import SelfClosingContainerRule

if TYPE_CHECKING:
    from lxml import etree


def default_rules() -> list[BaseRule]:
    """Build the standard rule catalog, in evaluation order."""
    return [
        MissingNamespaceRule(),
        MismatchedInsetsRule(),
        DeprecatedBackdropRule(),
        MisclosedInsetsRule(),
        SelfClosingContainerRule(),
        FrameWithoutNameRule(),
    ]


class RuleEngine:
    """Run every dialect rule against a document.

    Usage::

        engine = RuleEngine()
        findings = engine.run(document.text, root)
        errors = [f for f in findings if f.is_error]
    """

    def __init__(self, rules: list[BaseRule] | None = None) -> None:
        self._rules: list[BaseRule] = rules if rules is not None else default_rules()

    # -- Public API ------------------------------------------------------

    def run(self, text: str, root: etree._Element | None = None) -> list[Finding]:
        """Evaluate all rules on *text* and return their combined findings."""
        findings: list[Finding] = []
        for rule in self._rules:
            findings.extend(rule.check(text, root))
        return findings

    def add_rule(self, rule: BaseRule, *, position: int | None = None) -> None:
        """Insert a custom rule into the battery.

        Args:
            rule: The rule instance to add.
            position: Index to insert at. ``None`` appends to the end.
        """
        if position is None:
            self._rules.append(rule)
        else:
            self._rules.insert(position, rule)

    def remove_rule(self, name: str) -> bool:
        """Remove the first rule whose ``name`` matches.

        Returns ``True`` if a rule was removed.
        """
        for i, rule in enumerate(self._rules):
            if rule.name == name:
                self._rules.pop(i)
                return True
        return False

    @property
    def rules(self) -> list[BaseRule]:
        """Copy of the current rule battery, in order."""
        return list(self._rules)

    @property
    def rule_names(self) -> list[str]:
        return [r.name for r in self._rules]
