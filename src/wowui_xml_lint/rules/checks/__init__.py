"""Individual dialect rules — each detects one kind of defect."""

from wowui_xml_lint.rules.checks.backdrop_rule import DeprecatedBackdropRule
from wowui_xml_lint.rules.checks.frame_name_rule import FrameWithoutNameRule
from wowui_xml_lint.rules.checks.insets_rules import MisclosedInsetsRule, MismatchedInsetsRule
from wowui_xml_lint.rules.checks.namespace_rule import MissingNamespaceRule
from wowui_xml_lint.rules.checks.self_closing_rule import SelfClosingContainerRule

__all__ = [
    "DeprecatedBackdropRule",
    "FrameWithoutNameRule",
    "MisclosedInsetsRule",
    "MismatchedInsetsRule",
    "MissingNamespaceRule",
    "SelfClosingContainerRule",
]
