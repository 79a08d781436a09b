"""WoW UI XML dialect rules.

Pattern- and structure-based checks that generic XML validation cannot
express, run as an ordered battery by ``RuleEngine``.
"""

from wowui_xml_lint.rules.base import BaseRule
from wowui_xml_lint.rules.engine import RuleEngine, default_rules

__all__ = ["BaseRule", "RuleEngine", "default_rules"]
