"""WoW UI XML Lint configuration package."""

from wowui_xml_lint.config.loader import get_config, load_config
from wowui_xml_lint.config.models import LintConfig

__all__ = ["LintConfig", "get_config", "load_config"]
