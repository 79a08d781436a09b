"""Infrastructure — filesystem access."""

from wowui_xml_lint.infrastructure.discovery import discover_xml_files

__all__ = ["discover_xml_files"]
