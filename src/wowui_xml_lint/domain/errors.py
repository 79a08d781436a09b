"""Domain errors — custom exceptions for WoW UI XML Lint.

Only setup problems are raised as exceptions. Problems inside a single
document are reported as findings and never cross the per-document boundary.
"""

from __future__ import annotations

from pathlib import Path


class XmlLintError(Exception):
    """Base exception for all WoW UI XML Lint errors."""


class TargetDirectoryNotFoundError(XmlLintError):
    """Raised when the directory to validate does not exist."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        super().__init__(f"{self.directory.name or self.directory} directory not found")


class ConfigurationError(XmlLintError):
    """Raised when configuration is invalid or missing."""
