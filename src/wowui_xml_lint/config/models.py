"""Pydantic models for WoW UI XML Lint configuration.

These models validate and type the JSON configuration file. Every field
has a default, and the defaults reproduce the tool's fixed behavior:
validate ``LayoutLedger/``, skip ``Libs/``, require a ``<Ui>`` root.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


class DiscoveryConfig(BaseModel):
    """Where to look for XML files."""

    target_dir: str = "LayoutLedger"
    excluded_dirs: list[str] = Field(default_factory=lambda: ["Libs"])
    extension: str = ".xml"

    @field_validator("extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("extension must start with '.'")
        return value

    @property
    def target_path(self) -> Path:
        return Path(self.target_dir)


# ---------------------------------------------------------------------------
# Dialect
# ---------------------------------------------------------------------------


class DialectConfig(BaseModel):
    """Facts about the markup dialect the structural checker enforces."""

    root_element: str = Field(default="Ui", min_length=1)


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class LintConfig(BaseModel):
    """Complete validator configuration."""

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    dialect: DialectConfig = Field(default_factory=DialectConfig)
