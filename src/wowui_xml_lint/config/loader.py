"""Configuration loader for WoW UI XML Lint.

Reads a JSON configuration file into a validated ``LintConfig``. Parsed
files are cached by resolved path, so each file is read once per process.
The built-in ``wowui_default.json`` reproduces the fixed behavior and is
the file ``config init`` hands out for editing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from wowui_xml_lint.config.models import LintConfig
from wowui_xml_lint.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_config_cache: dict[str, LintConfig] = {}

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "wowui_default.json"


def load_config(path: Optional[Union[str, Path]] = None) -> LintConfig:
    """Load and validate a lint config.

    Parameters
    ----------
    path : str | Path | None
        JSON file to read. ``None`` selects the built-in defaults.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ConfigurationError
        If the file is not valid JSON or its top level is not an object.
    pydantic.ValidationError
        If a value is out of range for its setting.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.debug("Reading configuration from %s", config_path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"{config_path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{config_path} must hold a JSON object of settings")

    config = LintConfig.model_validate(raw)
    _config_cache[cache_key] = config
    return config


def get_config() -> LintConfig:
    """Built-in configuration (cached)."""
    return load_config()


def default_config_text() -> str:
    """Raw text of the built-in configuration file."""
    return _DEFAULT_CONFIG_PATH.read_text(encoding="utf-8")


def write_default_config(dest: Union[str, Path], *, overwrite: bool = False) -> Path:
    """Write the built-in configuration to *dest* and return the path written.

    Raises ``FileExistsError`` when *dest* exists and *overwrite* is false.
    """
    dest = Path(dest)
    if dest.exists() and not overwrite:
        raise FileExistsError(f"File already exists: {dest}")
    dest.write_text(default_config_text(), encoding="utf-8")
    logger.debug("Wrote default configuration to %s", dest)
    return dest


def clear_cache() -> None:
    """Forget every parsed file."""
    _config_cache.clear()
