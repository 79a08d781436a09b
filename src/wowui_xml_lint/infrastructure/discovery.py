"""Locate candidate XML files under an addon directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from wowui_xml_lint.domain.errors import TargetDirectoryNotFoundError

logger = logging.getLogger(__name__)


def discover_xml_files(
    root: Path,
    excluded_dirs: Iterable[str] = ("Libs",),
    extension: str = ".xml",
) -> list[Path]:
    """Return every file under *root* ending in *extension*, depth-first.

    Entries of each directory are visited in name order. Directories whose
    name is in *excluded_dirs* (vendored libraries) are skipped at any depth.
    Symlinked directories are not followed, and a directory that cannot be
    listed is logged and skipped.

    Raises
    ------
    TargetDirectoryNotFoundError
        If *root* does not exist or is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise TargetDirectoryNotFoundError(root)

    excluded = set(excluded_dirs)
    found: list[Path] = []
    _walk(root, excluded, extension, found)
    logger.debug("Discovered %d %s file(s) under %s", len(found), extension, root)
    return found


def _walk(directory: Path, excluded: set[str], extension: str, found: list[Path]) -> None:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning("Cannot list %s: %s", directory, e)
        return

    for entry in entries:
        if entry.is_dir():
            if entry.is_symlink():
                logger.debug("Not following symlinked directory %s", entry)
                continue
            if entry.name in excluded:
                logger.debug("Skipping excluded directory %s", entry)
                continue
            _walk(entry, excluded, extension, found)
        elif entry.name.endswith(extension):
            found.append(entry)
