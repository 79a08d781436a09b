"""Document value object — one markup file as read from disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Document:
    """Raw content of a single XML file plus its filesystem identity.

    ``raw`` keeps the bytes exactly as read so the XML parser can honour the
    encoding declaration; ``text`` is the UTF-8 decoded form the dialect
    rules search through.
    """

    path: Path
    raw: bytes = field(repr=False)
    text: str = field(repr=False)

    @property
    def name(self) -> str:
        return self.path.name

    @classmethod
    def from_path(cls, path: Path) -> Document:
        """Read *path* from disk.

        Raises:
            OSError: If the file cannot be read.
        """
        path = Path(path)
        raw = path.read_bytes()
        return cls(path=path, raw=raw, text=raw.decode("utf-8", errors="replace"))

    @classmethod
    def from_text(cls, text: str, path: Path | str = "<memory>.xml") -> Document:
        """Build a document from an in-memory string."""
        return cls(path=Path(path), raw=text.encode("utf-8"), text=text)
