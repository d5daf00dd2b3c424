"""Source loading for imports and top-level files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from kantara.exceptions import ImportIOError


@runtime_checkable
class SourceLoader(Protocol):
    def resolve(self, path: str) -> str:
        """Return the identity key of ``path`` used to detect import cycles."""
        ...

    def load(self, path: str) -> str:
        """Return the raw text of ``path``, raising ``ImportIOError`` when unreadable."""
        ...


class FileSourceLoader:
    """Reads imported files from disk, relative to ``base_dir`` (default: the working directory)."""

    def __init__(self, base_dir: str | os.PathLike[str] | None = None, encoding: str = "utf-8"):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.encoding = encoding

    def _path(self, path: str) -> Path:
        candidate = Path(path)
        if self.base_dir is not None and not candidate.is_absolute():
            candidate = self.base_dir / candidate
        return candidate

    def resolve(self, path: str) -> str:
        return os.path.normpath(os.path.abspath(self._path(path)))

    def load(self, path: str) -> str:
        try:
            return self._path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ImportIOError(path, str(exc)) from exc


__all__ = ["SourceLoader", "FileSourceLoader"]
