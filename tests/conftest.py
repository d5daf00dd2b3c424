"""
Shared test fixtures for the kantara test suite.
"""

from __future__ import annotations

import pytest

from kantara.exceptions import ImportIOError


class MemoryLoader:
    """Serves import sources from a dict and records every path it reads."""

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.loaded: list[str] = []

    def resolve(self, path: str) -> str:
        return path

    def load(self, path: str) -> str:
        self.loaded.append(path)
        try:
            return self.files[path]
        except KeyError as exc:
            raise ImportIOError(path, "no such file") from exc


@pytest.fixture
def memory_loader():
    """Factory fixture: ``memory_loader({"a.dsl": "x: 1"})``."""
    return MemoryLoader
