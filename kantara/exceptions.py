"""Exceptions raised while parsing Kantara sources."""

from __future__ import annotations

from typing import Sequence


class KantaraError(Exception):
    """Base exception for kantara operations."""


class ParseError(KantaraError):
    """A source line could not be turned into a node."""

    def __init__(
        self, message: str, line: int | None = None, text: str | None = None, source: str | None = None
    ):
        self.message = message
        self.line = line
        self.text = text
        # file the line belongs to; set when the error comes from an imported file
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        message = self.message
        if self.source is not None:
            message = f"{message} in {self.source}"
        if self.line is not None:
            message = f"{message} at line {self.line}"
        if self.text is not None:
            message = f"{message}: {self.text}"
        return message


class UnknownSyntaxError(ParseError):
    """A non-blank line matches no import, function, section or property form."""

    def __init__(self, text: str, line: int | None = None):
        super().__init__("Unknown syntax", line=line, text=text)


class UnterminatedBlockError(ParseError):
    """A section or function body reached end of input without its closing brace."""

    def __init__(self, text: str, line: int | None = None):
        super().__init__("Unterminated block", line=line, text=text)


class ImportIOError(KantaraError):
    """An eagerly imported file could not be read."""

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        message = f"Cannot read import '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ImportCycleError(KantaraError):
    """An eager import re-enters a file that is still being expanded."""

    def __init__(self, chain: Sequence[str]):
        self.chain = tuple(chain)
        super().__init__("Import cycle detected: " + " -> ".join(self.chain))
