"""Brace matching for block bodies and indentation cleanup for function bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from kantara.exceptions import UnterminatedBlockError


@dataclass(slots=True, frozen=True)
class ScanResult:
    body: str
    end_index: int


@dataclass(slots=True)
class ScanState:
    depth: int = 1
    in_string: bool = False
    escape: bool = False

    def feed(self, char: str) -> None:
        if self.escape:
            self.escape = False
        elif char == "\\":
            self.escape = True
        elif char == '"':
            self.in_string = not self.in_string
        elif not self.in_string:
            if char == "{":
                self.depth += 1
            elif char == "}":
                self.depth -= 1


def scan_block(lines: Sequence[str], start: int, line_offset: int = 0) -> ScanResult:
    """Collect the lines of a block whose opening brace was already consumed.

    Scanning starts at ``lines[start]`` with depth 1 and stops on the line
    where depth returns to 0. That line is not part of the body and its index
    is returned as ``end_index``. ``line_offset`` only shifts the line number
    reported on failure. Braces inside double-quoted runs are ignored
    and a backslash escapes the next character.

    Raises:
        UnterminatedBlockError: input ended before the block closed.
    """
    state = ScanState()
    body: list[str] = []
    for index in range(start, len(lines)):
        line = lines[index]
        for char in line:
            state.feed(char)
            if state.depth == 0:
                break
        if state.depth == 0:
            return ScanResult(body="\n".join(body), end_index=index)
        body.append(line)
    opener = lines[start - 1].strip() if 0 < start <= len(lines) else ""
    raise UnterminatedBlockError(opener, line=line_offset + start)


def dedent(block: str) -> str:
    """Strip the common leading-whitespace margin and surrounding blank lines."""
    lines = block.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    margin: int | None = None
    for line in lines:
        if not line.strip():
            continue
        width = len(line) - len(line.lstrip())
        if width == 0:
            margin = 0
            break
        margin = width if margin is None else min(margin, width)
    margin = margin or 0

    prefix = " " * margin
    return "\n".join(line[margin:] if line.startswith(prefix) else line for line in lines)


__all__ = ["ScanResult", "ScanState", "scan_block", "dedent"]
