"""Classification of a single trimmed source line into one of the known shapes."""

from __future__ import annotations

import re
from dataclasses import dataclass

IMPORT_PREFIX = "@import "
DEFERRED_IMPORT_PREFIX = "@import nonfinal "
IMPORT_KEYWORD = re.compile(r"import(?: nonfinal)?\s+")
FUNCTION_HEADER = re.compile(r"[A-Za-z0-9_]+\(.*\)\s*\{?")
FUNCTION_ARGUMENTS = re.compile(r"\((.*?)\)")


@dataclass(slots=True, frozen=True)
class ImportDirective:
    path: str
    deferred: bool


@dataclass(slots=True, frozen=True)
class FunctionHeader:
    name: str
    arguments: tuple[str, ...]
    has_open_brace: bool


@dataclass(slots=True, frozen=True)
class SectionHeader:
    name: str
    attributes_text: str


@dataclass(slots=True, frozen=True)
class PropertyLine:
    key: str
    raw_value: str


@dataclass(slots=True, frozen=True)
class Unrecognized:
    text: str


LineShape = ImportDirective | FunctionHeader | SectionHeader | PropertyLine | Unrecognized


def classify_line(line: str) -> LineShape:
    """Match a trimmed, non-blank line against the line shapes in priority order."""
    if line.startswith(IMPORT_PREFIX):
        return _import_directive(line)
    if FUNCTION_HEADER.fullmatch(line):
        return _function_header(line)
    if "{" in line:
        return _section_header(line)
    if ":" in line:
        key, raw_value = line.split(":", 1)
        return PropertyLine(key=key.strip(), raw_value=raw_value)
    return Unrecognized(text=line)


def _import_directive(line: str) -> ImportDirective:
    remainder = IMPORT_KEYWORD.split(line, maxsplit=1)
    path = remainder[1] if len(remainder) > 1 else ""
    path = path.replace('"', "").replace("'", "").strip()
    return ImportDirective(path=path, deferred=line.startswith(DEFERRED_IMPORT_PREFIX))


def _function_header(line: str) -> FunctionHeader:
    name = line.split("(", 1)[0].strip()
    match = FUNCTION_ARGUMENTS.search(line)
    inner = match.group(1) if match else ""
    arguments = tuple(arg.strip() for arg in inner.split(",") if arg.strip())
    return FunctionHeader(name=name, arguments=arguments, has_open_brace="{" in line)


def _section_header(line: str) -> SectionHeader:
    name = line.split(" ", 1)[0]
    attributes_text = line[len(name) :].replace("{", "").replace("}", "").strip()
    return SectionHeader(name=name, attributes_text=attributes_text)


__all__ = [
    "ImportDirective",
    "FunctionHeader",
    "SectionHeader",
    "PropertyLine",
    "Unrecognized",
    "LineShape",
    "classify_line",
]
