from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import NotRequired, Sequence, TypedDict

from kantara.attributes import parse_attributes
from kantara.exceptions import ImportCycleError, KantaraError, ParseError, UnknownSyntaxError
from kantara.lines import (
    FunctionHeader,
    ImportDirective,
    PropertyLine,
    SectionHeader,
    Unrecognized,
    classify_line,
)
from kantara.loader import FileSourceLoader, SourceLoader
from kantara.logger import Logger
from kantara.nodes import FunctionNode, ImportNode, Node, PropertyNode, RootNode, SectionNode
from kantara.preprocessor import strip_comments
from kantara.scanner import dedent, scan_block
from kantara.utils import resolve_config
from kantara.values import classify_value


class ParserConfig(TypedDict):
    allow_imports: NotRequired[bool]
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]


class ParserConfigRequired(TypedDict):
    allow_imports: bool
    enable_logger: bool
    log_level: int


DEFAULT_CONFIG: ParserConfigRequired = {"allow_imports": False, "enable_logger": False, "log_level": logging.INFO}


class KantaraParser:
    """Builds a node tree from Kantara source text.

    Lines are classified one at a time. Sections recurse into their bodies,
    function bodies are kept as dedented text, and eager imports are parsed
    through ``loader`` and spliced in place of the directive.
    """

    def __init__(self, config: ParserConfig | None = None, loader: SourceLoader | None = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.loader = loader or FileSourceLoader()
        self.logger = Logger(
            config={
                "name": "Kantara Parser",
                "is_enabled": self.config["enable_logger"],
                "level": self.config["log_level"],
            }
        ).logger

    def parse(self, text: str, source: str | None = None) -> RootNode:
        """Parse ``text`` into a root node.

        ``source`` names the file the text came from; when given, it seeds the
        import chain so a file importing itself is reported as a cycle.
        """
        import_chain = (self.loader.resolve(source),) if source is not None else ()
        self.logger.info(f"Parsing {source or '<text>'}")
        try:
            children = self._parse_text(text, import_chain)
        except KantaraError as e:
            self.logger.error(e)
            raise
        root = RootNode(children=children)
        self.logger.info(f"Parsed {len(children)} top-level node(s)")
        return root

    def _parse_text(self, text: str, import_chain: tuple[str, ...]) -> list[Node]:
        lines = strip_comments(text).split("\n")
        return self._parse_lines(lines, 0, import_chain)

    def _parse_lines(self, lines: Sequence[str], line_offset: int, import_chain: tuple[str, ...]) -> list[Node]:
        children: list[Node] = []
        index = 0
        while index < len(lines):
            line = lines[index].strip()
            if not line:
                index += 1
                continue
            shape = classify_line(line)
            match shape:
                case ImportDirective():
                    children.extend(self._parse_import(shape, import_chain))
                case FunctionHeader():
                    node, index = self._parse_function(shape, lines, index, line_offset)
                    children.append(node)
                case SectionHeader():
                    node, index = self._parse_section(shape, lines, index, line_offset, import_chain)
                    children.append(node)
                case PropertyLine():
                    children.append(self._parse_property(shape))
                case Unrecognized():
                    raise UnknownSyntaxError(shape.text, line=line_offset + index + 1)
            index += 1
        return children

    def _parse_import(self, directive: ImportDirective, import_chain: tuple[str, ...]) -> list[Node]:
        if directive.deferred or not self.config["allow_imports"]:
            self.logger.debug(f"Keeping import reference '{directive.path}'")
            return [ImportNode(name=directive.path, value=directive.path)]

        key = self.loader.resolve(directive.path)
        if key in import_chain:
            raise ImportCycleError([*import_chain, key])
        self.logger.info(f"Expanding import '{directive.path}'")
        text = self.loader.load(directive.path)
        try:
            return self._parse_text(text, (*import_chain, key))
        except ParseError as e:
            # the innermost import owns the reported line
            if e.source is None:
                e.source = directive.path
            raise

    def _parse_function(
        self, header: FunctionHeader, lines: Sequence[str], index: int, line_offset: int
    ) -> tuple[FunctionNode, int]:
        start = index + 1
        if not header.has_open_brace:
            start += 1  # the opening brace sits alone on the next line
        result = scan_block(lines, start, line_offset)
        self.logger.debug(f"Function '{header.name}' with arguments {list(header.arguments)}")
        node = FunctionNode(name=header.name, arguments=header.arguments, body=dedent(result.body))
        return node, result.end_index

    def _parse_section(
        self,
        header: SectionHeader,
        lines: Sequence[str],
        index: int,
        line_offset: int,
        import_chain: tuple[str, ...],
    ) -> tuple[SectionNode, int]:
        properties = parse_attributes(header.attributes_text) if header.attributes_text else {}
        result = scan_block(lines, index + 1, line_offset)
        self.logger.debug(f"Section '{header.name}' spanning lines {line_offset + index + 1}-{line_offset + result.end_index + 1}")
        children = self._parse_lines(result.body.split("\n"), line_offset + index + 1, import_chain)
        node = SectionNode(name=header.name, properties=properties, children=children)
        return node, result.end_index

    def _parse_property(self, line: PropertyLine) -> PropertyNode:
        value_type, value = classify_value(line.raw_value)
        self.logger.debug(f"Property '{line.key}' = {value!r} ({value_type})")
        return PropertyNode(name=line.key, type=value_type, value=value)


def parse(
    text: str,
    allow_imports: bool = False,
    loader: SourceLoader | None = None,
    config: ParserConfig | None = None,
) -> RootNode:
    parser = KantaraParser(config={**(config or {}), "allow_imports": allow_imports}, loader=loader)
    return parser.parse(text)


def parse_file(
    path: str | os.PathLike[str],
    allow_imports: bool = True,
    loader: SourceLoader | None = None,
    config: ParserConfig | None = None,
    encoding: str = "utf-8",
) -> RootNode:
    """Read ``path`` from disk and parse it, expanding imports by default."""
    text = Path(path).read_text(encoding=encoding)
    parser = KantaraParser(config={**(config or {}), "allow_imports": allow_imports}, loader=loader)
    return parser.parse(text, source=os.fspath(path))


__all__ = ["KantaraParser", "ParserConfig", "DEFAULT_CONFIG", "parse", "parse_file"]
