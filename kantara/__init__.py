"""Parser and navigation helpers for the Kantara definition language."""

from .exceptions import (
    ImportCycleError,
    ImportIOError,
    KantaraError,
    ParseError,
    UnknownSyntaxError,
    UnterminatedBlockError,
)
from .nodes import (
    BaseNode,
    FunctionNode,
    ImportNode,
    Node,
    PropertyNode,
    RootNode,
    SectionNode,
)
from .loader import FileSourceLoader, SourceLoader
from .parser import KantaraParser, ParserConfig, parse, parse_file
from .navigation import KantaraNode
from .preprocessor import strip_comments
from .values import classify_value
from .attributes import AttributeTokenizer, parse_attributes
from .scanner import dedent, scan_block

__all__ = [
    "ImportCycleError",
    "ImportIOError",
    "KantaraError",
    "ParseError",
    "UnknownSyntaxError",
    "UnterminatedBlockError",
    "BaseNode",
    "FunctionNode",
    "ImportNode",
    "Node",
    "PropertyNode",
    "RootNode",
    "SectionNode",
    "FileSourceLoader",
    "SourceLoader",
    "KantaraParser",
    "ParserConfig",
    "parse",
    "parse_file",
    "KantaraNode",
    "strip_comments",
    "classify_value",
    "AttributeTokenizer",
    "parse_attributes",
    "dedent",
    "scan_block",
]
