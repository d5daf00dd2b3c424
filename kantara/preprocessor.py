"""Comment stripping applied to raw source before line parsing."""

from __future__ import annotations

import re

LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def strip_comments(text: str) -> str:
    """Remove ``//`` line comments and ``/* */`` block comments.

    Quoted strings are not recognized, so comment markers inside a string
    literal still start a comment.
    """
    text = LINE_COMMENT.sub("", text)
    return BLOCK_COMMENT.sub("", text)
