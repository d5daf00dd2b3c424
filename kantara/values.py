"""Primitive type inference for scalar tokens."""

from __future__ import annotations

import re
from typing import Literal

Scalar = str | int | float | bool
ValueType = Literal["string", "number", "boolean"]

QUOTED = re.compile(r'^".*"$', re.DOTALL)
DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
PREFIXED_INTEGER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
INFINITY = {"Infinity": float("inf"), "+Infinity": float("inf"), "-Infinity": float("-inf")}


def to_number(raw: str) -> int | float | None:
    """Coerce ``raw`` to a number, or return ``None`` when it is not numeric.

    Blank text coerces to ``0``. Decimal integers and ``0x``/``0o``/``0b``
    literals give ints; fractions, exponents and ``Infinity`` give floats.
    """
    text = raw.strip()
    if not text:
        return 0
    if PREFIXED_INTEGER.fullmatch(text):
        return int(text, 0)
    if text in INFINITY:
        return INFINITY[text]
    if not DECIMAL.fullmatch(text):
        return None
    if "." in text or "e" in text or "E" in text:
        return float(text)
    return int(text)


def to_boolean(raw: str) -> bool | None:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def classify_value(raw: str) -> tuple[ValueType, Scalar]:
    """Infer the primitive type of a property value.

    Checks run in order: whole-token double quotes, numeric coercion, the
    literals ``true``/``false``, and finally the unquoted string fallback.
    """
    token = raw.strip()
    if QUOTED.match(token):
        return "string", token[1:-1]
    number = to_number(token)
    if number is not None:
        return "number", number
    boolean = to_boolean(token)
    if boolean is not None:
        return "boolean", boolean
    return "string", token
