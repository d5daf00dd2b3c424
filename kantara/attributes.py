"""Tokenizer for the inline attributes that follow a section name."""

from __future__ import annotations

from kantara.values import Scalar, to_boolean, to_number


class AttributeTokenizer:
    """Cursor-based reader for ``key``, ``key: value`` and ``"quoted key": "quoted value"`` lists.

    A key without a colon is a flag and maps to ``True``. Values are coerced
    to numbers or booleans when possible, otherwise kept as raw strings.
    Quoted runs may contain spaces and colons; unquoted runs cannot.
    """

    def __init__(self, text: str):
        self.text = text
        self.attributes: dict[str, Scalar] = {}
        self._pos = 0

    def tokenize(self) -> dict[str, Scalar]:
        while not self._is_eof:
            self._consume_whitespace()
            if self._is_eof:
                break
            key = self._read_key()
            self._consume_whitespace()
            if self._peek() == ":":
                self._advance()
                self.attributes[key] = self._coerce(self._read_value())
            else:
                self.attributes[key] = True
        return self.attributes

    def _read_key(self) -> str:
        if self._peek() == '"':
            return self._read_quoted()
        return self._read_while(lambda c: not c.isspace() and c != ":")

    def _read_value(self) -> str:
        self._consume_whitespace()
        if self._peek() == '"':
            return self._read_quoted()
        return self._read_while(lambda c: not c.isspace())

    def _read_quoted(self) -> str:
        self._advance()  # opening quote
        value = self._read_while(lambda c: c != '"')
        if not self._is_eof:
            self._advance()  # closing quote
        return value

    def _coerce(self, raw: str) -> Scalar:
        number = to_number(raw)
        if number is not None:
            return number
        boolean = to_boolean(raw)
        if boolean is not None:
            return boolean
        return raw

    # Helpers -----------------------------------------------------------------
    def _read_while(self, condition) -> str:
        start = self._pos
        while not self._is_eof and condition(self._peek()):
            self._advance()
        return self.text[start : self._pos]

    def _consume_whitespace(self) -> None:
        self._read_while(str.isspace)

    @property
    def _is_eof(self) -> bool:
        return self._pos >= len(self.text)

    def _peek(self) -> str:
        if self._is_eof:
            return "\0"
        return self.text[self._pos]

    def _advance(self) -> str:
        char = self.text[self._pos]
        self._pos += 1
        return char


def parse_attributes(text: str) -> dict[str, Scalar]:
    return AttributeTokenizer(text).tokenize()


__all__ = ["AttributeTokenizer", "parse_attributes"]
