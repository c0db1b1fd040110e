"""Inline attribute fragments embedded in a selector expression.

Anything after the selector head (the first whitespace character or ``[``)
is read as a sequence of attribute pairs:

    a.button[href=/home][target=_blank] title="Go home" hidden

- ``name=value`` with an unquoted value that runs until whitespace or ``]``
- ``name="value"`` / ``name='value'``, where a backslash escapes the next
  character
- a bare ``name`` for a boolean attribute
- pairs may be grouped in (non-nested) brackets

Character references in values are decoded, so the resulting attribute set
holds raw text and the renderer escapes it exactly once.
"""

from __future__ import annotations

import html

from .attributes import AttributeSet, set_attribute
from .constants import ATTRIBUTE_NAME_FORBIDDEN, DEFAULT_ENCODING, SELECTOR_TOKEN_START, WHITESPACE
from .errors import MalformedAttributeStringError
from .options import canonical_encoding
from .selector import split_expression

_QUOTES = "\"'"


class AttributeStringParser:
    """Parses the inline attribute fragment of a selector expression.

    `encoding` is canonicalized and kept so the writer hands every parser,
    including a replacement, the same setting. Parsing itself does not depend
    on it: values are decoded to raw text, and the renderer turns characters
    the encoding cannot hold into numeric references.
    """

    __slots__ = ("encoding",)

    encoding: str

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = canonical_encoding(encoding)

    def parse(self, expression: str) -> AttributeSet:
        _, start = split_expression(expression)
        if start >= len(expression.rstrip()):
            return {}
        return _FragmentScanner(expression, start).scan()


class _FragmentScanner:
    __slots__ = ("attrs", "bracket_start", "expression", "length", "pos")

    expression: str
    pos: int
    length: int
    bracket_start: int | None
    attrs: AttributeSet

    def __init__(self, expression: str, start: int) -> None:
        self.expression = expression
        self.pos = start
        self.length = len(expression)
        self.bracket_start = None
        self.attrs = {}

    def _error(self, message: str, position: int | None = None) -> MalformedAttributeStringError:
        return MalformedAttributeStringError(message, self.expression, self.pos if position is None else position)

    def _peek(self) -> str:
        if self.pos < self.length:
            return self.expression[self.pos]
        return ""

    def _read_name(self) -> str:
        start = self.pos
        while self.pos < self.length and self.expression[self.pos] not in ATTRIBUTE_NAME_FORBIDDEN:
            self.pos += 1
        return self.expression[start : self.pos]

    def _read_quoted(self, quote: str) -> str:
        opening = self.pos
        # Skip opening quote
        self.pos += 1
        start = self.pos
        parts: list[str] = []

        while self.pos < self.length:
            ch = self.expression[self.pos]
            if ch == quote:
                parts.append(self.expression[start : self.pos])
                self.pos += 1
                return "".join(parts)
            if ch == "\\":
                parts.append(self.expression[start : self.pos])
                self.pos += 1
                if self.pos < self.length:
                    parts.append(self.expression[self.pos])
                    self.pos += 1
                start = self.pos
            else:
                self.pos += 1

        raise self._error("Unterminated quoted value", opening)

    def _read_unquoted(self) -> str:
        start = self.pos
        while self.pos < self.length:
            ch = self.expression[self.pos]
            if ch in WHITESPACE or ch == "]":
                break
            if ch in _QUOTES:
                raise self._error(f"Unexpected {ch!r} in unquoted value")
            self.pos += 1
        return self.expression[start : self.pos]

    def _read_pair(self) -> None:
        ch = self._peek()
        if ch and ch in SELECTOR_TOKEN_START:
            raise self._error(
                f"Unexpected {ch!r} at the start of an attribute name; #id and .class belong to the selector head"
            )

        name = self._read_name()
        if not name:
            ch = self._peek()
            if ch == "=":
                raise self._error("Expected attribute name before '='")
            raise self._error(f"Unexpected character {ch!r} where an attribute name was expected")

        value: str | None = None
        if self._peek() == "=":
            self.pos += 1
            ch = self._peek()
            value = self._read_quoted(ch) if ch and ch in _QUOTES else self._read_unquoted()
            value = html.unescape(value)

        # A pair must be followed by whitespace, a bracket, or the end
        ch = self._peek()
        if ch and ch not in WHITESPACE and ch not in "[]":
            raise self._error(f"Expected whitespace after attribute {name!r}")

        set_attribute(self.attrs, name, value)

    def scan(self) -> AttributeSet:
        while self.pos < self.length:
            ch = self.expression[self.pos]

            if ch in WHITESPACE:
                self.pos += 1
                continue

            if ch == "[":
                if self.bracket_start is not None:
                    raise self._error("Nested '[' in attribute fragment")
                self.bracket_start = self.pos
                self.pos += 1
                continue

            if ch == "]":
                if self.bracket_start is None:
                    raise self._error("Unbalanced ']' in attribute fragment")
                self.bracket_start = None
                self.pos += 1
                ch = self._peek()
                if ch and ch not in WHITESPACE and ch != "[":
                    raise self._error("Expected whitespace after ']'")
                continue

            self._read_pair()

        if self.bracket_start is not None:
            raise self._error("Unclosed '[' in attribute fragment", self.bracket_start)
        return self.attrs
