# Selector expression parser for htmlwriter
# Supports the `tag#id.class` subset of CSS selectors used to name an element

from __future__ import annotations

from .attributes import CLASS, AttributeSet, class_tokens
from .constants import DEFAULT_TAG, INLINE_FRAGMENT_START
from .errors import MalformedSelectorError


def split_expression(expression: str) -> tuple[str, int]:
    """Return the selector head and the offset where the inline fragment starts.

    Leading whitespace is skipped. The head ends at the first whitespace
    character or ``[``; everything after it belongs to the inline attribute
    fragment.
    """
    start = len(expression) - len(expression.lstrip())
    end = start
    length = len(expression)
    while end < length and expression[end] not in INLINE_FRAGMENT_START:
        end += 1
    return expression[start:end], end


class SelectorParser:
    """Parses ``tag#id.class`` expressions into a tag name and attributes."""

    __slots__ = ("default_tag",)

    default_tag: str

    def __init__(self, default_tag: str = DEFAULT_TAG) -> None:
        self.default_tag = default_tag

    def parse(self, expression: str) -> tuple[str, AttributeSet]:
        head, _ = split_expression(expression)
        return _SelectorScanner(expression, head, self.default_tag).scan()


class _SelectorScanner:
    __slots__ = ("classes", "default_tag", "expression", "head", "id", "length", "offset", "pos", "tag")

    expression: str
    head: str
    pos: int
    length: int
    offset: int
    tag: str | None
    id: str | None
    classes: list[str]

    def __init__(self, expression: str, head: str, default_tag: str) -> None:
        self.expression = expression
        self.head = head
        self.default_tag = default_tag
        self.pos = 0
        self.length = len(head)
        # Position of the head inside the original expression, for error reports
        self.offset = len(expression) - len(expression.lstrip())
        self.tag = None
        self.id = None
        self.classes = []

    def _error(self, message: str) -> MalformedSelectorError:
        return MalformedSelectorError(message, self.expression, self.offset + self.pos)

    def _is_tag_start(self, ch: str) -> bool:
        return ch.isascii() and ch.isalpha()

    def _is_tag_char(self, ch: str) -> bool:
        return ch.isascii() and (ch.isalnum() or ch == "-")

    def _is_name_char(self, ch: str) -> bool:
        # Identifier characters: letters, digits, underscore, hyphen, or non-ASCII
        return ch.isalnum() or ch in "_-" or ord(ch) > 127

    def _read_tag(self) -> str:
        start = self.pos
        while self.pos < self.length and self._is_tag_char(self.head[self.pos]):
            self.pos += 1
        return self.head[start : self.pos]

    def _read_name(self) -> str:
        start = self.pos
        while self.pos < self.length and self._is_name_char(self.head[self.pos]):
            self.pos += 1
        return self.head[start : self.pos]

    def scan(self) -> tuple[str, AttributeSet]:
        if self.pos < self.length:
            ch = self.head[0]
            if self._is_tag_start(ch):
                self.tag = self._read_tag()
            elif ch not in "#.":
                raise self._error(f"Unexpected character {ch!r} where a tag name was expected")

        while self.pos < self.length:
            ch = self.head[self.pos]

            if ch == "#":
                if self.id is not None:
                    raise self._error("Selector has more than one #id")
                self.pos += 1
                name = self._read_name()
                if not name:
                    raise self._error("Expected identifier after #")
                self.id = name
                continue

            if ch == ".":
                self.pos += 1
                name = self._read_name()
                if not name:
                    raise self._error("Expected identifier after .")
                self.classes.append(name)
                continue

            raise self._error(f"Unexpected character {ch!r} in selector")

        attrs: AttributeSet = {}
        if self.id is not None:
            attrs["id"] = self.id
        tokens = class_tokens(self.classes)
        if tokens:
            attrs[CLASS] = " ".join(tokens)
        return self.tag or self.default_tag, attrs
