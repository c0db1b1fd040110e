"""HTML writer: renders elements from `tag#id.class` expressions.

Examples::

    >>> writer = Writer()
    >>> writer.tag("p", "text content")
    Markup('<p>text content</p>')
    >>> writer.tag("div#main.card", {"title": "Card"}, writer.tag("p", "body"))
    Markup('<div id="main" class="card" title="Card"><p>body</p></div>')
    >>> writer.open("a.button[href=/home]")
    Markup('<a class="button" href="/home">')
    >>> writer.close("a.button")
    Markup('</a>')
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .attribute_map import AttributeMapParser
from .attribute_string import AttributeStringParser
from .attributes import merge_attributes
from .errors import InvalidAttributeValueError
from .options import DEFAULT_OPTIONS, WriterOptions
from .selector import SelectorParser

if TYPE_CHECKING:
    from typing import Protocol

    from markupsafe import Markup

    from .attributes import AttributeSet

    class SelectorParserLike(Protocol):
        def parse(self, expression: str) -> tuple[str, AttributeSet]: ...

    class AttributeStringParserLike(Protocol):
        def parse(self, expression: str) -> AttributeSet: ...

    class AttributeMapParserLike(Protocol):
        def parse(self, attributes: Mapping[str, Any] | None) -> AttributeSet: ...


LOG = logging.getLogger(__name__)

# Second positional values of `tag()` that are read as content
_CONTENT_TYPES = (str, int, float)


def _is_content(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, _CONTENT_TYPES) or hasattr(value, "__html__")


def _is_empty(content: Any) -> bool:
    return content is None or (isinstance(content, str) and content == "")


def normalize_call(attributes: Any, content: Any) -> tuple[Mapping[str, Any] | None, Any]:
    """Resolve the two call shapes of `Writer.tag`.

    | attributes                      | content        | result                     |
    | ------------------------------- | -------------- | -------------------------- |
    | None                            | any            | (None, content)            |
    | mapping                         | any            | (attributes, content)      |
    | str / number / has __html__     | None or ""     | (None, attributes)         |
    | str / number / has __html__     | non-empty      | InvalidAttributeValueError |
    | anything else                   | any            | InvalidAttributeValueError |

    `content` itself must be None or str / number / has __html__.
    """
    if content is not None and not _is_content(content):
        raise InvalidAttributeValueError(f"Unsupported content type: {type(content).__name__}", None)
    if attributes is None or isinstance(attributes, Mapping):
        return attributes, content
    if not _is_content(attributes):
        raise InvalidAttributeValueError(
            f"Expected an attribute mapping or content, got {type(attributes).__name__}", None
        )
    if not _is_empty(content):
        raise InvalidAttributeValueError(
            "Content was given twice: pass attributes as a mapping when content is set", None
        )
    if _is_empty(attributes):
        return None, None
    return None, attributes


class Writer:
    """Renders tags from selector expressions and attribute data.

    The three parsers are replaceable: pass them at construction or assign the
    matching property later. Defaults are created on first use from
    `options`.
    """

    __slots__ = ("_attribute_map_parser", "_attribute_string_parser", "_selector_parser", "options")

    def __init__(
        self,
        options: WriterOptions | None = None,
        *,
        selector_parser: SelectorParserLike | None = None,
        attribute_string_parser: AttributeStringParserLike | None = None,
        attribute_map_parser: AttributeMapParserLike | None = None,
    ) -> None:
        self.options = options or DEFAULT_OPTIONS
        self._selector_parser = selector_parser
        self._attribute_string_parser = attribute_string_parser
        self._attribute_map_parser = attribute_map_parser

    # -----------------
    # Capability slots
    # -----------------

    @property
    def selector_parser(self) -> SelectorParserLike:
        if self._selector_parser is None:
            self._selector_parser = SelectorParser()
        return self._selector_parser

    @selector_parser.setter
    def selector_parser(self, parser: SelectorParserLike) -> None:
        self._selector_parser = parser

    @property
    def attribute_string_parser(self) -> AttributeStringParserLike:
        if self._attribute_string_parser is None:
            self._attribute_string_parser = AttributeStringParser(self.options.encoding)
        return self._attribute_string_parser

    @attribute_string_parser.setter
    def attribute_string_parser(self, parser: AttributeStringParserLike) -> None:
        self._attribute_string_parser = parser

    @property
    def attribute_map_parser(self) -> AttributeMapParserLike:
        if self._attribute_map_parser is None:
            self._attribute_map_parser = AttributeMapParser()
        return self._attribute_map_parser

    @attribute_map_parser.setter
    def attribute_map_parser(self, parser: AttributeMapParserLike) -> None:
        self._attribute_map_parser = parser

    # -----------------
    # Rendering
    # -----------------

    def resolve(self, selector: str, attributes: Mapping[str, Any] | None = None) -> tuple[str, AttributeSet]:
        """Return the tag name and merged attributes for `selector`.

        Precedence, lowest first: selector `#id`/`.class`, inline attribute
        fragment, `attributes` mapping. Class tokens from every source are
        unioned instead of replaced.
        """
        tag, from_selector = self.selector_parser.parse(selector)
        from_string = self.attribute_string_parser.parse(selector)
        from_map = self.attribute_map_parser.parse(attributes)
        attrs = merge_attributes(from_selector, from_string, from_map)
        LOG.debug("Resolved %r to <%s> with %r", selector, tag, attrs)
        return tag, attrs

    def tag(self, selector: str, attributes: Any = None, content: Any = None) -> Markup:
        """Render a complete element.

        `attributes` may be the content itself when no mapping is needed:
        `tag("p", "text")` is the same as `tag("p", {}, "text")`.
        """
        attributes, content = normalize_call(attributes, content)
        tag, attrs = self.resolve(selector, attributes)
        return self.options.element_factory(tag, attrs, content, self.options.encoding).render()

    def open(self, selector: str, attributes: Mapping[str, Any] | None = None) -> Markup:
        """Render the opening tag only (the whole element for void tags)."""
        tag, attrs = self.resolve(selector, attributes)
        return self.options.element_factory(tag, attrs, None, self.options.encoding).render_open()

    def close(self, selector: str) -> Markup:
        """Render the closing tag; ids, classes and inline attributes are discarded."""
        tag, _ = self.selector_parser.parse(selector)
        return self.options.element_factory(tag, {}, None, self.options.encoding).render_close()
