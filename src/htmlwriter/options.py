"""Writer configuration."""

from __future__ import annotations

import codecs
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .constants import DEFAULT_ENCODING
from .element import Element

if TYPE_CHECKING:
    from typing import Protocol

    from markupsafe import Markup

    from .attributes import AttributeSet

    class RenderTarget(Protocol):
        def render(self) -> Markup: ...

        def render_open(self) -> Markup: ...

        def render_close(self) -> Markup: ...

    ElementFactory = Callable[[str, AttributeSet, Any, str], RenderTarget]


def canonical_encoding(encoding: str) -> str:
    """Return the codec name for `encoding`, rejecting unknown encodings."""
    try:
        return codecs.lookup(encoding).name
    except LookupError as exc:
        raise ValueError(f"Unknown encoding: {encoding!r}") from exc


@dataclass(frozen=True, slots=True)
class WriterOptions:
    """Settings fixed for the lifetime of a `Writer`.

    - `encoding` is used for character references in rendered output and is
      handed to the inline attribute parser.
    - `element_factory(tag, attributes, content, encoding)` builds the render
      target; pass `functools.partial(Element, xhtml=True)` for `<br />`
      style void elements.
    """

    encoding: str = DEFAULT_ENCODING
    element_factory: ElementFactory = Element

    def __post_init__(self) -> None:
        object.__setattr__(self, "encoding", canonical_encoding(self.encoding))
        if not callable(self.element_factory):
            raise TypeError("element_factory must be callable")


DEFAULT_OPTIONS: WriterOptions = WriterOptions()
