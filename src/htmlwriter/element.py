"""Default element renderer: turns a resolved render target into markup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup, escape

from .attributes import AttributeSet
from .constants import DEFAULT_ENCODING, VOID_ELEMENTS
from .errors import VoidElementContentError


def _encode(text: str, encoding: str) -> Markup:
    # Characters the target encoding cannot represent become numeric references
    return Markup(text.encode(encoding, "xmlcharrefreplace").decode(encoding))


def serialize_start_tag(
    name: str,
    attrs: AttributeSet | None,
    *,
    use_trailing_solidus: bool = False,
    is_void: bool = False,
) -> str:
    attrs = attrs or {}
    parts: list[str] = ["<", name]
    for key, value in attrs.items():
        if value is None:
            parts.extend([" ", key])
            continue
        parts.extend([" ", key, '="', escape(value), '"'])

    if use_trailing_solidus and is_void:
        parts.append(" />")
    else:
        parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


@dataclass(frozen=True, slots=True)
class Element:
    """A render target: tag name, resolved attributes, content and encoding.

    - `content=None` means no body was given, `""` an explicitly empty one;
      both render an empty element.
    - Void elements render as their opening tag alone, and their closing tag
      renders as an empty string.
    - Attribute values and content are escaped once with markupsafe. Values
      implementing `__html__` (such as the output of a nested render) are
      inserted as they are.
    """

    tag: str
    attributes: AttributeSet = field(default_factory=dict)
    content: Any = None
    encoding: str = DEFAULT_ENCODING
    xhtml: bool = False

    @property
    def is_void(self) -> bool:
        return self.tag.lower() in VOID_ELEMENTS

    def render(self) -> Markup:
        if self.is_void:
            if self.content is not None and str(self.content) != "":
                raise VoidElementContentError(f"<{self.tag}> is a void element and cannot have content")
            return self.render_open()

        # Join as plain str: adding a str to Markup escapes the str
        body = str(escape(self.content)) if self.content is not None else ""
        return _encode(
            "".join([serialize_start_tag(self.tag, self.attributes), body, serialize_end_tag(self.tag)]),
            self.encoding,
        )

    def render_open(self) -> Markup:
        return _encode(
            serialize_start_tag(
                self.tag,
                self.attributes,
                use_trailing_solidus=self.xhtml,
                is_void=self.is_void,
            ),
            self.encoding,
        )

    def render_close(self) -> Markup:
        if self.is_void:
            return Markup("")
        return Markup(serialize_end_tag(self.tag))

    def __html__(self) -> Markup:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())
