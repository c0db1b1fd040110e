"""Normalization of caller-supplied attribute mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .attributes import CLASS, REMOVE, AttributeSet, class_tokens, set_attribute
from .constants import ATTRIBUTE_NAME_FORBIDDEN
from .errors import InvalidAttributeValueError

# Python-friendly spellings for reserved words
_ALIASES = {"cls": CLASS}


def normalize_name(name: Any) -> str:
    """Validate an attribute name, resolving `cls` and trailing-underscore aliases."""
    if not isinstance(name, str) or not name:
        raise InvalidAttributeValueError(f"Attribute names must be non-empty strings, got {name!r}", None)
    if name in _ALIASES:
        return _ALIASES[name]
    if name.endswith("_") and len(name) > 1:
        name = name[:-1]
    if any(ch in ATTRIBUTE_NAME_FORBIDDEN for ch in name):
        raise InvalidAttributeValueError(f"Invalid attribute name {name!r}", name)
    return name


class AttributeMapParser:
    """Turns a mapping of attribute names to values into an attribute set.

    Accepted values:

    - ``str``: kept as is
    - ``int`` / ``float``: converted with ``str()``
    - ``True``: boolean attribute, rendered bare
    - ``False`` / ``None``: attribute omitted, also when an earlier source
      (selector or inline fragment) set it; for ``class`` this drops every
      earlier class token
    - ``list`` / ``tuple`` of strings: class tokens, for ``class`` only
    """

    __slots__ = ()

    def parse(self, attributes: Mapping[str, Any] | None) -> AttributeSet:
        if attributes is None:
            return {}
        if not isinstance(attributes, Mapping):
            raise InvalidAttributeValueError(
                f"Attributes must be a mapping, got {type(attributes).__name__}", None
            )

        attrs: AttributeSet = {}
        for raw_name, value in attributes.items():
            name = normalize_name(raw_name)
            if value is None or value is False:
                set_attribute(attrs, name, REMOVE)
                continue
            if name == CLASS:
                set_attribute(attrs, CLASS, self._class_value(value))
                continue
            set_attribute(attrs, name, self._value(name, value))
        return attrs

    def _value(self, name: str, value: Any) -> str | None:
        if value is True:
            return None
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        raise InvalidAttributeValueError(
            f"Unsupported value for attribute {name!r}: {type(value).__name__}", name
        )

    def _class_value(self, value: Any) -> str:
        if isinstance(value, str):
            return " ".join(class_tokens(value))
        if isinstance(value, (list, tuple)):
            for token in value:
                if not isinstance(token, str):
                    raise InvalidAttributeValueError(
                        f"Class tokens must be strings, got {type(token).__name__}", CLASS
                    )
            return " ".join(class_tokens(value))
        raise InvalidAttributeValueError(f"Unsupported value for attribute 'class': {type(value).__name__}", CLASS)
