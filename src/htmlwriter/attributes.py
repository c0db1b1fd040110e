"""Attribute sets and the merge rules shared by every attribute source.

An attribute set is a plain ``dict[str, str | None]``. A string value renders
as ``name="value"``; ``None`` marks a boolean attribute that renders as a bare
``name``. The ``class`` attribute holds a whitespace-delimited token list that
is kept deduplicated in first-seen order and is never empty.

A source may also map a name to ``REMOVE``: merging it deletes that attribute,
including any ``class`` tokens, from the lower-precedence sources. ``REMOVE``
never survives `merge_attributes`.
"""

from __future__ import annotations

from collections.abc import Iterable


class Removed:
    __slots__ = ()

    def __repr__(self) -> str:
        return "REMOVE"


REMOVE = Removed()

AttributeSet = dict[str, str | None | Removed]

CLASS = "class"


def class_tokens(value: str | Iterable[str] | None) -> list[str]:
    """Split a class value into unique tokens, keeping first-seen order."""
    if value is None:
        return []
    raw = value.split() if isinstance(value, str) else [tok for part in value for tok in str(part).split()]
    tokens: list[str] = []
    for tok in raw:
        tok = tok.strip()
        if tok and tok not in tokens:
            tokens.append(tok)
    return tokens


def merge_classes(*values: str | Iterable[str] | None) -> str:
    tokens: list[str] = []
    for value in values:
        for tok in class_tokens(value):
            if tok not in tokens:
                tokens.append(tok)
    return " ".join(tokens)


def set_attribute(attrs: AttributeSet, name: str, value: str | None | Removed) -> None:
    """Store one attribute, unioning class tokens instead of replacing them."""
    if value is REMOVE:
        attrs[name] = REMOVE
        return
    if name == CLASS:
        current = attrs.get(CLASS)
        merged = merge_classes(None if current is REMOVE else current, value)
        if merged:
            attrs[CLASS] = merged
        return
    attrs[name] = value


def merge_attributes(*sources: AttributeSet) -> AttributeSet:
    """Merge attribute sets from lowest to highest precedence.

    Later sources override earlier ones on key collision, except ``class``,
    whose tokens accumulate across every source. ``REMOVE`` deletes the
    attribute gathered so far. Key order follows first insertion.
    """
    merged: AttributeSet = {}
    for source in sources:
        for name, value in source.items():
            if value is REMOVE:
                merged.pop(name, None)
                continue
            set_attribute(merged, name, value)
    return merged
