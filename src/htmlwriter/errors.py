"""Errors raised while resolving selectors and attributes."""

from __future__ import annotations


class HTMLWriterError(Exception):
    """Base class for every error raised by htmlwriter."""


class _ExpressionError(HTMLWriterError):
    """An error located at a position inside a selector expression."""

    def __init__(self, message: str, expression: str, position: int | None = None) -> None:
        self.message = message
        self.expression = expression
        self.position = position
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.position is not None:
            return f"{self.message} at position {self.position} in {self.expression!r}"
        return f"{self.message} in {self.expression!r}"


class MalformedSelectorError(_ExpressionError, ValueError):
    """Raised when a selector expression does not follow `tag#id.class`."""


class MalformedAttributeStringError(_ExpressionError, ValueError):
    """Raised when an inline attribute fragment is unterminated or unbalanced."""


class InvalidAttributeValueError(HTMLWriterError, TypeError):
    """Raised for attribute names or values the normalizer cannot render."""

    def __init__(self, message: str, name: str | None = None) -> None:
        self.name = name
        super().__init__(message)


class VoidElementContentError(HTMLWriterError, ValueError):
    """Raised when content is given for an element that cannot have any."""
