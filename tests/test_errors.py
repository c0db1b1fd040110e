"""Tests for the error hierarchy and error messages."""

import unittest

from htmlwriter import (
    HTMLWriterError,
    InvalidAttributeValueError,
    MalformedAttributeStringError,
    MalformedSelectorError,
    VoidElementContentError,
)


class TestErrorHierarchy(unittest.TestCase):
    def test_all_errors_share_a_base(self):
        for cls in (
            MalformedSelectorError,
            MalformedAttributeStringError,
            InvalidAttributeValueError,
            VoidElementContentError,
        ):
            assert issubclass(cls, HTMLWriterError)

    def test_builtin_bases(self):
        assert issubclass(MalformedSelectorError, ValueError)
        assert issubclass(MalformedAttributeStringError, ValueError)
        assert issubclass(InvalidAttributeValueError, TypeError)
        assert issubclass(VoidElementContentError, ValueError)


class TestErrorMessages(unittest.TestCase):
    def test_message_with_position(self):
        error = MalformedSelectorError("Expected identifier after #", "div#", 4)
        assert str(error) == "Expected identifier after # at position 4 in 'div#'"
        assert error.message == "Expected identifier after #"
        assert error.expression == "div#"
        assert error.position == 4

    def test_message_without_position(self):
        error = MalformedAttributeStringError("Unclosed '['", "a[x")
        assert str(error) == "Unclosed '[' in 'a[x'"
        assert error.position is None

    def test_invalid_value_keeps_attribute_name(self):
        error = InvalidAttributeValueError("Unsupported value", "data")
        assert error.name == "data"
        assert str(error) == "Unsupported value"
