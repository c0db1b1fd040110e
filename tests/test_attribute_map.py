"""Tests for normalizing caller-supplied attribute mappings."""

import unittest

from htmlwriter import REMOVE, AttributeMapParser, InvalidAttributeValueError


class TestAttributeMapParser(unittest.TestCase):
    """Accepted names and values."""

    def setUp(self):
        self.parser = AttributeMapParser()

    def test_none_and_empty_mapping(self):
        """No mapping and an empty mapping both mean no attributes."""
        assert self.parser.parse(None) == {}
        assert self.parser.parse({}) == {}

    def test_string_values_are_kept(self):
        """String values pass through unchanged, escaping is left to the renderer."""
        assert self.parser.parse({"title": "x", "href": "/a?b=1&c=2"}) == {"title": "x", "href": "/a?b=1&c=2"}

    def test_numbers_are_stringified(self):
        assert self.parser.parse({"width": 100, "step": 0.5}) == {"width": "100", "step": "0.5"}

    def test_true_is_a_boolean_attribute(self):
        """True renders as a bare attribute, stored as None."""
        assert self.parser.parse({"disabled": True}) == {"disabled": None}

    def test_false_and_none_mark_the_attribute_for_removal(self):
        """False and None remove the attribute, including one set by the selector."""
        attrs = self.parser.parse({"hidden": False, "title": None, "id": "x"})
        assert attrs == {"hidden": REMOVE, "title": REMOVE, "id": "x"}

    def test_false_class_marks_class_for_removal(self):
        assert self.parser.parse({"class": False}) == {"class": REMOVE}

    def test_later_class_replaces_removal_in_same_mapping(self):
        assert self.parser.parse({"cls": None, "class": "b"}) == {"class": "b"}

    def test_class_sequence_is_joined(self):
        """Lists and tuples of class names are joined and deduplicated."""
        assert self.parser.parse({"class": ["a", "b", "a"]}) == {"class": "a b"}
        assert self.parser.parse({"class": ("a b", "c")}) == {"class": "a b c"}

    def test_class_string_is_normalized(self):
        assert self.parser.parse({"class": "  a  b a "}) == {"class": "a b"}

    def test_empty_class_is_dropped(self):
        assert self.parser.parse({"class": ""}) == {}
        assert self.parser.parse({"class": []}) == {}

    def test_python_keyword_aliases(self):
        """class_, for_ and cls map to the reserved attribute names."""
        assert self.parser.parse({"class_": "x", "for_": "y"}) == {"class": "x", "for": "y"}
        assert self.parser.parse({"cls": ["a"], "class": "b"}) == {"class": "a b"}

    def test_names_are_case_sensitive(self):
        assert self.parser.parse({"viewBox": "0 0 1 1", "viewbox": "x"}) == {"viewBox": "0 0 1 1", "viewbox": "x"}


class TestInvalidAttributeValues(unittest.TestCase):
    """Names and values that cannot be rendered."""

    def setUp(self):
        self.parser = AttributeMapParser()

    def test_nested_mapping_is_rejected(self):
        """The error names the offending attribute."""
        with self.assertRaises(InvalidAttributeValueError) as ctx:
            self.parser.parse({"data": {"a": 1}})
        assert ctx.exception.name == "data"
        assert "'data'" in str(ctx.exception)

    def test_sequence_is_only_accepted_for_class(self):
        with self.assertRaises(InvalidAttributeValueError):
            self.parser.parse({"rel": ["noopener"]})

    def test_unsupported_class_values(self):
        for value in (True, [1], {"a"}, 3):
            with self.subTest(value=value), self.assertRaises(InvalidAttributeValueError) as ctx:
                self.parser.parse({"class": value})
            assert ctx.exception.name == "class"

    def test_invalid_names(self):
        for name in ("", 1, "on click", 'x"y', "a=b", "x>"):
            with self.subTest(name=name), self.assertRaises(InvalidAttributeValueError):
                self.parser.parse({name: "v"})

    def test_non_mapping_is_rejected(self):
        with self.assertRaises(InvalidAttributeValueError):
            self.parser.parse("title=x")

    def test_invalid_attribute_value_is_a_type_error(self):
        """InvalidAttributeValueError can be caught as TypeError."""
        with self.assertRaises(TypeError):
            self.parser.parse({"title": object()})
