from .attribute_map import AttributeMapParser
from .attribute_string import AttributeStringParser
from .attributes import REMOVE, merge_attributes, merge_classes
from .element import Element
from .errors import (
    HTMLWriterError,
    InvalidAttributeValueError,
    MalformedAttributeStringError,
    MalformedSelectorError,
    VoidElementContentError,
)
from .options import DEFAULT_OPTIONS, WriterOptions
from .selector import SelectorParser
from .writer import Writer

__all__ = [
    "DEFAULT_OPTIONS",
    "REMOVE",
    "AttributeMapParser",
    "AttributeStringParser",
    "Element",
    "HTMLWriterError",
    "InvalidAttributeValueError",
    "MalformedAttributeStringError",
    "MalformedSelectorError",
    "SelectorParser",
    "VoidElementContentError",
    "Writer",
    "WriterOptions",
    "merge_attributes",
    "merge_classes",
]
