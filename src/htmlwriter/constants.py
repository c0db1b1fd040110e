"""
HTML constants and defaults used by the writer.

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/syntax.html#attributes-2
"""

DEFAULT_TAG = "div"
DEFAULT_ENCODING = "UTF-8"

# Elements rendered without a closing tag
VOID_ELEMENTS = frozenset(
    [
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    ]
)

WHITESPACE = " \t\n\r\f"

# Characters that end the selector head and start the inline attribute fragment
INLINE_FRAGMENT_START = WHITESPACE + "["

# Characters never allowed in an attribute name
ATTRIBUTE_NAME_FORBIDDEN = WHITESPACE + "\"'=<>/[]"

# Characters that start an id or class token; never valid at the start of an inline attribute name
SELECTOR_TOKEN_START = "#."
