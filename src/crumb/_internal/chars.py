"""Cookie-name and whitespace character classes used for boundary detection.

Looser than the RFC 6265 token grammar on purpose: these only decide
whether the text after a semicolon looks like the start of a new
``name=`` entry. The final name is not validated against them.
"""

import string

_NAME_START = frozenset(string.ascii_letters + string.digits + "_")
_NAME_CHAR = _NAME_START | {"-"}

# Unicode White_Space. Unlike str.isspace, excludes the U+001C..U+001F separators.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_WHITESPACE = frozenset(WHITESPACE)


def is_name_start(c: str) -> bool:
    """True if *c* may begin a cookie name (ASCII alphanumeric or ``_``)."""
    return c in _NAME_START


def is_name_char(c: str) -> bool:
    """True if *c* may continue a cookie name (``is_name_start`` plus ``-``)."""
    return c in _NAME_CHAR


def is_whitespace(c: str) -> bool:
    return c in _WHITESPACE
