"""Separator disambiguation for ``Cookie`` header values.

A semicolon inside a ``Cookie`` header is either a true separator between
two entries or literal content of an unquoted value::

    session=abc;def; other=value
               ^   ^
               |   separator: followed by ``other=``
               literal: ``def`` is not followed by ``=``

A semicolon is a separator when the text after it (leading whitespace
skipped) is empty, starts with another semicolon, or looks like a new
``name=`` entry. Every function here is pure over ``(string, offset)``
so the look-ahead can be tested without a running scan.
"""

from crumb._internal.chars import is_name_char, is_name_start, is_whitespace


def skip_whitespace(s: str, i: int) -> int:
    """Return the first index ``>= i`` that is not whitespace, or ``len(s)``."""
    n = len(s)
    while i < n and is_whitespace(s[i]):
        i += 1
    return i


def is_separator(s: str, j: int) -> bool:
    """True if the semicolon at *j* ends the current entry.

    The name test is equivalent to "the trimmed text before the first
    ``=`` after *j* is non-empty and made only of name characters",
    evaluated without slicing the remainder.
    """
    n = len(s)
    k = skip_whitespace(s, j + 1)
    if k >= n or s[k] == ";":
        return True
    if not is_name_start(s[k]):
        return False
    k += 1
    while k < n and is_name_char(s[k]):
        k += 1
    k = skip_whitespace(s, k)
    return k < n and s[k] == "="


def find_real_separator(s: str, j: int) -> int:
    """Find where an entry ends when the semicolon at *j* is literal.

    Scans forward for the first later semicolon that passes
    ``is_separator``. Returns ``len(s)`` when the value runs to the end.
    """
    n = len(s)
    i = skip_whitespace(s, j + 1)
    while True:
        i = s.find(";", i)
        if i == -1:
            return n
        if is_separator(s, i):
            return i
        i += 1


def resolve_separator(s: str, j: int) -> int:
    """Return the end of the entry whose first candidate boundary is *j*."""
    if is_separator(s, j):
        return j
    return find_real_separator(s, j)


def find_entry_end(s: str, start: int) -> int:
    """Return the exclusive end of the entry beginning at *start*.

    The result is ``>= start``; ``len(s)`` when no separator follows.
    """
    j = s.find(";", start)
    if j == -1:
        return len(s)
    return resolve_separator(s, j)
