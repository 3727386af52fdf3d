"""The default cookie type and its percent-decoding.

``Cookie`` is the generic output of a scan: a frozen name/value pair.
The class itself satisfies ``EncodedCookieFactory[Cookie]``, so it can be
passed straight to ``parse_header``.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self
from urllib.parse import quote, unquote

from crumb._internal.chars import WHITESPACE
from crumb.errors import DecodeError


def decode_component(text: str) -> str:
    """Percent-decode *text* as UTF-8.

    Malformed escapes such as ``%ZZ`` are kept verbatim. Escapes that
    decode to invalid UTF-8 raise ``DecodeError``.
    """
    if "%" not in text:
        return text
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise DecodeError(text, exc.reason) from exc


def decode_pair(text: str) -> tuple[str, str]:
    """Split one ``name=value`` string on its first ``=`` and decode both sides.

    Everything after the first ``=`` is the value, including any further
    ``=`` or decoded ``;``.
    """
    name, sep, value = text.partition("=")
    if not sep:
        raise DecodeError(text, "missing '='")
    return decode_component(name.strip(WHITESPACE)), decode_component(value.strip(WHITESPACE))


@dataclass(frozen=True, slots=True)
class Cookie:
    """A cookie parsed from a ``Cookie`` request header.

    Request-side cookies carry no attributes, only a name and a value.
    """

    name: str
    value: str

    @classmethod
    def from_parts(cls, name: str, value: str) -> Self:
        return cls(name, value)

    @classmethod
    def from_encoded(cls, text: str) -> Self:
        """Build from one ``name=value`` string, percent-decoding both sides."""
        return cls(*decode_pair(text))

    def name_value(self) -> tuple[str, str]:
        return (self.name, self.value)

    def to_header_value(self, *, encode: bool = False) -> str:
        """Serialize as ``name=value``.

        With ``encode=True`` both sides are percent-encoded, so a value
        holding ``;`` or spaces round-trips through a strict splitter.
        """
        if encode:
            return f"{quote(self.name, safe='')}={quote(self.value, safe='')}"
        return f"{self.name}={self.value}"

    def __str__(self) -> str:
        return self.to_header_value()


def to_header(cookies: Iterable[Cookie], *, encode: bool = False) -> str:
    """Join cookies back into a ``Cookie`` header value."""
    return "; ".join(c.to_header_value(encode=encode) for c in cookies)
