"""Lazy ``Cookie`` header parsing.

``parse_header`` walks a header value once, left to right, and yields one
``CookieResult`` per well-formed ``name=value`` entry::

    from crumb import parse_header

    for result in parse_header("session=abc;123; theme=dark"):
        if result:
            print(result.cookie.name, result.cookie.value)
    # session abc;123
    # theme dark

Entries that are empty, have no ``=``, or have an empty name are consumed
and skipped without producing an item. An entry whose value fails to
percent-decode produces an item holding a ``DecodeError``; the scan goes on.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Self

from crumb._internal.chars import WHITESPACE
from crumb.config import DEFAULT_CONFIG, ParseConfig
from crumb.cookie import Cookie
from crumb.errors import ConfigurationError, DecodeError
from crumb.factory import CookieFactory, EncodedCookieFactory
from crumb.scanner import find_entry_end

logger = logging.getLogger("crumb.parser")


@dataclass(frozen=True, slots=True)
class CookieResult[T]:
    """One parsed entry: a cookie, or the error that prevented building it.

    The result is falsy when it holds an error, so you can write::

        cookies = [r.cookie for r in parse_header(header) if r]
    """

    cookie: T | None = None
    error: DecodeError | None = None

    def __post_init__(self) -> None:
        if (self.cookie is None) == (self.error is None):
            msg = "CookieResult needs exactly one of cookie or error"
            raise ValueError(msg)

    @property
    def ok(self) -> bool:
        """True if a cookie was built."""
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the cookie, or raise the stored ``DecodeError``."""
        if self.error is not None:
            raise self.error
        return self.cookie  # type: ignore[return-value]


class HeaderStringCookies[T]:
    """Single-pass iterator over the cookies in one header value.

    Each ``next()`` advances the cursor past exactly one resolved entry.
    The cursor only moves forward, so every finite input terminates, even
    one made of nothing but semicolons. Replaying a header means creating
    a new iterator.
    """

    __slots__ = ("_config", "_factory", "_last", "_string")

    def __init__(
        self,
        string: str | bytes,
        factory: CookieFactory[T],
        config: ParseConfig | None = None,
    ) -> None:
        if isinstance(string, bytes):
            string = string.decode("latin-1")
        if config is None:
            config = DEFAULT_CONFIG
        if config.percent_decode and not isinstance(factory, EncodedCookieFactory):
            msg = (
                f"percent_decode=True requires a factory with from_encoded(); "
                f"{factory!r} only provides from_parts()"
            )
            raise ConfigurationError(msg)
        self._string = string
        self._factory = factory
        self._config = config
        self._last = 0

    def __repr__(self) -> str:
        return f"HeaderStringCookies(position={self._last}, length={len(self._string)})"

    @property
    def position(self) -> int:
        """Offset of the first unconsumed character."""
        return self._last

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> CookieResult[T]:
        s = self._string
        length = len(s)

        while self._last < length:
            start = self._last
            end = find_entry_end(s, start)
            self._last = min(end + 1, length)

            entry = s[start:end].strip(WHITESPACE)
            if not entry:
                continue

            name, sep, value = entry.partition("=")
            if not sep:
                logger.debug("Skipping cookie entry without '=' at offset %d", start)
                continue

            name = name.strip(WHITESPACE)
            value = value.strip(WHITESPACE)
            if not name:
                logger.debug("Skipping cookie entry with empty name at offset %d", start)
                continue

            return self._build(name, value, start)

        raise StopIteration

    def _build(self, name: str, value: str, offset: int) -> CookieResult[T]:
        if "%" in value and self._config.percent_decode:
            factory: Any = self._factory
            try:
                return CookieResult(cookie=factory.from_encoded(f"{name}={value}"))
            except DecodeError as exc:
                logger.debug("Cookie %r at offset %d failed to decode: %s", name, offset, exc)
                return CookieResult(error=exc)
        return CookieResult(cookie=self._factory.from_parts(name, value))

    def cookies(self) -> Iterator[T]:
        """Yield only the successfully built cookies, dropping decode errors."""
        for result in self:
            if result.error is None:
                yield result.cookie  # type: ignore[misc]


def parse_header[T](
    header: str | bytes,
    factory: CookieFactory[T] = Cookie,  # type: ignore[assignment]
    config: ParseConfig | None = None,
) -> HeaderStringCookies[T]:
    """Start a lazy scan over a ``Cookie`` header value.

    *factory* selects the output type; the default builds ``Cookie``
    objects. Pass ``ParseConfig(percent_decode=True)`` to decode values
    containing ``%``.
    """
    return HeaderStringCookies(header, factory, config)


def parse_cookies(header: str | bytes, *, percent_decode: bool = False) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for empty or missing headers. Later duplicates
    win. Entries that fail to decode are left out.
    """
    if not header:
        return {}
    config = ParseConfig(percent_decode=percent_decode)
    return {c.name: c.value for c in parse_header(header, Cookie, config).cookies()}
