"""Cookies for HTTP client cookie jars.

httpx (like most Python HTTP clients) keeps cookies in a stdlib
``http.cookiejar.CookieJar``. ``JarCookieFactory`` builds
``http.cookiejar.Cookie`` objects straight from a scan, and
``cookies_for_httpx`` loads them into an ``httpx.Cookies`` jar::

    from crumb.httpx_support import cookies_for_httpx

    jar = cookies_for_httpx("session=abc;xyz; user=john", domain="example.com")
    httpx.get("https://example.com/", cookies=jar)

Requires ``pip install crumb[httpx]`` for ``cookies_for_httpx``.
The factory and ``parse_for_httpx`` only need the standard library.
"""

import logging
from dataclasses import dataclass
from http.cookiejar import Cookie as JarCookie
from typing import Any

from crumb.config import ParseConfig
from crumb.cookie import decode_pair
from crumb.errors import BackendNotInstalledError
from crumb.parser import HeaderStringCookies

logger = logging.getLogger("crumb.httpx")


def _get_httpx() -> Any:
    """Import httpx or raise a clear error."""
    try:
        import httpx

        return httpx
    except ImportError:
        msg = (
            "crumb.httpx_support requires 'httpx' to build a cookie jar. "
            "Install it with: pip install crumb[httpx]"
        )
        raise BackendNotInstalledError(msg) from None


@dataclass(frozen=True, slots=True)
class JarCookieFactory:
    """Builds ``http.cookiejar.Cookie`` objects scoped to *domain* and *path*.

    Field defaults match what ``httpx.Cookies.set`` produces, so a parsed
    cookie and one set by hand are indistinguishable inside the jar.
    """

    domain: str = ""
    path: str = "/"

    def from_parts(self, name: str, value: str) -> JarCookie:
        return JarCookie(
            version=0,
            name=name,
            value=value,
            port=None,
            port_specified=False,
            domain=self.domain,
            domain_specified=bool(self.domain),
            domain_initial_dot=self.domain.startswith("."),
            path=self.path,
            path_specified=bool(self.path),
            secure=False,
            expires=None,
            discard=True,
            comment=None,
            comment_url=None,
            rest={"HttpOnly": None},
            rfc2109=False,
        )

    def from_encoded(self, text: str) -> JarCookie:
        return self.from_parts(*decode_pair(text))


def parse_for_httpx(
    header: str | bytes,
    domain: str = "",
    path: str = "/",
    config: ParseConfig | None = None,
) -> HeaderStringCookies[JarCookie]:
    """Start a lazy scan that yields ``http.cookiejar.Cookie`` results."""
    return HeaderStringCookies(header, JarCookieFactory(domain, path), config)


def cookies_for_httpx(
    header: str | bytes,
    domain: str = "",
    path: str = "/",
    config: ParseConfig | None = None,
) -> Any:
    """Parse *header* into an ``httpx.Cookies`` jar.

    Entries that fail to decode are left out of the jar. Cookies sharing
    a name, domain and path replace each other, last one wins.
    """
    httpx = _get_httpx()
    jar = httpx.Cookies()
    count = 0
    for cookie in parse_for_httpx(header, domain, path, config).cookies():
        jar.jar.set_cookie(cookie)
        count += 1
    logger.debug("Loaded %d cookies into httpx jar for domain %r", count, domain)
    return jar
