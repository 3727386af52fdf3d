"""Crumb — a forgiving parser for HTTP ``Cookie`` request headers.

Recovers unquoted cookie values that contain literal semicolons, which a
strict RFC 6265 splitter would cut into pieces.

Basic usage::

    from crumb import parse_cookies

    parse_cookies("session=abc;123; theme=dark")
    # {"session": "abc;123", "theme": "dark"}

Lazy scan with per-entry results::

    from crumb import ParseConfig, parse_header

    for result in parse_header("a=%FF; b=x%20y", config=ParseConfig(percent_decode=True)):
        print(result.cookie if result else result.error)

httpx cookie jars (``pip install crumb[httpx]``)::

    from crumb.httpx_support import cookies_for_httpx
    jar = cookies_for_httpx(header, domain="example.com")
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "Cookie",
    "CookieFactory",
    "CookieResult",
    "CrumbError",
    "DecodeError",
    "EncodedCookieFactory",
    "HeaderStringCookies",
    "ParseConfig",
    "parse_cookies",
    "parse_header",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "crumb.errors",
    "Cookie": "crumb.cookie",
    "CookieFactory": "crumb.factory",
    "CookieResult": "crumb.parser",
    "CrumbError": "crumb.errors",
    "DecodeError": "crumb.errors",
    "EncodedCookieFactory": "crumb.factory",
    "HeaderStringCookies": "crumb.parser",
    "ParseConfig": "crumb.config",
    "parse_cookies": "crumb.parser",
    "parse_header": "crumb.parser",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is not None:
        from importlib import import_module

        return getattr(import_module(module_name), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
