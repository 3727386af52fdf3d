"""Crumb exception hierarchy.

Shared across the scanner, parser, and cookie factories so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when parser configuration is invalid.

    Typically raised when a scan is created, before any input is read.
    """


@dataclass(frozen=True, slots=True)
class DecodeError(CrumbError):
    """A single cookie entry whose percent-encoding could not be decoded.

    Never aborts a scan. The parser carries it inside a ``CookieResult``
    and moves on to the next entry; ``CookieResult.unwrap()`` re-raises it.
    """

    text: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"cannot decode {self.text!r}: {self.detail}"
        return f"cannot decode {self.text!r}"


class BackendNotInstalledError(CrumbError, ImportError):
    """An optional output backend (e.g. httpx) is not installed."""
