"""Construction capability protocols.

The scanner does not know what a cookie is. It hands each resolved
name/value pair to a *factory*: any object with the right shape::

    class MyFactory:
        def from_parts(self, name: str, value: str) -> MyCookie: ...

        # Only needed when ParseConfig(percent_decode=True)
        def from_encoded(self, text: str) -> MyCookie: ...

No base class required. The parser checks the shape, not the lineage.
A class with matching classmethods (see ``crumb.cookie.Cookie``) is a
factory for its own instances.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CookieFactory[T](Protocol):
    """Builds a cookie from an already-trimmed name and value.

    ``from_parts`` must not fail and must not return ``None``.
    """

    def from_parts(self, name: str, value: str) -> T: ...


@runtime_checkable
class EncodedCookieFactory[T](CookieFactory[T], Protocol):
    """A factory that can also decode a percent-encoded ``name=value`` string.

    ``from_encoded`` raises ``crumb.errors.DecodeError`` when the
    encoding is invalid.
    """

    def from_encoded(self, text: str) -> T: ...
