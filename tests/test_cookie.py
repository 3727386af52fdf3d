"""Tests for crumb.cookie — Cookie + percent-decoding."""

import pytest

from crumb.cookie import Cookie, decode_component, decode_pair, to_header
from crumb.errors import DecodeError
from crumb.factory import CookieFactory, EncodedCookieFactory


class TestDecodeComponent:
    def test_plain_text_unchanged(self) -> None:
        assert decode_component("abc") == "abc"

    def test_space(self) -> None:
        assert decode_component("a%20b") == "a b"

    def test_utf8_sequence(self) -> None:
        assert decode_component("caf%C3%A9") == "café"

    def test_plus_is_not_space(self) -> None:
        assert decode_component("a+b") == "a+b"

    def test_malformed_escape_kept(self) -> None:
        assert decode_component("100%") == "100%"
        assert decode_component("%zz") == "%zz"

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_component("%FF")
        assert exc_info.value.text == "%FF"


class TestDecodePair:
    def test_splits_on_first_equals(self) -> None:
        assert decode_pair("a=b%3Dc=d") == ("a", "b=c=d")

    def test_trims(self) -> None:
        assert decode_pair(" a = b ") == ("a", "b")

    def test_decodes_name(self) -> None:
        assert decode_pair("my%20name=1") == ("my name", "1")

    def test_missing_equals(self) -> None:
        with pytest.raises(DecodeError, match="missing"):
            decode_pair("novalue")


class TestCookie:
    def test_from_parts(self) -> None:
        c = Cookie.from_parts("session", "abc;123")
        assert c.name == "session"
        assert c.value == "abc;123"

    def test_from_encoded(self) -> None:
        assert Cookie.from_encoded("name=val%3B123") == Cookie("name", "val;123")

    def test_name_value(self) -> None:
        assert Cookie("a", "1").name_value() == ("a", "1")

    def test_str(self) -> None:
        assert str(Cookie("a", "b c")) == "a=b c"

    def test_encoded_header_value(self) -> None:
        assert Cookie("a", "x;y z").to_header_value(encode=True) == "a=x%3By%20z"

    def test_frozen(self) -> None:
        c = Cookie("a", "b")

        with pytest.raises(AttributeError):
            c.name = "c"  # type: ignore[misc]

    def test_class_is_a_factory(self) -> None:
        assert isinstance(Cookie, CookieFactory)
        assert isinstance(Cookie, EncodedCookieFactory)


class TestToHeader:
    def test_joins(self) -> None:
        assert to_header([Cookie("a", "1"), Cookie("b", "2")]) == "a=1; b=2"

    def test_empty(self) -> None:
        assert to_header([]) == ""

    def test_encoded(self) -> None:
        assert to_header([Cookie("a", "1;2")], encode=True) == "a=1%3B2"
