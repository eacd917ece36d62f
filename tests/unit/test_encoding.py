"""tests/unit/test_encoding.py"""

import pytest

from urlkit.exceptions import DecodeError
from urlkit.utils.encoding import (
    UNRESERVED,
    canonicalize_triplets,
    decode_component,
    encode_component,
)


class TestEncodeComponent:
    """Tests for encode_component()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("a b", "a%20b"),
            ("Hello world!", "Hello%20world!"),
            ("-_.!~*'()", "-_.!~*'()"),
            ("/?&=#", "%2F%3F%26%3D%23"),
            ("é", "%C3%A9"),
            ("", ""),
        ],
    )
    def test_encode(self, value, expected):
        """Test component encoding keeps only the component-safe set."""
        assert encode_component(value) == expected


class TestDecodeComponent:
    """Tests for decode_component()."""

    def test_decode_space(self):
        """Test %20 decodes to a space."""
        assert decode_component("a%20b") == "a b"

    def test_plus_is_literal(self):
        """Test '+' is not treated as a space."""
        assert decode_component("a+b") == "a+b"

    def test_decode_multibyte(self):
        """Test multi-octet UTF-8 sequences decode to one character."""
        assert decode_component("%C3%A9") == "é"

    @pytest.mark.parametrize("value", ["%zz", "%2", "100%", "%C3", "%E0%A4%A"])
    def test_malformed_raises(self, value):
        """Test malformed or non-UTF-8 escapes raise DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            decode_component(value)
        assert exc_info.value.value == value

    def test_decode_error_is_value_error(self):
        """Test DecodeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            decode_component("%zz")


class TestCanonicalizeTriplets:
    """Tests for canonicalize_triplets()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("%7e", "~"),
            ("%7Efoo", "~foo"),
            ("%2a", "%2A"),
            ("%41%42", "AB"),
            ("%c3%a9", "%C3%A9"),
            ("%2F", "%2F"),
            ("%zz", "%zz"),
            ("100%", "100%"),
            ("plain", "plain"),
            ("%%341", "A"),
            ("/%%%3341", "/A"),
            ("%%2F", "%%2F"),
        ],
    )
    def test_canonicalize(self, text, expected):
        """Test unreserved triplets decode and the rest upper-case."""
        assert canonicalize_triplets(text) == expected

    def test_unreserved_set(self):
        """Test the unreserved set matches RFC 3986."""
        assert {"-", ".", "_", "~", "a", "Z", "0"} <= UNRESERVED
        assert "/" not in UNRESERVED
        assert "%" not in UNRESERVED
