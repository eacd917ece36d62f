"""utils/encoding.py

Percent-encoding primitives for Urlkit.

Component encoding follows the URI component rules used by browsers: every
character except alphanumerics and ``-_.!~*'()`` is escaped as UTF-8 octets.
Decoding is strict and raises :class:`~urlkit.exceptions.DecodeError` instead
of passing malformed escapes through.
"""

import re
import string
import urllib.parse

from urlkit.exceptions import DecodeError

__all__ = [
    "COMPONENT_SAFE",
    "UNRESERVED",
    "encode_component",
    "decode_component",
    "canonicalize_triplets",
]

COMPONENT_SAFE = "-_.!~*'()"

# RFC 3986 section 2.3
UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")

_TRIPLET_RE = re.compile(r"%[0-9A-Fa-f]{2}")
_MALFORMED_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_component(value: str) -> str:
    """Percent-encode a single URI component (key, value or segment)."""
    return urllib.parse.quote(value, safe=COMPONENT_SAFE)


def decode_component(value: str) -> str:
    """
    Percent-decode a single URI component.

    ``+`` is left alone; only ``%XX`` escapes are decoded.

    Args:
        value: Encoded component.

    Returns:
        Decoded text.

    Raises:
        DecodeError: If an escape is truncated, is not hexadecimal, or the
            escaped octets are not valid UTF-8.
    """
    if _MALFORMED_ESCAPE_RE.search(value):
        raise DecodeError(value)
    try:
        return urllib.parse.unquote(value, errors="strict")
    except UnicodeDecodeError as exc:
        raise DecodeError(value, "Invalid UTF-8 sequence") from exc


def _canonical_triplet(match: "re.Match[str]") -> str:
    triplet = match.group(0)
    char = chr(int(triplet[1:], 16))
    if char in UNRESERVED:
        return char
    return triplet.upper()


def canonicalize_triplets(text: str) -> str:
    """
    Rewrite every ``%XX`` triplet in its canonical form.

    Triplets that encode an unreserved character are replaced by the
    character itself; all others keep their escape with upper-case hex digits.
    Text outside triplets is untouched.

    Decoding can join a stray ``%`` with the decoded character into a new
    triplet (``%%341`` becomes ``%41``), so the rewrite repeats until the
    text no longer changes. Every decode shortens the text, so this ends.
    """
    while True:
        rewritten = _TRIPLET_RE.sub(_canonical_triplet, text)
        if rewritten == text:
            return text
        text = rewritten
