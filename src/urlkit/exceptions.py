"""src/urlkit/exceptions.py

Urlkit Exceptions hierarchy.
"""


class UrlkitError(Exception):
    """Base exception for all Urlkit errors."""


class DecodeError(UrlkitError, ValueError):
    """
    A percent-encoded component could not be decoded.

    Raised for a ``%`` that is not followed by two hex digits, or for
    escape sequences that do not form valid UTF-8.
    """

    def __init__(self, value: str, message: str = "Malformed percent-encoding"):
        super().__init__(f"{message}: {value!r}")
        self.value = value
