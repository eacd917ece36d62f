"""tests/unit/test_exceptions.py"""

import pytest

from urlkit.exceptions import DecodeError, UrlkitError


def test_exception_hierarchy():
    """Verify the inheritance structure of Urlkit exceptions."""
    assert issubclass(DecodeError, UrlkitError)
    assert issubclass(DecodeError, ValueError)


def test_decode_error_default_message():
    """Verify that DecodeError names the offending value."""
    with pytest.raises(DecodeError) as exc_info:
        raise DecodeError("%zz")
    assert "Malformed percent-encoding" in str(exc_info.value)
    assert "'%zz'" in str(exc_info.value)
    assert exc_info.value.value == "%zz"


def test_decode_error_custom_message():
    """Verify that DecodeError accepts a custom message."""
    with pytest.raises(DecodeError) as exc_info:
        raise DecodeError("%C3", "Invalid UTF-8 sequence")
    assert "Invalid UTF-8 sequence" in str(exc_info.value)


def test_base_error_accepts_message():
    """Verify that the base exception can be raised with a message."""
    with pytest.raises(UrlkitError) as exc_info:
        raise UrlkitError("Testing UrlkitError")
    assert "Testing UrlkitError" in str(exc_info.value)
