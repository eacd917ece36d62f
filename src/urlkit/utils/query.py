"""utils/query.py

Query string codec for Urlkit.

Parsing decodes ``key=value`` pairs into an ordered ``dict``; serializing
sorts keys so that equal mappings always produce identical query strings.
"""

import logging
import math
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Tuple, Union

from urlkit.utils.encoding import decode_component, encode_component

__all__ = ["QueryValue", "parse_query", "stringify_query"]

logger = logging.getLogger(__name__)

QueryValue = Optional[Union[str, int, float, bool]]


def parse_query(query: str) -> Dict[str, str]:
    """
    Parse a query string into a mapping of decoded keys to decoded values.

    Args:
        query: Query string, with or without a leading ``?``.

    Returns:
        Dictionary of decoded pairs. A repeated key keeps its last value and
        the position of that last occurrence. A pair without ``=`` maps to
        an empty string. Empty pairs (``a=1&&b=2``) are skipped instead of
        producing an empty key, unlike a literal split on ``&``.

    Raises:
        DecodeError: If a key or value contains a malformed escape.

    Example::

        >>> parse_query("?id=36&a=b")
        {'id': '36', 'a': 'b'}
    """
    if query.startswith("?"):
        query = query[1:]

    params: Dict[str, str] = {}
    if not query:
        return params

    for pair in query.split("&"):
        if not pair:
            continue
        raw_key, _, raw_value = pair.partition("=")
        key = decode_component(raw_key)
        value = decode_component(raw_value)
        if key in params:
            logger.debug("Query key %r repeated, keeping last value", key)
            del params[key]
        params[key] = value

    return params


def _float_text(value: float) -> str:
    # Number-to-string rules of browsers: fixed notation in [1e-6, 1e21),
    # exponent notation outside it, no trailing ".0"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(repr(value)).normalize(), "f")
    mantissa, _, exponent = repr(value).partition("e")
    sign = exponent[0]
    digits = exponent[1:].lstrip("0")
    return f"{mantissa}e{sign}{digits}"


def _to_text(value: Union[str, int, float, bool]) -> str:
    if isinstance(value, bool):
        return "true"
    if isinstance(value, float):
        return _float_text(value)
    return str(value)


def _code_unit_key(item: Tuple[str, str]) -> bytes:
    # UTF-16 code-unit order, which differs from code-point order above U+FFFF
    return item[0].encode("utf-16-be", "surrogatepass")


def stringify_query(query: Optional[Mapping[str, QueryValue]] = None) -> str:
    """
    Serialize a mapping into a query string without a leading ``?``.

    Entries whose value is ``None`` or ``False`` are left out. Remaining
    entries are sorted by key, then key and value are percent-encoded.

    Args:
        query: Mapping of keys to string, number or boolean values.

    Returns:
        Encoded query string, or ``""`` when nothing survives the filter.

    Example::

        >>> stringify_query({"zzz": 34, "foo": "Hello world!"})
        'foo=Hello%20world!&zzz=34'
    """
    if not query:
        return ""

    pairs: List[Tuple[str, str]] = []
    for key, value in query.items():
        if value is None or value is False:
            logger.debug("Dropping query key %r with value %r", key, value)
            continue
        pairs.append((str(key), _to_text(value)))

    pairs.sort(key=_code_unit_key)
    return "&".join(
        f"{encode_component(key)}={encode_component(value)}" for key, value in pairs
    )
