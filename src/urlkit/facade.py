"""src/urlkit/facade.py

Unified facade for Urlkit URL utilities.

Provides ``Url`` as a single entry point grouping every operation as a
static method, for callers that prefer ``Url.parse(...)`` over module
level functions.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from urlkit.url.joiner import join
from urlkit.url.normalizer import normalize
from urlkit.url.parser import parse
from urlkit.url.schema import ParsedUrl
from urlkit.url.stringifier import stringify
from urlkit.utils.path import split
from urlkit.utils.query import QueryValue, parse_query, stringify_query

__all__ = ["Url"]


class Url:
    """
    Static URL utility facade.

    All methods are pure; the class holds no state and is never instantiated.
    """

    __slots__ = ()

    @staticmethod
    def parse(url: str) -> ParsedUrl:
        """Decompose a URL into a :class:`ParsedUrl`."""
        return parse(url)

    @staticmethod
    def stringify(
        url: Optional[Union[ParsedUrl, Mapping[str, Any]]] = None, **fields: Any
    ) -> str:
        """Build a URL string from components."""
        return stringify(url, **fields)

    @staticmethod
    def parse_query(query: str) -> Dict[str, str]:
        """Decode a query string into a dict."""
        return parse_query(query)

    @staticmethod
    def stringify_query(query: Optional[Mapping[str, QueryValue]] = None) -> str:
        """Encode a mapping as a sorted query string without ``?``."""
        return stringify_query(query)

    @staticmethod
    def split(url: str = "") -> List[str]:
        """Split a URL or path into segments."""
        return split(url)

    @staticmethod
    def join(*urls: str) -> str:
        """Join URL and path fragments."""
        return join(*urls)

    @staticmethod
    def normalize(url: str, default_ports: Optional[Mapping[str, str]] = None) -> str:
        """Normalize a URL."""
        return normalize(url, default_ports)

    # -- camelCase aliases ----------------------------------------------------

    parseQuery = parse_query  # pylint: disable=invalid-name
    stringifyQuery = stringify_query  # pylint: disable=invalid-name
