"""src/urlkit/__init__.py

Urlkit - Small, dependency-free URL manipulation utilities for Python.

Urlkit parses URLs into their components, rebuilds URLs from components,
encodes and decodes query strings, splits and joins paths, and performs
RFC 3986 semantics-preserving normalization. Partial and malformed URLs are
accepted: parsing never fails on structure.

Key Features:
    - Zero external dependencies
    - Immutable ``ParsedUrl`` value objects
    - Deterministic, sorted query serialization
    - Dot-segment removal, default port stripping and percent-encoding
      canonicalization
    - Full type hints (PEP 561)

Example:
    Functions::

        from urlkit import normalize, parse

        parsed = parse('http://localhost:3000/test/index.php?id=36&a=b#top')
        print(parsed.search_params)  # {'id': '36', 'a': 'b'}

        print(normalize('HTTP://Example.COM:80/a/./b/../c'))
        # http://example.com/a/c

    Facade::

        from urlkit import Url

        Url.join('http://test.com/foo/', '/api/User/')
        # 'http://test.com/foo/api/User'
"""

from urlkit.exceptions import DecodeError, UrlkitError
from urlkit.facade import Url
from urlkit.url import ParsedUrl, join, normalize, parse, stringify
from urlkit.utils.path import split
from urlkit.utils.query import parse_query, stringify_query
from urlkit.version import __version__

__all__ = [
    "Url",
    "ParsedUrl",
    "parse",
    "stringify",
    "parse_query",
    "stringify_query",
    "split",
    "join",
    "normalize",
    "UrlkitError",
    "DecodeError",
    "__version__",
]
