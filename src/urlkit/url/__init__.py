"""src/urlkit/url/__init__.py

URL layer for Urlkit.

This module provides the structured ``ParsedUrl`` value together with the
parse, stringify, join and normalize operations built on it.
"""

from .schema import ParsedUrl
from .parser import parse
from .stringifier import stringify
from .joiner import join
from .normalizer import normalize

__all__ = ["ParsedUrl", "parse", "stringify", "join", "normalize"]
