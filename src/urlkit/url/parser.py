"""url/parser.py

URL parser for Urlkit.

A URL is consumed by a fixed sequence of optional sub-parsers::

    [scheme "://"] [user [":" password] "@"] [host] [":" port] [/path] [?search] [#hash]

Each sub-parser takes the unconsumed text and returns what it recognised
together with the remainder. Every component is optional, so any string
parses; missing parts come back empty and the path defaults to ``/``.
"""

import re
from typing import Tuple

from urlkit.url.schema import ParsedUrl
from urlkit.utils.query import parse_query

__all__ = [
    "parse",
    "parse_scheme",
    "parse_authority",
    "parse_path",
    "parse_search",
    "parse_hash",
]

_AUTHORITY_END_RE = re.compile(r"[/?#]")
_PATH_END_RE = re.compile(r"[?#]")
_SEARCH_END_RE = re.compile(r"#")


def _split_at(text: str, pattern: "re.Pattern[str]") -> Tuple[str, str]:
    match = pattern.search(text)
    if match is None:
        return text, ""
    return text[: match.start()], text[match.start() :]


def parse_scheme(url: str) -> Tuple[str, str]:
    """
    Consume a leading ``scheme://``.

    The scheme is everything before the first ``:``, and only counts when
    that colon is immediately followed by ``//`` and the text before it holds
    no ``/``, ``?`` or ``#``. Hence ``localhost:3000`` has no scheme.

    Returns:
        ``(protocol, rest)`` where ``protocol`` keeps its colon (``"http:"``)
        and ``rest`` starts after the ``//``.
    """
    colon = url.find(":")
    if (
        colon != -1
        and url.startswith("//", colon + 1)
        and not _AUTHORITY_END_RE.search(url, 0, colon)
    ):
        return url[: colon + 1], url[colon + 3 :]
    return "", url


def parse_authority(text: str) -> Tuple[str, str, str, str, str]:
    """
    Consume ``[user[:password]@]host[:port]``.

    The authority ends at the first ``/``, ``?`` or ``#``. Credentials are
    whatever precedes its last ``@``, split at their first ``:``.

    Returns:
        ``(username, password, hostname, port, rest)``.
    """
    authority, rest = _split_at(text, _AUTHORITY_END_RE)
    userinfo, _, hostport = authority.rpartition("@")
    username, _, password = userinfo.partition(":")
    hostname, _, port = hostport.partition(":")
    return username, password, hostname, port, rest


def parse_path(text: str) -> Tuple[str, str]:
    """Consume a path starting with ``/`` up to ``?`` or ``#``."""
    if not text.startswith("/"):
        return "", text
    return _split_at(text, _PATH_END_RE)


def parse_search(text: str) -> Tuple[str, str]:
    """Consume ``?query`` up to ``#``. A lone ``?`` is kept."""
    if not text.startswith("?"):
        return "", text
    return _split_at(text, _SEARCH_END_RE)


def parse_hash(text: str) -> Tuple[str, str]:
    """Consume ``#fragment`` through the end of the input."""
    if not text.startswith("#"):
        return "", text
    return text, ""


def parse(url: str) -> ParsedUrl:
    """
    Decompose a full or partial URL.

    Args:
        url: URL string. Malformed or partial input is accepted.

    Returns:
        ParsedUrl with every missing component empty and ``pathname``
        defaulting to ``/``.

    Raises:
        DecodeError: If the query string holds a malformed escape.

    Example::

        >>> parsed = parse("http://localhost:3000/test/index.php?id=36&a=b#top")
        >>> parsed.host, parsed.pathname, parsed.search, parsed.hash
        ('localhost:3000', '/test/index.php', '?id=36&a=b', '#top')
    """
    protocol, rest = parse_scheme(url)
    username, password, hostname, port, rest = parse_authority(rest)
    pathname, rest = parse_path(rest)
    search, rest = parse_search(rest)
    fragment, _ = parse_hash(rest)

    return ParsedUrl(
        protocol=protocol,
        username=username,
        password=password,
        hostname=hostname,
        port=port,
        pathname=pathname or "/",
        search=search,
        hash=fragment,
        search_params=parse_query(search),
    )
