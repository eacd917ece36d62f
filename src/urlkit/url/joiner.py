"""url/joiner.py

Joining of URL and path fragments.
"""

from functools import reduce
from typing import NamedTuple, Tuple

from urlkit.url.parser import parse
from urlkit.url.stringifier import stringify
from urlkit.utils.path import split

__all__ = ["join"]


class _JoinState(NamedTuple):
    segments: Tuple[str, ...]
    search: str
    hash: str


def _absorb(state: _JoinState, url: str) -> _JoinState:
    parsed = parse(url)
    return _JoinState(
        segments=state.segments + tuple(split(parsed.pathname)),
        search=parsed.search,
        hash=parsed.hash,
    )


def join(*urls: str) -> str:
    """
    Join URL and path fragments into one URL.

    Scheme, credentials, host and port come from the first fragment. The
    path segments of every fragment are concatenated in order, while the
    query and fragment are taken from the last one.

    Args:
        *urls: URLs or paths.

    Returns:
        Joined URL; ``"/"`` when called without arguments.

    Raises:
        DecodeError: If a fragment's query holds a malformed escape.

    Example::

        >>> join("http://test.com/foo//bar/", "/api/User/[userId]/?page=2")
        'http://test.com/foo//bar/api/User/[userId]?page=2'
    """
    if not urls:
        return "/"

    first = parse(urls[0])
    initial = _JoinState(tuple(split(first.pathname)), first.search, first.hash)
    state = reduce(_absorb, urls[1:], initial)

    return stringify(
        protocol=first.protocol,
        username=first.username,
        password=first.password,
        hostname=first.hostname,
        port=first.port,
        pathname="/".join(state.segments),
        search=state.search,
        hash=state.hash,
    )
