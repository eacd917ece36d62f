"""url/normalizer.py

Semantics-preserving URL normalization (RFC 3986, section 6.2.2).

Passes, in order:

- percent-encoded triplets are canonicalized (unreserved characters
  decoded, hex digits upper-cased);
- scheme and host are lower-cased;
- the scheme's default port is removed;
- dot-segments are removed from the path;
- the URL is rebuilt and its triplets canonicalized once more.
"""

import logging
from typing import List, Mapping, Optional

from urlkit.url.parser import parse
from urlkit.url.stringifier import stringify
from urlkit.utils.encoding import canonicalize_triplets
from urlkit.utils.path import split

__all__ = ["DEFAULT_PORTS", "normalize", "remove_dot_segments"]

logger = logging.getLogger(__name__)

DEFAULT_PORTS: Mapping[str, str] = {"http:": "80", "https:": "443"}


def remove_dot_segments(pathname: str) -> str:
    """
    Resolve ``.`` and ``..`` segments of an absolute path.

    A ``..`` with nothing left to remove is dropped. Paths of length one
    (``"/"`` or ``""``) are returned unchanged.

    Example::

        >>> remove_dot_segments("/foo/./bar/baz/../qux")
        '/foo/bar/qux'
    """
    if len(pathname) <= 1:
        return pathname

    kept: List[str] = []
    for segment in split(pathname):
        if segment == ".":
            continue
        if segment == "..":
            if kept:
                kept.pop()
            else:
                logger.debug("Ignoring '..' above the root in %r", pathname)
            continue
        kept.append(segment)

    return "/" + "/".join(kept)


def normalize(url: str, default_ports: Optional[Mapping[str, str]] = None) -> str:
    """
    Normalize a URL without changing what it refers to.

    Args:
        url: URL to normalize.
        default_ports: Scheme (with colon) to default port mapping.
            Defaults to :data:`DEFAULT_PORTS`.

    Returns:
        Normalized URL string.

    Example::

        >>> normalize("HTTPS://User@Example.COM:443/%7Efoo%2a/./bar/baz/../qux")
        'https://User@example.com/~foo%2A/bar/qux'
    """
    if default_ports is None:
        default_ports = DEFAULT_PORTS

    parsed = parse(canonicalize_triplets(url))
    protocol = parsed.protocol.lower()
    hostname = parsed.hostname.lower()

    port = parsed.port
    if port and default_ports.get(protocol) == port:
        logger.debug("Removing default port %s for %s", port, protocol)
        port = ""

    normalized = stringify(
        protocol=protocol,
        username=parsed.username,
        password=parsed.password,
        hostname=hostname,
        port=port,
        pathname=remove_dot_segments(parsed.pathname),
        search=parsed.search,
        search_params=parsed.search_params,
        hash=parsed.hash,
    )
    return canonicalize_triplets(normalized)
