"""utils/path.py

Path splitting for Urlkit.
"""

from typing import List

from urlkit.url.parser import parse_scheme

__all__ = ["split"]


def split(url: str = "") -> List[str]:
    """
    Split a URL or path into its directory segments.

    For a plain path, one leading and one trailing ``/`` are dropped and the
    rest is split on ``/``, keeping interior empty segments. For an absolute
    URL the ``scheme://authority`` part becomes the first segment and nothing
    else is trimmed, so a query or fragment stays attached to the last segment.

    Args:
        url: URL or path string.

    Returns:
        List of segments; empty for ``""`` and ``"/"``.

    Example::

        >>> split("/foo//bar/index.php/")
        ['foo', '', 'bar', 'index.php']
        >>> split("http://localhost:3000/test/index.php?id=36")
        ['http://localhost:3000', 'test', 'index.php?id=36']
    """
    protocol, rest = parse_scheme(url)
    if protocol:
        segments = rest.split("/")
        segments[0] = f"{protocol}//{segments[0]}"
        return segments

    path = url[1:] if url.startswith("/") else url
    if path.endswith("/"):
        path = path[:-1]
    if not path:
        return []
    return path.split("/")
