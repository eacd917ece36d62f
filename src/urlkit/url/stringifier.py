"""url/stringifier.py

URL stringifier for Urlkit.
"""

# pylint: disable=redefined-builtin

from typing import Any, Dict, Mapping, Optional, Union

from urlkit.url.schema import ParsedUrl, format_userinfo
from urlkit.utils.query import stringify_query

__all__ = ["FIELDS", "stringify"]

FIELDS = frozenset(
    (
        "hash",
        "host",
        "hostname",
        "href",
        "origin",
        "password",
        "pathname",
        "port",
        "protocol",
        "search",
        "search_params",
        "username",
    )
)


def _collect(
    url: Optional[Union[ParsedUrl, Mapping[str, Any]]], fields: Mapping[str, Any]
) -> Dict[str, Any]:
    if isinstance(url, ParsedUrl):
        collected = url.to_dict()
    else:
        collected = dict(url or {})
    collected.update(fields)

    unknown = set(collected) - FIELDS
    if unknown:
        raise TypeError(f"Unknown URL fields: {', '.join(sorted(unknown))}")
    return collected


def stringify(
    url: Optional[Union[ParsedUrl, Mapping[str, Any]]] = None, **fields: Any
) -> str:
    """
    Build a URL string from (possibly partial) components.

    Components come from ``url`` (a :class:`ParsedUrl` or a mapping of field
    names) overridden by keyword ``fields``. A field that is missing or
    ``None`` is absent; an empty string is present but empty.

    Resolution order:

    1. A non-empty ``href`` is returned as is.
    2. ``protocol`` gets a trailing ``:`` if it lacks one.
    3. ``host`` falls back to ``hostname`` with any embedded ``:port`` cut off.
    4. ``port`` is appended when the host carries none.
    5. ``pathname`` gets a leading ``/``.
    6. ``search`` falls back to ``"?" + stringify_query(search_params)``.
    7. Without scheme and host, ``origin`` supplies both.
    8. ``username``/``password`` become ``user[:password]@``.
    9. ``hash`` gets a leading ``#``.

    Args:
        url: Base components.
        **fields: Component overrides, using :data:`FIELDS` names.

    Returns:
        URL string; ``"/"`` when nothing is given.

    Raises:
        TypeError: If a field name is not one of :data:`FIELDS`.

    Example::

        >>> stringify(protocol="https", hostname="example.com:8083", port=8081,
        ...           search_params={"all": True}, hash="top")
        'https://example.com:8081/?all=true#top'
    """
    parts = _collect(url, fields)

    href = parts.get("href")
    if href:
        return str(href)

    protocol = parts.get("protocol") or ""
    if protocol and not protocol.endswith(":"):
        protocol += ":"

    host = parts.get("host")
    if host is None:
        host = (parts.get("hostname") or "").split(":")[0]

    port = parts.get("port")
    if ":" not in host and port is not None and str(port) != "":
        host = f"{host}:{port}"

    pathname = parts.get("pathname") or ""
    if not pathname.startswith("/"):
        pathname = "/" + pathname

    search = parts.get("search")
    if search is None:
        query = stringify_query(parts.get("search_params"))
        search = f"?{query}" if query else ""
    elif search and not search.startswith("?"):
        search = "?" + search

    scheme = f"{protocol}//" if protocol else ""
    origin = parts.get("origin")
    if not scheme and not host and origin:
        if "//" in origin:
            origin_scheme, _, host = origin.partition("//")
            scheme = f"{origin_scheme}//" if origin_scheme else ""
        else:
            host = origin

    userinfo = format_userinfo(parts.get("username") or "", parts.get("password") or "")

    hash = parts.get("hash") or ""
    if hash and not hash.startswith("#"):
        hash = "#" + hash

    return scheme + userinfo + host + pathname + search + hash
