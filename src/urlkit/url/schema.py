"""url/schema.py

Structured URL value object.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

__all__ = ["ParsedUrl", "format_userinfo"]


def format_userinfo(username: str, password: str) -> str:
    """Format the ``user[:password]@`` prefix, or ``""`` without credentials."""
    if not username and not password:
        return ""
    if password:
        return f"{username}:{password}@"
    return f"{username}@"


@dataclass(frozen=True)
class ParsedUrl:
    """
    Immutable decomposition of a URL.

    Captured components are stored as fields; ``host``, ``origin`` and
    ``href`` are derived from them on access.

    Attributes:
        protocol: Scheme including the trailing colon (``"http:"``) or ``""``.
        username: User name from the userinfo, or ``""``.
        password: Password from the userinfo, or ``""``.
        hostname: Host without port, or ``""``.
        port: Port digits, or ``""``.
        pathname: Path, always starting with ``/``.
        search: Query including the leading ``?``, or ``""``.
        hash: Fragment including the leading ``#``, or ``""``.
        search_params: Read-only view of the decoded query.
    """

    # pylint: disable=too-many-instance-attributes

    protocol: str = ""
    username: str = ""
    password: str = ""
    hostname: str = ""
    port: str = ""
    pathname: str = "/"
    search: str = ""
    hash: str = ""
    search_params: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.pathname:
            object.__setattr__(self, "pathname", "/")
        object.__setattr__(
            self, "search_params", MappingProxyType(dict(self.search_params))
        )

    @property
    def host(self) -> str:
        """Hostname followed by ``:port`` when a port is present."""
        if self.port:
            return f"{self.hostname}:{self.port}"
        return self.hostname

    @property
    def origin(self) -> str:
        """Scheme and host, e.g. ``http://localhost:3000``."""
        return self.origin_prefix + self.host

    @property
    def href(self) -> str:
        """Full reconstruction of the URL."""
        return (
            self.origin_prefix
            + format_userinfo(self.username, self.password)
            + self.host
            + self.pathname
            + self.search
            + self.hash
        )

    @property
    def origin_prefix(self) -> str:
        """``protocol//`` or ``""`` when there is no scheme."""
        return f"{self.protocol}//" if self.protocol else ""

    def to_dict(self) -> Dict[str, Any]:
        """Return every captured and derived component as a plain dict."""
        return {
            "hash": self.hash,
            "host": self.host,
            "hostname": self.hostname,
            "href": self.href,
            "origin": self.origin,
            "password": self.password,
            "pathname": self.pathname,
            "port": self.port,
            "protocol": self.protocol,
            "search": self.search,
            "search_params": dict(self.search_params),
            "username": self.username,
        }

    def __str__(self) -> str:
        return self.href
