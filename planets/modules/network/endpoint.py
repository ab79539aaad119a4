"""Endpoint descriptors understood by the network module."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Protocol

import httpx


class HTTPMethod(str, Enum):
    """HTTP methods a request can be issued with."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class EndpointDescriptor(Protocol):
    """Anything that can tell the executor where to send a request and how."""

    @property
    def url(self) -> Optional[str]:
        """Resolvable URL, or None when one cannot be built."""
        ...

    @property
    def method(self) -> HTTPMethod:
        ...


def parse_url(raw: Optional[str]) -> Optional[httpx.URL]:
    """
    Parse an absolute http(s) URL.

    Returns:
        The parsed URL, or None if the string is empty, malformed,
        relative, or uses another scheme.
    """
    if not raw:
        return None
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError, ValueError):
        return None
    if url.scheme not in ("http", "https") or not url.host:
        return None
    return url


@dataclass(frozen=True)
class APIEndpoint:
    """An endpoint on a JSON API, described by base URL, path and method."""

    base_url: str
    path: str = ""
    method: HTTPMethod = HTTPMethod.GET
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> Optional[str]:
        url = parse_url(self.base_url)
        if url is None:
            return None
        if self.path:
            path = f"{url.path.rstrip('/')}/{self.path.lstrip('/')}"
            try:
                url = url.copy_with(path=path)
            except httpx.InvalidURL:
                return None
        if self.params:
            url = url.copy_merge_params(self.params)
        return str(url)
