"""Transport abstraction used by the client to reach the gateway."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class HTTPMethod(str, Enum):
    """HTTP methods supported by the gateway."""

    GET = "GET"
    POST = "POST"


@runtime_checkable
class Transport(Protocol):
    """Sends a single HTTP request and returns the raw result.

    Implementations must raise NetworkError when the request cannot be
    performed (DNS, TLS, connection reset, timeout). HTTP error statuses
    are not failures at this level: they are returned as-is.
    """

    def send(
        self,
        uri: str,
        method: HTTPMethod,
        headers: dict[str, str],
        body: str,
    ) -> tuple[int, str]:
        """Send a request.

        For GET requests the body is a query string and is appended to the uri.

        Args:
            uri: Absolute request URI.
            method: HTTP method.
            headers: Request headers.
            body: Encoded request body.

        Returns:
            Tuple of (status code, response body text).

        Raises:
            NetworkError: If the request could not be performed.
        """
        ...


def build_get_uri(uri: str, query: str) -> str:
    """Append an encoded query string to a uri."""
    if not query:
        return uri
    separator = "&" if "?" in uri else "?"
    return f"{uri}{separator}{query}"
