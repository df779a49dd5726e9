"""Transport built on httpx.

The default transport of the client. The underlying httpx.Client is
created on first use and reused for every following request.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from typing_extensions import Self

from ...constants import DEFAULT_TIMEOUT
from ...errors import NetworkError
from ..transport import HTTPMethod, build_get_uri

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Transport sending requests with an httpx.Client.

    TLS certificates are verified unless ``verify=False`` is passed
    explicitly.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True,
    ) -> None:
        """Create httpx transport.

        Args:
            http_client: Optional preconfigured httpx.Client. Not closed by close().
            timeout: Request timeout in seconds, used when the client is created here.
            verify: Verify TLS certificates. Disabling this is insecure.
        """
        if not verify:
            logger.warning("TLS certificate verification is disabled for the gateway transport")

        self._http_client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout
        self._verify = verify

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=self._timeout, verify=self._verify)
        return self._http_client

    def send(
        self,
        uri: str,
        method: HTTPMethod,
        headers: dict[str, str],
        body: str,
    ) -> tuple[int, str]:
        """Send request through httpx.

        Raises:
            NetworkError: If httpx fails below the HTTP layer.
        """
        client = self._get_client()
        method = HTTPMethod(method)

        kwargs: dict[str, Any] = {"headers": headers}
        if method is HTTPMethod.GET:
            uri = build_get_uri(uri, body)
        else:
            kwargs["content"] = body.encode("utf-8")

        try:
            response = client.request(method.value, uri, **kwargs)
        except httpx.TransportError as e:
            raise NetworkError(f"HTTP transport error: {e}") from e

        return response.status_code, response.text

    def close(self) -> None:
        """Close HTTP client if we own it."""
        if self._owns_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
