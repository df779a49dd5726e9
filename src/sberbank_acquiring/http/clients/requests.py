"""Transport built on requests.Session."""

from __future__ import annotations

import logging
from typing import Any

import requests
from typing_extensions import Self

from ...constants import DEFAULT_TIMEOUT
from ...errors import NetworkError
from ..transport import HTTPMethod, build_get_uri

logger = logging.getLogger(__name__)


class RequestsTransport:
    """Transport sending requests with a requests.Session.

    Use it when the application already configures a requests.Session
    (proxies, adapters, client certificates).
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True,
    ) -> None:
        """Create requests transport.

        Args:
            session: Optional preconfigured session. Not closed by close().
            timeout: Request timeout in seconds.
            verify: Verify TLS certificates. Disabling this is insecure.
        """
        if not verify:
            logger.warning("TLS certificate verification is disabled for the gateway transport")

        self._session = session
        self._owns_session = session is None
        self._timeout = timeout
        self._verify = verify

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def send(
        self,
        uri: str,
        method: HTTPMethod,
        headers: dict[str, str],
        body: str,
    ) -> tuple[int, str]:
        """Send request through requests.

        Raises:
            NetworkError: If requests could not complete the exchange.
        """
        session = self._get_session()
        method = HTTPMethod(method)

        kwargs: dict[str, Any] = {
            "headers": headers,
            "timeout": self._timeout,
            "verify": self._verify,
        }
        if method is HTTPMethod.GET:
            uri = build_get_uri(uri, body)
        else:
            kwargs["data"] = body.encode("utf-8")

        try:
            response = session.request(method.value, uri, **kwargs)
        except requests.RequestException as e:
            raise NetworkError(f"HTTP transport error: {e}") from e

        return response.status_code, response.text

    def close(self) -> None:
        """Close the session if we own it."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
