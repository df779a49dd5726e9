"""Tests for RequestsTransport."""

from unittest.mock import MagicMock

import pytest
import requests
from requests import Response

from sberbank_acquiring import NetworkError
from sberbank_acquiring.http import HTTPMethod, Transport
from sberbank_acquiring.http.clients import RequestsTransport

URI = "https://securepayments.sberbank.ru/payment/rest/deposit.do"


def _create_response(status_code: int, content: bytes = b"") -> Response:
    """Create a mock Response object."""
    response = Response()
    response.status_code = status_code
    response._content = content
    response.encoding = "utf-8"
    return response


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.request.return_value = _create_response(200, b'{"errorCode":"0"}')
    return session


class TestRequestsTransport:
    def test_implements_transport_protocol(self):
        assert isinstance(RequestsTransport(), Transport)

    def test_post_sends_body(self, session):
        transport = RequestsTransport(session=session, timeout=5.0)

        result = transport.send(URI, HTTPMethod.POST, {"Cache-Control": "no-cache"}, "orderId=1&amount=10")

        assert result == (200, '{"errorCode":"0"}')
        session.request.assert_called_once_with(
            "POST",
            URI,
            headers={"Cache-Control": "no-cache"},
            timeout=5.0,
            verify=True,
            data=b"orderId=1&amount=10",
        )

    def test_get_sends_body_as_query(self, session):
        RequestsTransport(session=session).send(URI, HTTPMethod.GET, {}, "orderId=1")

        args, kwargs = session.request.call_args
        assert args == ("GET", URI + "?orderId=1")
        assert "data" not in kwargs

    def test_returns_error_status_without_raising(self, session):
        session.request.return_value = _create_response(502, b"Bad gateway")

        assert RequestsTransport(session=session).send(URI, HTTPMethod.POST, {}, "") == (502, "Bad gateway")

    def test_wraps_request_exceptions(self, session):
        session.request.side_effect = requests.ConnectionError("connection reset")

        with pytest.raises(NetworkError, match="connection reset") as exc_info:
            RequestsTransport(session=session).send(URI, HTTPMethod.POST, {}, "")

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_insecure_mode_is_passed_to_requests(self, session):
        RequestsTransport(session=session, verify=False).send(URI, HTTPMethod.POST, {}, "")

        assert session.request.call_args.kwargs["verify"] is False

    def test_does_not_close_caller_session(self, session):
        RequestsTransport(session=session).close()

        session.close.assert_not_called()

    def test_closes_own_session(self):
        transport = RequestsTransport()
        own_session = transport._get_session()
        own_session.close = MagicMock()

        transport.close()

        own_session.close.assert_called_once_with()
