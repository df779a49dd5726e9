"""Shared test fixtures for the acquiring client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import parse_qsl

import pytest

from sberbank_acquiring import Client
from sberbank_acquiring.http import HTTPMethod

SUCCESS_BODY = json.dumps({"errorCode": 0, "errorMessage": "No error."})


@dataclass
class SentRequest:
    """A request captured by RecordingTransport."""

    uri: str
    method: HTTPMethod
    headers: dict[str, str]
    body: str

    def form(self) -> dict[str, str]:
        return dict(parse_qsl(self.body, keep_blank_values=True))

    def json(self) -> Any:
        return json.loads(self.body)


class RecordingTransport:
    """Transport recording requests and replaying canned responses."""

    def __init__(self, status_code: int = 200, body: str = SUCCESS_BODY) -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[SentRequest] = []

    def send(
        self,
        uri: str,
        method: HTTPMethod,
        headers: dict[str, str],
        body: str,
    ) -> tuple[int, str]:
        self.requests.append(SentRequest(uri, method, dict(headers), body))
        return self.status_code, self.body

    @property
    def last(self) -> SentRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def transport() -> RecordingTransport:
    """Transport answering every request with a successful empty response."""
    return RecordingTransport()


@pytest.fixture
def make_client(transport: RecordingTransport) -> Callable[..., Client]:
    """Build a client wired to the recording transport.

    Token authentication is used unless credentials are passed.
    """

    def factory(**options: Any) -> Client:
        if "userName" not in options and "token" not in options:
            options["token"] = "abrakadabra"
        options.setdefault("transport", transport)
        return Client(options)

    return factory


@pytest.fixture
def client(make_client: Callable[..., Client]) -> Client:
    return make_client()
