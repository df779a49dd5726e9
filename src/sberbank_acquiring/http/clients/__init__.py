"""Concrete transports for the acquiring client.

Provides adapters for httpx (the default) and requests.
"""

# httpx
from .httpx import HttpxTransport

# requests
from .requests import RequestsTransport

__all__ = [
    "HttpxTransport",
    "RequestsTransport",
]
