"""Sberbank acquiring Python SDK - REST API client for the payment gateway.

Quick Start:
    ```python
    from sberbank_acquiring import Client, Currency, OrderStatus

    client = Client({
        "userName": "merchant-api",
        "password": "secret",
        "currency": Currency.RUB,
        "language": "en",
    })

    order = client.register_order("order-1", 1000, "https://shop.example/return")
    status = client.get_order_status(order["orderId"])
    if status["orderStatus"] == OrderStatus.DEPOSITED:
        ...
    ```
"""

from .client import Client
from .config import ClientConfig, TokenAuth, UsernamePasswordAuth
from .constants import (
    API_PREFIX_APPLE,
    API_PREFIX_DEFAULT,
    API_PREFIX_GOOGLE,
    API_PREFIX_SAMSUNG,
    API_URI,
    API_URI_TEST,
)
from .currency import Currency
from .errors import (
    AcquiringError,
    ActionError,
    BadResponseError,
    ConfigurationError,
    InvalidArgumentError,
    NetworkError,
    ResponseParsingError,
)
from .factory import ClientFactory
from .http import HTTPMethod, Transport
from .order_bundle import OrderBundle
from .order_status import OrderStatus

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Client
    "Client",
    "ClientFactory",
    # Config
    "ClientConfig",
    "TokenAuth",
    "UsernamePasswordAuth",
    "HTTPMethod",
    "Transport",
    # Constants
    "API_URI",
    "API_URI_TEST",
    "API_PREFIX_DEFAULT",
    "API_PREFIX_APPLE",
    "API_PREFIX_GOOGLE",
    "API_PREFIX_SAMSUNG",
    # Data
    "Currency",
    "OrderBundle",
    "OrderStatus",
    # Errors
    "AcquiringError",
    "ActionError",
    "BadResponseError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NetworkError",
    "ResponseParsingError",
]
