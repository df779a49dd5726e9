"""Client - Sberbank acquiring REST API client.

Every gateway action is a method building its parameters and passing
them to execute(), which encodes the request, sends it through the
transport and normalizes the response.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from typing_extensions import Self

from .config import ClientConfig
from .constants import DATE_FORMAT, EXPIRY_FORMAT
from .encoding import encode_json, encode_request
from .errors import BadResponseError, InvalidArgumentError
from .http.transport import Transport
from .order_bundle import OrderBundle
from .order_status import TRANSACTION_STATES, status_to_string
from .response import handle_response

logger = logging.getLogger(__name__)

OrderId = int | str


def _merge(data: Mapping[str, Any] | None, fields: dict[str, Any]) -> dict[str, Any]:
    """Copy caller parameters and set the builder fields over them."""
    params = dict(data or {})
    params.update(fields)
    return params


def _unique(values: Iterable[Any]) -> list[Any]:
    seen: list[Any] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def _as_list(name: str, value: Any) -> list[Any]:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise InvalidArgumentError(f'A "{name}" parameter must be a list.')
    return list(value)


def _is_transaction_state(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        # Only the exact decimal form of a state, as the gateway prints it
        if not (value.isascii() and value.isdigit()) or str(int(value)) != value:
            return False
        value = int(value)
    elif not isinstance(value, int):
        return False
    return value in TRANSACTION_STATES


def _encode_order_bundle(order_bundle: Any) -> str:
    if isinstance(order_bundle, OrderBundle):
        return encode_json(order_bundle.to_dict())
    if isinstance(order_bundle, Mapping):
        return encode_json(dict(order_bundle))
    if isinstance(order_bundle, str):
        return order_bundle
    raise InvalidArgumentError(
        'The "orderBundle" parameter must be a mapping, an OrderBundle or a JSON string.'
    )


class Client:
    """Client for the Sberbank acquiring REST API.

    Example:
        ```python
        client = Client({"userName": "merchant-api", "password": "secret"})
        order = client.register_order("order-1", 1000, "https://shop.example/return")
        client.get_order_status(order["orderId"])
        ```
    """

    def __init__(self, config: ClientConfig | Mapping[str, Any] | None = None) -> None:
        """Create a client.

        Args:
            config: ClientConfig, or a mapping of options accepted by
                ClientConfig.from_options.

        Raises:
            ConfigurationError: If the options are invalid.
        """
        if not isinstance(config, ClientConfig):
            config = ClientConfig.from_options(config)

        self._config = config
        self._transport: Transport | None = config.transport
        self._owns_transport = config.transport is None
        self._transport_lock = threading.Lock()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _get_transport(self) -> Transport:
        """Get or create the transport."""
        if self._transport is None:
            with self._transport_lock:
                if self._transport is None:
                    from .http.clients.httpx import HttpxTransport

                    self._transport = HttpxTransport()
        return self._transport

    def close(self) -> None:
        """Close the transport if the client created it."""
        if not self._owns_transport:
            return
        with self._transport_lock:
            transport, self._transport = self._transport, None
        close = getattr(transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # =========================================================================
    # Orders
    # =========================================================================

    def register_order(
        self,
        order_id: OrderId,
        amount: int,
        return_url: str,
        data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Register a new order.

        Args:
            order_id: Order number in the merchant's system.
            amount: Amount in minor units.
            return_url: URL the customer is redirected to after payment.
            data: Additional parameters. "jsonParams" must be a mapping,
                "orderBundle" a mapping or OrderBundle; both are sent as JSON.

        Returns:
            Gateway response (orderId, formUrl).

        Raises:
            InvalidArgumentError: If jsonParams or orderBundle is malformed.
        """
        return self._register_order(order_id, amount, return_url, data, "register.do")

    def register_order_pre_auth(
        self,
        order_id: OrderId,
        amount: int,
        return_url: str,
        data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Register a new order for a two-step (hold, then deposit) payment.

        Takes the same arguments as register_order.
        """
        return self._register_order(order_id, amount, return_url, data, "registerPreAuth.do")

    def _register_order(
        self,
        order_id: OrderId,
        amount: int,
        return_url: str,
        data: Mapping[str, Any] | None,
        action: str,
    ) -> dict[str, Any]:
        params = _merge(data, {"orderNumber": order_id, "amount": amount, "returnUrl": return_url})

        if params.get("currency") is None and self._config.currency is not None:
            params["currency"] = self._config.currency

        json_params = params.get("jsonParams")
        if json_params is not None:
            if not isinstance(json_params, Mapping):
                raise InvalidArgumentError('The "jsonParams" parameter must be a mapping.')
            params["jsonParams"] = encode_json(dict(json_params))

        if params.get("orderBundle") is not None:
            params["orderBundle"] = _encode_order_bundle(params["orderBundle"])

        return self.execute(self._config.prefix_default + action, params)

    def deposit(self, order_id: OrderId, amount: int, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Deposit (capture) a pre-authorized order.

        Args:
            order_id: Gateway order identifier.
            amount: Amount to deposit in minor units.
            data: Additional parameters.
        """
        params = _merge(data, {"orderId": order_id, "amount": amount})
        return self.execute(self._config.prefix_default + "deposit.do", params)

    def reverse_order(self, order_id: OrderId, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Reverse (cancel) an order."""
        params = _merge(data, {"orderId": order_id})
        return self.execute(self._config.prefix_default + "reverse.do", params)

    def refund_order(self, order_id: OrderId, amount: int, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Refund a paid order, fully or partially."""
        params = _merge(data, {"orderId": order_id, "amount": amount})
        return self.execute(self._config.prefix_default + "refund.do", params)

    def get_order_status(self, order_id: OrderId, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Get the extended status of an order."""
        params = _merge(data, {"orderId": order_id})
        return self.execute(self._config.prefix_default + "getOrderStatusExtended.do", params)

    def verify_enrollment(self, pan: str, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Check whether a card is enrolled in 3-D Secure."""
        params = _merge(data, {"pan": pan})
        return self.execute(self._config.prefix_default + "verifyEnrollment.do", params)

    def update_ssl_card_list(self, order_id: OrderId, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        params = _merge(data, {"mdorder": order_id})
        return self.execute(self._config.prefix_default + "updateSSLCardList.do", params)

    def get_last_orders_for_merchants(
        self,
        from_: datetime,
        to: datetime | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """List orders of a period.

        Args:
            from_: Start of the period.
            to: End of the period. Defaults to now, in the timezone of from_.
            data: Additional parameters. "transactionStates" is a list of
                OrderStatus values (all listable statuses by default),
                "merchants" a list of merchant logins (empty by default).

        Returns:
            Gateway response.

        Raises:
            InvalidArgumentError: If from_ is not before to, or transactionStates
                or merchants are malformed.
        """
        if to is None:
            to = datetime.now(tz=from_.tzinfo)

        try:
            in_order = from_ < to
        except TypeError as e:
            raise InvalidArgumentError(f'Cannot compare "from" and "to": {e}') from e
        if not in_order:
            raise InvalidArgumentError('A "from" parameter must be less than "to" parameter.')

        params = dict(data or {})

        states = params.get("transactionStates")
        if states is None:
            states = list(TRANSACTION_STATES)
        else:
            states = _as_list("transactionStates", states)
            if not states:
                raise InvalidArgumentError('A "transactionStates" parameter cannot be empty.')
            if not all(_is_transaction_state(state) for state in states):
                raise InvalidArgumentError('A "transactionStates" parameter contains not allowed values.')

        merchants = params.get("merchants")
        merchants = [] if merchants is None else _as_list("merchants", merchants)

        params["transactionStates"] = ",".join(_unique(status_to_string(state) for state in states))
        params["merchants"] = ",".join(_unique(str(merchant) for merchant in merchants))
        params["from"] = from_.strftime(DATE_FORMAT)
        params["to"] = to.strftime(DATE_FORMAT)

        return self.execute(self._config.prefix_default + "getLastOrdersForMerchants.do", params)

    def get_receipt_status(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Get the fiscal receipt status of an order (orderId, orderNumber or uuid in data)."""
        return self.execute(self._config.prefix_default + "getReceiptStatus.do", dict(data))

    # =========================================================================
    # Bindings
    # =========================================================================

    def payment_order_binding(
        self,
        order_id: OrderId,
        binding_id: OrderId,
        data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Pay a registered order with a stored card."""
        params = _merge(data, {"mdOrder": order_id, "bindingId": binding_id})
        return self.execute(self._config.prefix_default + "paymentOrderBinding.do", params)

    def bind_card(self, binding_id: OrderId, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Activate a binding."""
        params = _merge(data, {"bindingId": binding_id})
        return self.execute(self._config.prefix_default + "bindCard.do", params)

    def unbind_card(self, binding_id: OrderId, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Deactivate a binding."""
        params = _merge(data, {"bindingId": binding_id})
        return self.execute(self._config.prefix_default + "unBindCard.do", params)

    def extend_binding(
        self,
        binding_id: OrderId,
        new_expiry: date,
        data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Extend a binding until a new card expiry month."""
        params = _merge(data, {"bindingId": binding_id, "newExpiry": new_expiry.strftime(EXPIRY_FORMAT)})
        return self.execute(self._config.prefix_default + "extendBinding.do", params)

    def get_bindings(self, client_id: OrderId, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """List the bindings of a customer."""
        params = _merge(data, {"clientId": client_id})
        return self.execute(self._config.prefix_default + "getBindings.do", params)

    # =========================================================================
    # Wallets
    # =========================================================================

    def pay_with_apple_pay(
        self,
        order_number: OrderId,
        merchant: str,
        payment_token: str,
        data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Pay with an Apple Pay payment token."""
        return self._pay_with_wallet(self._config.prefix_apple, order_number, merchant, payment_token, data)

    def pay_with_google_pay(
        self,
        order_number: OrderId,
        merchant: str,
        payment_token: str,
        data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Pay with a Google Pay payment token."""
        return self._pay_with_wallet(self._config.prefix_google, order_number, merchant, payment_token, data)

    def pay_with_samsung_pay(
        self,
        order_number: OrderId,
        merchant: str,
        payment_token: str,
        data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Pay with a Samsung Pay payment token."""
        return self._pay_with_wallet(self._config.prefix_samsung, order_number, merchant, payment_token, data)

    def _pay_with_wallet(
        self,
        prefix: str,
        order_number: OrderId,
        merchant: str,
        payment_token: str,
        data: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        params = _merge(
            data,
            {"orderNumber": order_number, "merchant": merchant, "paymentToken": payment_token},
        )
        return self.execute(prefix + "payment.do", params)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def execute(self, action: str, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Execute a gateway action.

        Bare action names ("register.do") are resolved against the default
        prefix.

        Args:
            action: Action path or name.
            data: Action parameters.

        Returns:
            Gateway response without error fields.

        Raises:
            InvalidArgumentError: If the parameters cannot be encoded.
            NetworkError: If the transport failed.
            BadResponseError: If the HTTP status is not 200.
            ResponseParsingError: If the body is not a JSON object.
            ActionError: If the gateway reported an error.
        """
        request = encode_request(self._config, action, data)
        transport = self._get_transport()

        logger.debug("Sending %s %s", request.method.value, request.path)
        status_code, body = transport.send(request.uri, request.method, request.headers, request.body)
        logger.debug("Gateway answered %s %s with HTTP %d", request.method.value, request.path, status_code)

        if status_code != 200:
            raise BadResponseError(f"Bad HTTP code: {status_code}.", code=status_code, response=body)

        return handle_response(body)
