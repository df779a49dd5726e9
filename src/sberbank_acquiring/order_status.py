"""Order statuses reported by getOrderStatusExtended.do (orderStatus field)."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class OrderStatus(IntEnum):
    """Order status codes."""

    # Registered, not paid yet
    CREATED = 0
    # Amount held (two-step payments only)
    APPROVED = 1
    # Paid. Check for this status to know an order was paid.
    DEPOSITED = 2
    REVERSED = 3
    REFUNDED = 4
    # Authorization started by the issuer's ACS
    AUTHORIZATION_INITIALIZED = 5
    DECLINED = 6


# Statuses accepted by getLastOrdersForMerchants.do
TRANSACTION_STATES = (
    OrderStatus.CREATED,
    OrderStatus.APPROVED,
    OrderStatus.DEPOSITED,
    OrderStatus.REVERSED,
    OrderStatus.DECLINED,
    OrderStatus.REFUNDED,
)


def _as_int(status: Any) -> int | None:
    try:
        return int(status)
    except (TypeError, ValueError):
        return None


def _is(status: Any, expected: OrderStatus) -> bool:
    return _as_int(status) == expected


def is_created(status: Any) -> bool:
    # An empty string is not a status even though it would look like 0
    return status != "" and _is(status, OrderStatus.CREATED)


def is_approved(status: Any) -> bool:
    return _is(status, OrderStatus.APPROVED)


def is_deposited(status: Any) -> bool:
    return _is(status, OrderStatus.DEPOSITED)


def is_reversed(status: Any) -> bool:
    return _is(status, OrderStatus.REVERSED)


def is_refunded(status: Any) -> bool:
    return _is(status, OrderStatus.REFUNDED)


def is_authorization_initialized(status: Any) -> bool:
    return _is(status, OrderStatus.AUTHORIZATION_INITIALIZED)


def is_declined(status: Any) -> bool:
    return _is(status, OrderStatus.DECLINED)


def status_to_string(status: Any) -> str:
    """Name of a transaction state as the gateway expects it.

    Returns an empty string for statuses that have no transaction state
    name (AUTHORIZATION_INITIALIZED and unknown codes).
    """
    code = _as_int(status)
    for state in TRANSACTION_STATES:
        if state == code:
            return state.name
    return ""
