"""Order bundle (cart and customer details) sent with order registration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class OrderBundle(BaseModel):
    """Customer details and cart of an order.

    Pass it as the "orderBundle" parameter of Client.register_order; the
    client serializes it to JSON.

    Example:
        ```python
        bundle = OrderBundle(customer_email="buyer@example.com")
        client.register_order("order-1", 1000, "https://shop.example/return", {
            "orderBundle": bundle,
        })
        ```
    """

    customer_email: str | None = None
    customer_phone: str | None = None
    customer_contact: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Gateway representation of the bundle."""
        customer_details: dict[str, str] = {}
        if self.customer_email is not None:
            customer_details["email"] = self.customer_email
        if self.customer_phone is not None:
            customer_details["phone"] = self.customer_phone
        if self.customer_contact is not None:
            customer_details["contact"] = self.customer_contact

        return {
            "customerDetails": customer_details,
            "cartItems": {"items": []},
        }
