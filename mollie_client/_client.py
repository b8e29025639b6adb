"""Mollie API client: resource namespaces over one shared transport."""

from __future__ import annotations

import os

from ._exceptions import AuthenticationError
from ._http import DEFAULT_BASE_URL, HTTPClient, Transport
from ._models import (
    Capture,
    Chargeback,
    Customer,
    Mandate,
    Method,
    Order,
    Payment,
    Refund,
    Shipment,
    Subscription,
)
from ._resources import (
    CHARGEBACKS,
    CUSTOMER_MANDATES,
    CUSTOMER_PAYMENTS,
    CUSTOMER_SUBSCRIPTIONS,
    CUSTOMERS,
    METHODS,
    ORDER_LINES,
    ORDER_REFUNDS,
    ORDER_SHIPMENTS,
    ORDERS,
    PAYMENT_CAPTURES,
    PAYMENT_CHARGEBACKS,
    PAYMENT_REFUNDS,
    PAYMENTS,
    REFUNDS,
    Resource,
)


class Mollie:
    """Async client for the Mollie v2 API.

    Usage:
        async with Mollie(api_key="test_...") as client:
            payment = await client.payments.create(
                {"amount": {"currency": "EUR", "value": "10.00"}, "description": "Order 12"}
            )
            page = await client.payment_refunds.list({"paymentId": payment.id})
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        *,
        transport: Transport | None = None,
    ):
        if transport is None:
            api_key = api_key or os.environ.get("MOLLIE_API_KEY")
            if not api_key:
                raise AuthenticationError(
                    "No API key provided. Pass api_key= or set MOLLIE_API_KEY env var."
                )
            transport = HTTPClient(api_key=api_key, base_url=base_url, timeout=timeout)

        self._http = transport
        self.payments: Resource[Payment] = Resource(transport, PAYMENTS)
        self.payment_refunds: Resource[Refund] = Resource(transport, PAYMENT_REFUNDS)
        self.payment_chargebacks: Resource[Chargeback] = Resource(transport, PAYMENT_CHARGEBACKS)
        self.payment_captures: Resource[Capture] = Resource(transport, PAYMENT_CAPTURES)
        self.orders: Resource[Order] = Resource(transport, ORDERS)
        self.order_lines: Resource[Order] = Resource(transport, ORDER_LINES)
        self.order_shipments: Resource[Shipment] = Resource(transport, ORDER_SHIPMENTS)
        self.order_refunds: Resource[Refund] = Resource(transport, ORDER_REFUNDS)
        self.refunds: Resource[Refund] = Resource(transport, REFUNDS)
        self.chargebacks: Resource[Chargeback] = Resource(transport, CHARGEBACKS)
        self.customers: Resource[Customer] = Resource(transport, CUSTOMERS)
        self.customer_payments: Resource[Payment] = Resource(transport, CUSTOMER_PAYMENTS)
        self.customer_mandates: Resource[Mandate] = Resource(transport, CUSTOMER_MANDATES)
        self.customer_subscriptions: Resource[Subscription] = Resource(
            transport, CUSTOMER_SUBSCRIPTIONS
        )
        self.methods: Resource[Method] = Resource(transport, METHODS)

    async def aclose(self) -> None:
        """Close the underlying HTTP client. Safe to call more than once."""
        close = getattr(self._http, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> Mollie:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()
