"""Resource descriptors and the generic engine that serves them."""

from ._base import (
    ALL_OPERATIONS,
    CallContext,
    Operation,
    ParentDescriptor,
    Resource,
    ResourceDescriptor,
)
from .customers import CUSTOMER_MANDATES, CUSTOMER_PAYMENTS, CUSTOMER_SUBSCRIPTIONS, CUSTOMERS
from .methods import METHODS
from .orders import ORDER_LINES, ORDER_REFUNDS, ORDER_SHIPMENTS, ORDERS
from .payments import PAYMENT_CAPTURES, PAYMENT_CHARGEBACKS, PAYMENT_REFUNDS, PAYMENTS
from .refunds import CHARGEBACKS, REFUNDS

DESCRIPTORS: tuple[ResourceDescriptor, ...] = (
    PAYMENTS,
    PAYMENT_REFUNDS,
    PAYMENT_CHARGEBACKS,
    PAYMENT_CAPTURES,
    ORDERS,
    ORDER_LINES,
    ORDER_SHIPMENTS,
    ORDER_REFUNDS,
    REFUNDS,
    CHARGEBACKS,
    CUSTOMERS,
    CUSTOMER_PAYMENTS,
    CUSTOMER_MANDATES,
    CUSTOMER_SUBSCRIPTIONS,
    METHODS,
)

__all__ = [
    "ALL_OPERATIONS",
    "CHARGEBACKS",
    "CUSTOMERS",
    "CUSTOMER_MANDATES",
    "CUSTOMER_PAYMENTS",
    "CUSTOMER_SUBSCRIPTIONS",
    "DESCRIPTORS",
    "METHODS",
    "ORDERS",
    "ORDER_LINES",
    "ORDER_REFUNDS",
    "ORDER_SHIPMENTS",
    "PAYMENTS",
    "PAYMENT_CAPTURES",
    "PAYMENT_CHARGEBACKS",
    "PAYMENT_REFUNDS",
    "REFUNDS",
    "CallContext",
    "Operation",
    "ParentDescriptor",
    "Resource",
    "ResourceDescriptor",
]
