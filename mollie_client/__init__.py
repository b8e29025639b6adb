"""
mollie_client - async Python client for the Mollie payments API.
"""

__version__ = "0.1.0"

from ._client import Mollie
from ._exceptions import (
    APIError,
    AuthenticationError,
    ConflictError,
    InvalidInputError,
    MollieError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from ._models import (
    Capture,
    Chargeback,
    Customer,
    Entity,
    Mandate,
    Method,
    Order,
    OrderLine,
    Payment,
    Refund,
    Shipment,
    Subscription,
)
from ._resources import Operation, ParentDescriptor, Resource, ResourceDescriptor
from ._types import PaginatedList

__all__ = [
    # Main client
    "Mollie",
    # Engine
    "Operation",
    "PaginatedList",
    "ParentDescriptor",
    "Resource",
    "ResourceDescriptor",
    # Models
    "Capture",
    "Chargeback",
    "Customer",
    "Entity",
    "Mandate",
    "Method",
    "Order",
    "OrderLine",
    "Payment",
    "Refund",
    "Shipment",
    "Subscription",
    # Errors
    "APIError",
    "AuthenticationError",
    "ConflictError",
    "InvalidInputError",
    "MollieError",
    "NotFoundError",
    "PermissionDeniedError",
    "RateLimitError",
    "TransportError",
    "ValidationError",
]
