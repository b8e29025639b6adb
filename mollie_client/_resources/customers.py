"""Customers resources: customers and their payments, mandates and subscriptions."""

from .._models import Customer, Mandate, Payment, Subscription
from ._base import Operation, ParentDescriptor, ResourceDescriptor

CUSTOMER_PARENT = ParentDescriptor(
    path="customers", id_prefix=Customer.resource_prefix, label="customer", param="customerId"
)

CUSTOMERS = ResourceDescriptor(
    name="customers",
    path="customers",
    model=Customer,
    api_name="Customers API",
)

CUSTOMER_PAYMENTS = ResourceDescriptor(
    name="customer_payments",
    path="payments",
    model=Payment,
    api_name="Customers API (Payments section)",
    parent=CUSTOMER_PARENT,
    operations=frozenset({Operation.CREATE, Operation.LIST}),
)

CUSTOMER_MANDATES = ResourceDescriptor(
    name="customer_mandates",
    path="mandates",
    model=Mandate,
    api_name="Mandates API",
    parent=CUSTOMER_PARENT,
    operations=frozenset({Operation.CREATE, Operation.GET, Operation.LIST, Operation.DELETE}),
)

CUSTOMER_SUBSCRIPTIONS = ResourceDescriptor(
    name="customer_subscriptions",
    path="subscriptions",
    model=Subscription,
    api_name="Subscriptions API",
    parent=CUSTOMER_PARENT,
)
