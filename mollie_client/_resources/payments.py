"""Payments resources: payments and the refunds, chargebacks and captures under them."""

from .._models import Capture, Chargeback, Payment, Refund
from ._base import Operation, ParentDescriptor, ResourceDescriptor

PAYMENT_PARENT = ParentDescriptor(
    path="payments", id_prefix=Payment.resource_prefix, label="payment", param="paymentId"
)

PAYMENTS = ResourceDescriptor(
    name="payments",
    path="payments",
    model=Payment,
    api_name="Payments API",
)

PAYMENT_REFUNDS = ResourceDescriptor(
    name="payment_refunds",
    path="refunds",
    model=Refund,
    api_name="Refunds API",
    parent=PAYMENT_PARENT,
    operations=frozenset({Operation.CREATE, Operation.GET, Operation.LIST, Operation.DELETE}),
)

PAYMENT_CHARGEBACKS = ResourceDescriptor(
    name="payment_chargebacks",
    path="chargebacks",
    model=Chargeback,
    api_name="Chargebacks API",
    parent=PAYMENT_PARENT,
    operations=frozenset({Operation.GET, Operation.LIST}),
)

PAYMENT_CAPTURES = ResourceDescriptor(
    name="payment_captures",
    path="captures",
    model=Capture,
    api_name="Captures API",
    parent=PAYMENT_PARENT,
    operations=frozenset({Operation.GET, Operation.LIST}),
)
