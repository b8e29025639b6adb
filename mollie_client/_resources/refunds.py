"""Account-wide refund and chargeback listings."""

from .._models import Chargeback, Refund
from ._base import Operation, ResourceDescriptor

REFUNDS = ResourceDescriptor(
    name="refunds",
    path="refunds",
    model=Refund,
    api_name="Refunds API",
    operations=frozenset({Operation.LIST}),
)

CHARGEBACKS = ResourceDescriptor(
    name="chargebacks",
    path="chargebacks",
    model=Chargeback,
    api_name="Chargebacks API",
    operations=frozenset({Operation.LIST}),
)
