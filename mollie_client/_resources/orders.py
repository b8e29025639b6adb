"""Orders resources: orders and their lines, shipments and refunds."""

from .._models import Order, Refund, Shipment
from ._base import Operation, ParentDescriptor, ResourceDescriptor

ORDER_PARENT = ParentDescriptor(
    path="orders", id_prefix=Order.resource_prefix, label="order", param="orderId"
)

ORDERS = ResourceDescriptor(
    name="orders",
    path="orders",
    model=Order,
    api_name="Orders API",
)

# Lines are addressed through their order: PATCH/DELETE /orders/{orderId}/lines,
# and the API answers with the whole order.
ORDER_LINES = ResourceDescriptor(
    name="order_lines",
    path="lines",
    model=Order,
    api_name="Orders API (Order Lines section)",
    parent=ORDER_PARENT,
    operations=frozenset({Operation.UPDATE, Operation.DELETE}),
    id_prefix=Order.resource_prefix,
    id_label="order",
    id_is_parent=True,
)

ORDER_SHIPMENTS = ResourceDescriptor(
    name="order_shipments",
    path="shipments",
    model=Shipment,
    api_name="Shipments API",
    parent=ORDER_PARENT,
    operations=frozenset(
        {Operation.CREATE, Operation.GET, Operation.LIST, Operation.UPDATE}
    ),
)

ORDER_REFUNDS = ResourceDescriptor(
    name="order_refunds",
    path="refunds",
    model=Refund,
    api_name="Refunds API (Order Refunds section)",
    parent=ORDER_PARENT,
    operations=frozenset({Operation.CREATE, Operation.LIST}),
)
