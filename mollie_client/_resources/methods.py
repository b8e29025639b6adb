"""Methods resource: payment methods enabled on the profile."""

from .._models import Method
from ._base import Operation, ResourceDescriptor

METHODS = ResourceDescriptor(
    name="methods",
    path="methods",
    model=Method,
    api_name="Methods API",
    operations=frozenset({Operation.GET, Operation.LIST}),
)
