"""Entity models hydrated from Mollie API response objects."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from ._exceptions import APIError


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


@dataclass(frozen=True)
class Entity:
    """One API object. Keeps every response field, modelled or not.

    Fields are reachable by their API name or its snake_case spelling::

        payment["createdAt"] == payment.created_at

    Entities compare by their fields and hash by kind and id.
    """

    data: dict[str, Any]
    extras: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    resource_prefix: ClassVar[str] = ""
    resource_label: ClassVar[str] = "resource"

    @classmethod
    def from_dict(cls, data: Any) -> Entity:
        if not isinstance(data, Mapping):
            raise APIError(
                f"Malformed {cls.resource_label} response: expected an object, "
                f"got {type(data).__name__}"
            )
        raw = copy.deepcopy(dict(data))
        return cls(data=raw, extras=cls._hydrate(raw))

    @classmethod
    def _hydrate(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Per-model hook: build helper data (nested entities) from the raw fields."""
        return {}

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.data.get("id")))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in ("data", "extras"):
            raise AttributeError(name)
        data = self.__dict__.get("data", {})
        if name in data:
            return data[name]
        camel = _camel(name)
        if camel in data:
            return data[camel]
        raise AttributeError(f"{type(self).__name__} has no field {name!r}")

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Plain copy of the original response fields."""
        return copy.deepcopy(self.data)

    @property
    def links(self) -> dict[str, Any]:
        links = self.data.get("_links")
        return links if isinstance(links, dict) else {}

    def get_link(self, name: str) -> dict[str, Any] | None:
        link = self.links.get(name)
        return link if isinstance(link, dict) else None

    def get_url(self, name: str) -> str | None:
        link = self.get_link(name)
        return link.get("href") if link else None

    def _status_is(self, status: str) -> bool:
        return self.data.get("status") == status


def _entities(items: Any, model: type[Entity], label: str, where: str) -> list[Entity]:
    if items is None:
        return []
    if not isinstance(items, list):
        raise APIError(
            f'Malformed {label} response: "{where}" must be a list, got {type(items).__name__}'
        )
    return [model.from_dict(item) for item in items]


def _embedded(data: dict[str, Any], key: str, model: type[Entity], label: str) -> list[Entity]:
    embedded = data.get("_embedded")
    if embedded is None:
        return []
    if not isinstance(embedded, Mapping):
        raise APIError(
            f'Malformed {label} response: "_embedded" must be an object, '
            f"got {type(embedded).__name__}"
        )
    return _entities(embedded.get(key), model, label, f"_embedded.{key}")


class Payment(Entity):
    resource_prefix: ClassVar[str] = "tr_"
    resource_label: ClassVar[str] = "payment"

    @classmethod
    def _hydrate(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "refunds": _embedded(data, "refunds", Refund, cls.resource_label),
            "chargebacks": _embedded(data, "chargebacks", Chargeback, cls.resource_label),
            "captures": _embedded(data, "captures", Capture, cls.resource_label),
        }

    def is_open(self) -> bool:
        return self._status_is("open")

    def is_pending(self) -> bool:
        return self._status_is("pending")

    def is_authorized(self) -> bool:
        return self._status_is("authorized")

    def is_canceled(self) -> bool:
        return self._status_is("canceled")

    def is_expired(self) -> bool:
        return self._status_is("expired")

    def is_failed(self) -> bool:
        return self._status_is("failed")

    def is_paid(self) -> bool:
        return self.data.get("paidAt") is not None

    def is_refundable(self) -> bool:
        return self.data.get("amountRemaining") is not None

    def has_refunds(self) -> bool:
        return "refunds" in self.links

    def has_chargebacks(self) -> bool:
        return "chargebacks" in self.links

    def get_checkout_url(self) -> str | None:
        return self.get_url("checkout")

    def get_refunds(self) -> list[Refund]:
        return self.extras.get("refunds", [])

    def get_chargebacks(self) -> list[Chargeback]:
        return self.extras.get("chargebacks", [])

    def get_captures(self) -> list[Capture]:
        return self.extras.get("captures", [])


class OrderLine(Entity):
    resource_prefix: ClassVar[str] = "odl_"
    resource_label: ClassVar[str] = "order line"

    def is_shippable(self) -> bool:
        return (self.data.get("shippableQuantity") or 0) > 0

    def is_refundable(self) -> bool:
        return (self.data.get("refundableQuantity") or 0) > 0


class Order(Entity):
    resource_prefix: ClassVar[str] = "ord_"
    resource_label: ClassVar[str] = "order"

    @classmethod
    def _hydrate(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "lines": _entities(data.get("lines"), OrderLine, cls.resource_label, "lines"),
            "payments": _embedded(data, "payments", Payment, cls.resource_label),
            "refunds": _embedded(data, "refunds", Refund, cls.resource_label),
            "shipments": _embedded(data, "shipments", Shipment, cls.resource_label),
        }

    def is_created(self) -> bool:
        return self._status_is("created")

    def is_paid(self) -> bool:
        return self._status_is("paid")

    def is_authorized(self) -> bool:
        return self._status_is("authorized")

    def is_canceled(self) -> bool:
        return self._status_is("canceled")

    def is_shipping(self) -> bool:
        return self._status_is("shipping")

    def is_completed(self) -> bool:
        return self._status_is("completed")

    def is_expired(self) -> bool:
        return self._status_is("expired")

    def is_pending(self) -> bool:
        return self._status_is("pending")

    def get_checkout_url(self) -> str | None:
        return self.get_url("checkout")

    def get_lines(self) -> list[OrderLine]:
        return self.extras.get("lines", [])

    def get_payments(self) -> list[Payment]:
        return self.extras.get("payments", [])

    def get_refunds(self) -> list[Refund]:
        return self.extras.get("refunds", [])

    def get_shipments(self) -> list[Shipment]:
        return self.extras.get("shipments", [])


class Shipment(Entity):
    resource_prefix: ClassVar[str] = "shp_"
    resource_label: ClassVar[str] = "shipment"

    @classmethod
    def _hydrate(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {"lines": _entities(data.get("lines"), OrderLine, cls.resource_label, "lines")}

    def has_tracking(self) -> bool:
        return bool(self.data.get("tracking"))

    def get_tracking_url(self) -> str | None:
        tracking = self.data.get("tracking")
        return tracking.get("url") if isinstance(tracking, dict) else None

    def get_lines(self) -> list[OrderLine]:
        return self.extras.get("lines", [])


class Refund(Entity):
    resource_prefix: ClassVar[str] = "re_"
    resource_label: ClassVar[str] = "refund"

    def is_queued(self) -> bool:
        return self._status_is("queued")

    def is_pending(self) -> bool:
        return self._status_is("pending")

    def is_processing(self) -> bool:
        return self._status_is("processing")

    def is_refunded(self) -> bool:
        return self._status_is("refunded")

    def is_failed(self) -> bool:
        return self._status_is("failed")


class Chargeback(Entity):
    resource_prefix: ClassVar[str] = "chb_"
    resource_label: ClassVar[str] = "chargeback"


class Capture(Entity):
    resource_prefix: ClassVar[str] = "cpt_"
    resource_label: ClassVar[str] = "capture"


class Customer(Entity):
    resource_prefix: ClassVar[str] = "cst_"
    resource_label: ClassVar[str] = "customer"


class Mandate(Entity):
    resource_prefix: ClassVar[str] = "mdt_"
    resource_label: ClassVar[str] = "mandate"

    def is_valid(self) -> bool:
        return self._status_is("valid")


class Subscription(Entity):
    resource_prefix: ClassVar[str] = "sub_"
    resource_label: ClassVar[str] = "subscription"

    def is_active(self) -> bool:
        return self._status_is("active")

    def is_pending(self) -> bool:
        return self._status_is("pending")

    def is_canceled(self) -> bool:
        return self._status_is("canceled")

    def is_suspended(self) -> bool:
        return self._status_is("suspended")

    def is_completed(self) -> bool:
        return self._status_is("completed")


class Method(Entity):
    # Method ids are plain names ("ideal"), no prefix.
    resource_label: ClassVar[str] = "method"

    def get_image(self, size: str = "size2x") -> str | None:
        image = self.data.get("image")
        return image.get(size) if isinstance(image, dict) else None
