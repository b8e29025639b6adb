"""Generic resource engine: one implementation of create/get/list/update/delete for every resource.

A resource kind is data (a ``ResourceDescriptor``), not a subclass. Nested kinds
name their parent; the parent id for a call is resolved once, when the call is
made, and travels with that call in a ``CallContext``.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import quote

from .._exceptions import InvalidInputError, MollieError, TransportError, classify
from .._models import Entity
from .._types import PaginatedList
from ..utils.validation import validate_id
from ._utils import Callback, _pop_parent_id, _split_callback

if TYPE_CHECKING:
    from .._http import Transport

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class Operation(str, Enum):
    CREATE = "create"
    GET = "get"
    LIST = "list"
    UPDATE = "update"
    DELETE = "delete"


ALL_OPERATIONS = frozenset(Operation)


def _snake(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name)


@dataclass(frozen=True)
class ParentDescriptor:
    """The resource a nested kind lives under, e.g. orders for order shipments."""

    path: str
    id_prefix: str
    label: str
    param: str

    @property
    def param_keys(self) -> tuple[str, ...]:
        snake = _snake(self.param)
        return (self.param,) if snake == self.param else (self.param, snake)


@dataclass(frozen=True)
class ResourceDescriptor(Generic[E]):
    """Static description of one resource kind."""

    name: str
    path: str
    model: type[E]
    api_name: str
    parent: ParentDescriptor | None = None
    operations: frozenset[Operation] = ALL_OPERATIONS
    id_prefix: str | None = None
    id_label: str | None = None
    embedded_key: str | None = None
    update_method: str = "PATCH"
    # The id argument is the parent's id and item requests use the collection path.
    id_is_parent: bool = False

    @property
    def prefix(self) -> str:
        return self.model.resource_prefix if self.id_prefix is None else self.id_prefix

    @property
    def label(self) -> str:
        return self.id_label or self.model.resource_label

    @property
    def list_key(self) -> str:
        return self.embedded_key or self.path


@dataclass(frozen=True)
class CallContext:
    """Everything one call needs, fixed at the moment the call is made."""

    operation: Operation
    method_name: str
    id: Any = None
    parent_id: Any = None
    params: dict[str, Any] = field(default_factory=dict)
    callback: Callback | None = None


def _consume_exception(task: asyncio.Task) -> None:
    # The callback already received the error; keep asyncio from reporting it as unhandled.
    if not task.cancelled():
        task.exception()


async def _notify(callback: Callback | None, error: Any, result: Any) -> None:
    if callback is None:
        return
    try:
        outcome = callback(error, result)
        if inspect.isawaitable(outcome):
            await outcome
    except Exception:
        logger.exception("Legacy callback raised; the call result is unaffected")


class Resource(Generic[E]):
    """client.<resource>: the five operations of one resource kind.

    Every operation returns an ``asyncio.Task``; await it, or pass a legacy
    ``callback(error, result)`` which fires once before the task settles.

    Usage:
        payment = await client.payments.get("tr_WDqYK6vllg")
        refund = await client.payment_refunds.create(
            {"paymentId": payment.id, "amount": {"currency": "EUR", "value": "5.00"}}
        )
    """

    def __init__(self, http: Transport, descriptor: ResourceDescriptor[E]):
        self._http = http
        self._descriptor = descriptor
        # Last valid parent id seen on this instance; read only when a call is made.
        self._parent_id: str | None = None

    def __repr__(self) -> str:
        return f"<Resource {self._descriptor.name}>"

    @property
    def descriptor(self) -> ResourceDescriptor[E]:
        return self._descriptor

    # ── Public operations ──────────────────────────────────────────────

    def create(
        self, params: Mapping[str, Any] | Callback | None = None, callback: Callback | None = None
    ) -> asyncio.Task[E]:
        return self._call(Operation.CREATE, "create", None, params, callback)

    def get(
        self,
        id: str,
        params: Mapping[str, Any] | Callback | None = None,
        callback: Callback | None = None,
    ) -> asyncio.Task[E]:
        return self._call(Operation.GET, "get", id, params, callback)

    def list(
        self, params: Mapping[str, Any] | Callback | None = None, callback: Callback | None = None
    ) -> asyncio.Task[PaginatedList[E]]:
        return self._call(Operation.LIST, "list", None, params, callback)

    def all(
        self, params: Mapping[str, Any] | Callback | None = None, callback: Callback | None = None
    ) -> asyncio.Task[PaginatedList[E]]:
        """Alias of ``list``."""
        return self._call(Operation.LIST, "all", None, params, callback)

    def update(
        self,
        id: str,
        params: Mapping[str, Any] | Callback | None = None,
        callback: Callback | None = None,
    ) -> asyncio.Task[E]:
        return self._call(Operation.UPDATE, "update", id, params, callback)

    def delete(
        self,
        id: str,
        params: Mapping[str, Any] | Callback | None = None,
        callback: Callback | None = None,
    ) -> asyncio.Task[bool]:
        return self._call(Operation.DELETE, "delete", id, params, callback)

    def cancel(
        self,
        id: str,
        params: Mapping[str, Any] | Callback | None = None,
        callback: Callback | None = None,
    ) -> asyncio.Task[bool]:
        """Same operation as ``delete``."""
        return self._call(Operation.DELETE, "cancel", id, params, callback)

    async def iterate(self, params: Mapping[str, Any] | None = None) -> AsyncIterator[E]:
        """Yield every entity across all pages of ``list(params)``."""
        page = await self.list(params)
        async for item in page.auto_paging_iter():
            yield item

    # ── Call lifecycle ─────────────────────────────────────────────────

    def _call(
        self,
        operation: Operation,
        method_name: str,
        id: Any,
        params: Mapping[str, Any] | Callback | None,
        callback: Callback | None,
    ) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        params, callback = _split_callback(params, callback)
        ctx = self._context(operation, method_name, id, params, callback)

        task = loop.create_task(self._settle(ctx))
        if callback is not None:
            task.add_done_callback(_consume_exception)
        return task

    def _context(
        self,
        operation: Operation,
        method_name: str,
        id: Any,
        params: dict[str, Any],
        callback: Callback | None,
    ) -> CallContext:
        parent = self._descriptor.parent
        if parent is None or operation not in self._descriptor.operations:
            return CallContext(operation, method_name, id, None, params, callback)

        explicit = _pop_parent_id(params, parent.param_keys)
        if self._descriptor.id_is_parent and id is not None:
            parent_id = id
        elif explicit is not None:
            parent_id = explicit
        else:
            parent_id = self._parent_id

        if validate_id(parent_id, parent.id_prefix, parent.label) is None:
            self._parent_id = parent_id
        return CallContext(operation, method_name, id, parent_id, params, callback)

    async def _settle(self, ctx: CallContext) -> Any:
        try:
            result = await self._execute(ctx)
        except MollieError as exc:
            await _notify(ctx.callback, exc, None)
            raise
        except Exception as exc:
            # A custom transport may fail outside the TransportError contract.
            logger.warning("%s on %s failed unexpectedly: %r", ctx.method_name, self, exc)
            await _notify(ctx.callback, exc, None)
            raise
        await _notify(ctx.callback, None, result)
        return result

    def _validate(self, ctx: CallContext) -> None:
        d = self._descriptor
        if ctx.operation not in d.operations:
            raise InvalidInputError(
                f'The method "{ctx.method_name}" does not exist on the "{d.api_name}"'
            )
        if ctx.operation in (Operation.GET, Operation.UPDATE, Operation.DELETE):
            error = validate_id(ctx.id, d.prefix, d.label)
            if error:
                raise InvalidInputError(error)
        if d.parent is not None:
            error = validate_id(ctx.parent_id, d.parent.id_prefix, d.parent.label)
            if error:
                raise InvalidInputError(error)

    async def _execute(self, ctx: CallContext) -> Any:
        self._validate(ctx)
        op = ctx.operation
        params = ctx.params or None

        if op is Operation.GET:
            body = await self._send("GET", self._path(ctx, item=True), params=params)
            return self._descriptor.model.from_dict(body)

        if op is Operation.LIST:
            limit = ctx.params.get("limit")
            limit = limit if isinstance(limit, int) and not isinstance(limit, bool) else None
            body = await self._send("GET", self._path(ctx), params=params)
            return self._page(body, limit)

        if op is Operation.CREATE:
            body = await self._send("POST", self._path(ctx), json=ctx.params)
            return self._descriptor.model.from_dict(body)

        if op is Operation.UPDATE:
            method = self._descriptor.update_method
            body = await self._send(method, self._path(ctx, item=True), json=ctx.params)
            return self._descriptor.model.from_dict(body)

        await self._send("DELETE", self._path(ctx, item=True), json=params)
        return True

    # ── Helpers ────────────────────────────────────────────────────────

    def _path(self, ctx: CallContext, *, item: bool = False) -> str:
        d = self._descriptor
        segments = []
        if d.parent is not None:
            segments += [d.parent.path, ctx.parent_id]
        segments.append(d.path)
        if item and not d.id_is_parent:
            segments.append(ctx.id)
        return "/" + "/".join(quote(str(s), safe="") for s in segments)

    async def _send(
        self, method: str, path: str, *, params: Mapping[str, Any] | None = None, json: Any = None
    ) -> Any:
        try:
            return await self._http.request(method, path, params=params, json=json)
        except TransportError as exc:
            raise classify(exc) from exc

    def _page(self, body: Any, limit: int | None) -> PaginatedList[E]:
        async def _fetch(url: str) -> PaginatedList[E]:
            return self._page(await self._send("GET", url), limit)

        return PaginatedList.from_response(
            body,
            model=self._descriptor.model,
            embedded_key=self._descriptor.list_key,
            limit=limit,
            fetch=_fetch,
        )
