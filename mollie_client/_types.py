"""Paginated list container for Mollie list responses."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, overload

from ._exceptions import APIError
from ._models import Entity

E = TypeVar("E", bound=Entity)


def _href(links: Any, key: str) -> str | None:
    if not isinstance(links, dict):
        return None
    link = links.get(key)
    if isinstance(link, dict):
        return link.get("href")
    return None


@dataclass(frozen=True)
class PaginatedList(Generic[E]):
    """One page of results, in API order, with cursor links to its neighbours.

    Usage:
        page = await client.payments.list({"limit": 50})
        while page is not None:
            for payment in page:
                print(payment.id)
            page = await page.next_page()
    """

    items: list[E]
    previous_cursor: str | None = None
    next_cursor: str | None = None
    count: int | None = None
    limit: int | None = None
    _fetch: Callable[[str], Awaitable[PaginatedList[E]]] | None = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def from_response(
        cls,
        body: Any,
        *,
        model: type[E],
        embedded_key: str,
        limit: int | None = None,
        fetch: Callable[[str], Awaitable[PaginatedList[E]]] | None = None,
    ) -> PaginatedList[E]:
        """Hydrate a list envelope: ``{"count", "_embedded": {key: [...]}, "_links"}``."""
        if not isinstance(body, dict):
            raise APIError(
                f"Malformed list response: expected an object, got {type(body).__name__}"
            )
        embedded = body.get("_embedded")
        if not isinstance(embedded, dict) or not isinstance(embedded.get(embedded_key), list):
            raise APIError(f'Malformed list response: missing "_embedded.{embedded_key}"')

        raw_items = embedded[embedded_key]
        if limit is not None and len(raw_items) > limit:
            raise APIError(
                f"Malformed list response: {len(raw_items)} items for a page size of {limit}"
            )

        links = body.get("_links")
        count = body.get("count")
        return cls(
            items=[model.from_dict(item) for item in raw_items],
            previous_cursor=_href(links, "previous"),
            next_cursor=_href(links, "next"),
            count=count if isinstance(count, int) else None,
            limit=limit,
            _fetch=fetch,
        )

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[E]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> E: ...

    @overload
    def __getitem__(self, index: slice) -> list[E]: ...

    def __getitem__(self, index: int | slice) -> E | list[E]:
        return self.items[index]

    def has_next(self) -> bool:
        return self.next_cursor is not None

    def has_previous(self) -> bool:
        return self.previous_cursor is not None

    async def next_page(self) -> PaginatedList[E] | None:
        """Fetch the following page, or ``None`` at the end of the list."""
        return await self._follow(self.next_cursor)

    async def previous_page(self) -> PaginatedList[E] | None:
        """Fetch the preceding page, or ``None`` at the start of the list."""
        return await self._follow(self.previous_cursor)

    async def _follow(self, cursor: str | None) -> PaginatedList[E] | None:
        if cursor is None or self._fetch is None:
            return None
        return await self._fetch(cursor)

    async def auto_paging_iter(self) -> AsyncIterator[E]:
        """Yield every item from this page onwards, fetching next pages as needed."""
        page: PaginatedList[E] | None = self
        while page is not None:
            for item in page.items:
                yield item
            page = await page.next_page()
