"""Tests for PaginatedList: envelope parsing, cursor navigation, auto paging."""

import pytest

from mollie_client._exceptions import APIError
from mollie_client._models import Payment
from mollie_client._resources import PAYMENTS, Resource
from mollie_client._types import PaginatedList
from tests.utils.factories import list_data, payment_data

PAGE_2 = "https://api.mollie.com/v2/payments?from=tr_3&limit=2"
PAGE_1 = "https://api.mollie.com/v2/payments?from=tr_1&limit=2"


class TestFromResponse:
    def test_envelope(self):
        body = list_data("payments", [payment_data("tr_1"), payment_data("tr_2")], next=PAGE_2)
        page = PaginatedList.from_response(body, model=Payment, embedded_key="payments")
        assert [p.id for p in page] == ["tr_1", "tr_2"]
        assert len(page) == 2
        assert page[1].id == "tr_2"
        assert page.count == 2
        assert page.next_cursor == PAGE_2
        assert page.previous_cursor is None
        assert page.has_next()
        assert not page.has_previous()

    def test_order_preserved(self):
        ids = ["tr_9", "tr_1", "tr_5"]
        body = list_data("payments", [payment_data(i) for i in ids])
        page = PaginatedList.from_response(body, model=Payment, embedded_key="payments")
        assert [p.id for p in page] == ids

    def test_missing_links_and_count(self):
        body = {"_embedded": {"payments": []}}
        page = PaginatedList.from_response(body, model=Payment, embedded_key="payments")
        assert len(page) == 0
        assert page.count is None
        assert page.next_cursor is None

    @pytest.mark.parametrize(
        "body",
        [
            None,
            [],
            {"count": 0},
            {"_embedded": None},
            {"_embedded": {"refunds": []}},
            {"_embedded": {"payments": {"id": "tr_1"}}},
        ],
    )
    def test_malformed_envelope(self, body):
        with pytest.raises(APIError, match="Malformed list response"):
            PaginatedList.from_response(body, model=Payment, embedded_key="payments")

    def test_page_larger_than_limit(self):
        body = list_data("payments", [payment_data("tr_1"), payment_data("tr_2")])
        with pytest.raises(APIError, match="page size of 1"):
            PaginatedList.from_response(body, model=Payment, embedded_key="payments", limit=1)

    @pytest.mark.asyncio
    async def test_navigation_without_fetcher(self):
        body = list_data("payments", [], next=PAGE_2)
        page = PaginatedList.from_response(body, model=Payment, embedded_key="payments")
        assert await page.next_page() is None


class TestNavigation:
    @pytest.mark.asyncio
    async def test_next_page_follows_exact_link(self, spy):
        spy.add_response(
            "GET", "/payments", list_data("payments", [payment_data("tr_1")], next=PAGE_2)
        )
        spy.add_response(
            "GET", PAGE_2, list_data("payments", [payment_data("tr_3")], previous=PAGE_1)
        )
        first = await Resource(spy, PAYMENTS).list({"status": "paid"})
        second = await first.next_page()

        assert second is not first
        assert [p.id for p in second] == ["tr_3"]
        assert [p.id for p in first] == ["tr_1"]
        assert spy.calls[1].method == "GET"
        assert spy.calls[1].path == PAGE_2
        assert spy.calls[1].params is None
        assert len(spy.calls) == 2

    @pytest.mark.asyncio
    async def test_next_page_absent_returns_none(self, spy):
        spy.add_response("GET", "/payments", list_data("payments", [payment_data("tr_1")]))
        page = await Resource(spy, PAYMENTS).list()
        assert await page.next_page() is None
        assert len(spy.calls) == 1

    @pytest.mark.asyncio
    async def test_previous_page(self, spy):
        spy.add_response("GET", PAGE_2, list_data("payments", [payment_data("tr_3")]))
        spy.add_response(
            "GET", "/payments", list_data("payments", [payment_data("tr_5")], previous=PAGE_2)
        )
        page = await Resource(spy, PAYMENTS).list()
        previous = await page.previous_page()
        assert [p.id for p in previous] == ["tr_3"]
        assert await previous.previous_page() is None

    @pytest.mark.asyncio
    async def test_each_navigation_is_a_new_request(self, spy):
        spy.add_response(
            "GET", "/payments", list_data("payments", [payment_data("tr_1")], next=PAGE_2)
        )
        spy.add_response("GET", PAGE_2, list_data("payments", [payment_data("tr_3")]))
        page = await Resource(spy, PAYMENTS).list()
        await page.next_page()
        await page.next_page()
        assert [c.path for c in spy.calls] == ["/payments", PAGE_2, PAGE_2]

    @pytest.mark.asyncio
    async def test_limit_carried_to_next_pages(self, spy):
        spy.add_response(
            "GET",
            "/payments",
            list_data("payments", [payment_data("tr_1")], next=PAGE_2),
        )
        spy.add_response(
            "GET", PAGE_2, list_data("payments", [payment_data("tr_3"), payment_data("tr_4")])
        )
        page = await Resource(spy, PAYMENTS).list({"limit": 1})
        with pytest.raises(APIError, match="page size of 1"):
            await page.next_page()


class TestAutoPagingIter:
    @pytest.mark.asyncio
    async def test_walks_all_pages(self, spy):
        spy.add_response(
            "GET",
            "/payments",
            list_data("payments", [payment_data("tr_1"), payment_data("tr_2")], next=PAGE_2),
        )
        spy.add_response("GET", PAGE_2, list_data("payments", [payment_data("tr_3")]))
        page = await Resource(spy, PAYMENTS).list()
        items = [p.id async for p in page.auto_paging_iter()]
        assert items == ["tr_1", "tr_2", "tr_3"]

    @pytest.mark.asyncio
    async def test_empty_page(self, spy):
        spy.add_response("GET", "/payments", list_data("payments", []))
        page = await Resource(spy, PAYMENTS).list()
        assert [p async for p in page.auto_paging_iter()] == []

    @pytest.mark.asyncio
    async def test_resource_iterate(self, spy):
        spy.add_response(
            "GET", "/payments", list_data("payments", [payment_data("tr_1")], next=PAGE_2)
        )
        spy.add_response("GET", PAGE_2, list_data("payments", [payment_data("tr_3")]))
        ids = [p.id async for p in Resource(spy, PAYMENTS).iterate()]
        assert ids == ["tr_1", "tr_3"]
