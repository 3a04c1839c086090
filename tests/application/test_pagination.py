"""Tests for cursor pagination.

Uses the in-memory fake transport — no network.
"""

from oms_client.application.executor import RequestExecutor
from oms_client.application.pagination import Pager
from oms_client.domain.exceptions import ApiError, FieldMismatch, NoNextPage, NoPreviousPage
from oms_client.domain.model.collection import PaginatedCollection
from oms_client.domain.model.order import ORDER_SHAPE
from oms_client.domain.model.value_objects import ListQuery
from oms_client.domain.transport import HttpMethod
from tests.fakes import FakeTransport


QUERY = ListQuery.of("/orders", {"customer_info.customer_id": "cus_1", "expand[]": "x"})


def _setup(**pager_kwargs) -> tuple[Pager, FakeTransport]:
    transport = FakeTransport()
    return Pager(RequestExecutor(transport), **pager_kwargs), transport


def _envelope(*ids: str, next: str | None = None, previous: str | None = None) -> dict:
    body: dict = {
        "object": "list",
        "has_more": next is not None,
        "data": [{"id": i} for i in ids],
    }
    if next is not None:
        body["next"] = next
    if previous is not None:
        body["previous"] = previous
    return body


class TestFirstPage:

    def test_requests_filters_and_limit(self):
        pager, transport = _setup()
        transport.respond(200, _envelope("ord_1", "ord_2", next="ord_2"))
        page = pager.first_page(QUERY, ORDER_SHAPE, limit=2).unwrap()

        call = transport.last_call
        assert call.method is HttpMethod.GET
        assert call.path == "/orders"
        assert call.query == {
            "customer_info.customer_id": "cus_1",
            "expand[]": "x",
            "limit": "2",
        }
        assert [o.id for o in page] == ["ord_1", "ord_2"]
        assert page.next == "ord_2"
        assert page.has_more is True
        assert page.limit == 2

    def test_no_limit_sent_when_unset(self):
        pager, transport = _setup()
        transport.respond(200, _envelope())
        pager.first_page(QUERY, ORDER_SHAPE)
        assert "limit" not in transport.last_call.query

    def test_empty_page(self):
        pager, transport = _setup()
        transport.respond(200, _envelope())
        page = pager.first_page(QUERY, ORDER_SHAPE).unwrap()
        assert len(page) == 0
        assert not page.has_next

    def test_bad_element_fails_whole_page(self):
        pager, transport = _setup()
        transport.respond(200, {"data": [{"id": "ord_1"}, {"id": "ord_2", "line_items": [1]}]})
        result = pager.first_page(QUERY, ORDER_SHAPE)
        assert isinstance(result.error, FieldMismatch)
        assert result.error.field == "data[1].line_items"

    def test_api_error(self):
        pager, transport = _setup()
        transport.respond(401, {"type": "authentication_error", "message": "bad key"})
        result = pager.first_page(QUERY, ORDER_SHAPE)
        assert isinstance(result.error, ApiError)
        assert result.error.status == 401


class TestFetchNext:

    def test_cursor_round_trip(self):
        pager, transport = _setup()
        transport.respond(200, _envelope("ord_1", "ord_2", next="ord_2"))
        transport.respond(200, _envelope("ord_3", previous="ord_3"))

        first = pager.first_page(QUERY, ORDER_SHAPE, limit=2).unwrap()
        second = pager.fetch_next(first).unwrap()

        assert transport.last_call.query == {
            "customer_info.customer_id": "cus_1",
            "expand[]": "x",
            "limit": "2",
            "next": "ord_2",
        }
        assert second.query == first.query
        assert second.element_shape is first.element_shape
        assert [o.id for o in second] == ["ord_3"]
        assert not second.has_next
        assert second.previous == "ord_3"

    def test_no_next_makes_no_call(self):
        pager, transport = _setup()
        transport.respond(200, _envelope("ord_1"))
        page = pager.first_page(QUERY, ORDER_SHAPE).unwrap()

        result = pager.fetch_next(page)
        assert isinstance(result.error, NoNextPage)
        assert len(transport.calls) == 1

    def test_limit_override(self):
        pager, transport = _setup()
        transport.respond(200, _envelope("ord_1", next="ord_1"))
        transport.respond(200, _envelope())
        page = pager.first_page(QUERY, ORDER_SHAPE, limit=1).unwrap()
        nxt = pager.fetch_next(page, limit=50).unwrap()
        assert transport.last_call.query["limit"] == "50"
        assert nxt.limit == 50

    def test_source_page_unchanged_and_refetchable(self):
        pager, transport = _setup()
        transport.respond(200, _envelope("ord_1", next="ord_1"))
        transport.respond(200, _envelope("ord_2"))
        transport.respond(200, _envelope("ord_2"))
        page = pager.first_page(QUERY, ORDER_SHAPE).unwrap()

        a = pager.fetch_next(page).unwrap()
        b = pager.fetch_next(page).unwrap()
        assert page.next == "ord_1"
        assert a == b
        assert transport.calls[1] == transport.calls[2]

    def test_custom_parameter_names(self):
        pager, transport = _setup(next_param="starting_after", previous_param="ending_before")
        transport.respond(200, _envelope("ord_1", next="ord_1", previous="ord_0"))
        transport.respond(200, _envelope())
        transport.respond(200, _envelope())
        page = pager.first_page(QUERY, ORDER_SHAPE).unwrap()

        pager.fetch_next(page)
        assert transport.last_call.query["starting_after"] == "ord_1"
        pager.fetch_previous(page)
        assert transport.last_call.query["ending_before"] == "ord_0"
        assert "next" not in transport.last_call.query


class TestFetchPrevious:

    def test_walks_back(self):
        pager, transport = _setup()
        transport.respond(200, _envelope("ord_3", previous="ord_3"))
        transport.respond(200, _envelope("ord_1", "ord_2", next="ord_2"))
        page = pager.first_page(QUERY, ORDER_SHAPE, limit=2).unwrap()

        before = pager.fetch_previous(page).unwrap()
        assert transport.last_call.query["previous"] == "ord_3"
        assert transport.last_call.query["limit"] == "2"
        assert [o.id for o in before] == ["ord_1", "ord_2"]

    def test_no_previous_makes_no_call(self):
        collection = PaginatedCollection((), QUERY, ORDER_SHAPE)
        pager, transport = _setup()
        result = pager.fetch_previous(collection)
        assert isinstance(result.error, NoPreviousPage)
        assert transport.calls == []
