"""Application service: cursor pagination over list endpoints.

A walk is two transitions with no intermediate state:

    first_page(query)          -> PaginatedCollection
    fetch_next(collection)     -> PaginatedCollection   (or NoNextPage)
    fetch_previous(collection) -> PaginatedCollection   (or NoPreviousPage)

Every page reuses the collection's base query unchanged and adds only the
cursor and the limit.  A missing cursor fails locally, without a network
call.
"""

from __future__ import annotations

from oms_client.application.executor import RequestExecutor
from oms_client.domain.exceptions import NoNextPage, NoPreviousPage, OmsClientError
from oms_client.domain.model.collection import PaginatedCollection, list_shape
from oms_client.domain.model.shape import Shape
from oms_client.domain.model.value_objects import ListQuery
from oms_client.domain.result import Err, Result
from oms_client.domain.transport import HttpMethod

DEFAULT_NEXT_PARAM = "next"
DEFAULT_PREVIOUS_PARAM = "previous"


class Pager:

    def __init__(
        self,
        executor: RequestExecutor,
        next_param: str = DEFAULT_NEXT_PARAM,
        previous_param: str = DEFAULT_PREVIOUS_PARAM,
    ) -> None:
        self._executor = executor
        self._next_param = next_param
        self._previous_param = previous_param

    def first_page(
        self,
        query: ListQuery,
        element_shape: Shape,
        limit: int | None = None,
    ) -> Result[PaginatedCollection, OmsClientError]:
        return self._fetch(query, element_shape, limit, cursor=None)

    def fetch_next(
        self,
        collection: PaginatedCollection,
        limit: int | None = None,
    ) -> Result[PaginatedCollection, OmsClientError]:
        """Fetch the page after *collection*; *limit* overrides its limit."""
        if collection.next is None:
            return Err(NoNextPage())
        return self._fetch(
            collection.query,
            collection.element_shape,
            collection.limit if limit is None else limit,
            cursor=(self._next_param, collection.next),
        )

    def fetch_previous(
        self,
        collection: PaginatedCollection,
        limit: int | None = None,
    ) -> Result[PaginatedCollection, OmsClientError]:
        """Fetch the page before *collection*; *limit* overrides its limit."""
        if collection.previous is None:
            return Err(NoPreviousPage())
        return self._fetch(
            collection.query,
            collection.element_shape,
            collection.limit if limit is None else limit,
            cursor=(self._previous_param, collection.previous),
        )

    # --- Internal helpers -----------------------------------------------------

    def _fetch(
        self,
        query: ListQuery,
        element_shape: Shape,
        limit: int | None,
        cursor: tuple[str, str] | None,
    ) -> Result[PaginatedCollection, OmsClientError]:
        return self._executor.execute(
            HttpMethod.GET,
            query.path,
            list_shape(element_shape),
            query=query.params(limit=limit, cursor=cursor),
        ).map(
            lambda envelope: PaginatedCollection.from_list(
                envelope, query, element_shape, limit
            )
        )
