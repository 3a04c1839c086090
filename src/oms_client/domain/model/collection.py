"""List envelopes and paginated collections.

``ListObject`` is the envelope the API wraps around every list, whether
it is embedded in another object (an order's line items) or returned by a
list endpoint.  ``PaginatedCollection`` is what a list *operation* returns:
the decoded page plus everything needed to ask for the neighbouring pages.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from oms_client.domain.model.shape import ListOf, Object, Shape
from oms_client.domain.model.value_objects import MISSING, ListQuery, Maybe


@dataclass(frozen=True)
class ListObject:
    object: Maybe[str] = MISSING
    has_more: Maybe[bool] = MISSING
    total: Maybe[int] = MISSING
    data: Maybe[tuple[Any, ...]] = MISSING
    next: Maybe[str] = MISSING
    previous: Maybe[str] = MISSING
    next_page_url: Maybe[str] = MISSING
    previous_page_url: Maybe[str] = MISSING

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data or ())

    def __len__(self) -> int:
        return len(self.data or ())


def list_shape(element: Shape) -> Object:
    """Shape of a list envelope whose ``data`` holds *element* values."""
    return Object.of(ListObject, data=ListOf(element))


@dataclass(frozen=True)
class PaginatedCollection:
    """One page of a list operation.

    Never mutated: fetching another page builds a new collection, and this
    one stays valid and can be re-fetched from on its own.  Cursor tokens
    are opaque server values and are only ever threaded back to the server.
    """

    elements: tuple[Any, ...]
    query: ListQuery
    element_shape: Shape
    next: str | None = None
    previous: str | None = None
    limit: int | None = None
    has_more: bool | None = None
    total: int | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_list(
        envelope: ListObject,
        query: ListQuery,
        element_shape: Shape,
        limit: int | None = None,
    ) -> PaginatedCollection:
        return PaginatedCollection(
            elements=tuple(envelope.data or ()),
            query=query,
            element_shape=element_shape,
            next=_token(envelope.next),
            previous=_token(envelope.previous),
            limit=limit,
            has_more=envelope.has_more if isinstance(envelope.has_more, bool) else None,
            total=envelope.total if isinstance(envelope.total, int) else None,
        )

    # --- Sequence protocol ----------------------------------------------------

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Any:
        return self.elements[index]


def _token(value: Any) -> str | None:
    if value is MISSING or value is None or value == "":
        return None
    return str(value)
