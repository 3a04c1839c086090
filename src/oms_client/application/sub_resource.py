"""Generic CRUD for resources nested under a parent (``/orders/{id}/<segment>``).

Line items, shipping lines, tax lines, discount lines and charges all follow
the same pattern; each is one ``NestedResource`` parameterised by its path
segment and the shape of its result.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oms_client.application.executor import RequestExecutor, resource_path
from oms_client.domain.exceptions import OmsClientError
from oms_client.domain.model.shape import Shape
from oms_client.domain.result import Result
from oms_client.domain.transport import HttpMethod


class NestedResource:

    def __init__(
        self,
        executor: RequestExecutor,
        parent_endpoint: str,
        segment: str,
        shape: Shape,
    ) -> None:
        self._executor = executor
        self._parent_endpoint = parent_endpoint
        self._segment = segment
        self._shape = shape

    def create(
        self, parent_id: str, attrs: Mapping[str, Any]
    ) -> Result[Any, OmsClientError]:
        return self._executor.execute(
            HttpMethod.POST,
            self._path(parent_id),
            self._shape,
            attrs=attrs,
        )

    def update(
        self, parent_id: str, child_id: str, attrs: Mapping[str, Any]
    ) -> Result[Any, OmsClientError]:
        return self._executor.execute(
            HttpMethod.PUT,
            self._path(parent_id, child_id),
            self._shape,
            attrs=attrs,
        )

    def delete(self, parent_id: str, child_id: str) -> Result[Any, OmsClientError]:
        """Delete the child; the server answers with the deleted object."""
        return self._executor.execute(
            HttpMethod.DELETE,
            self._path(parent_id, child_id),
            self._shape,
        )

    def _path(self, parent_id: str, child_id: str | None = None) -> str:
        parent = resource_path(self._parent_endpoint, parent_id)
        if child_id is None:
            return f"{parent}/{self._segment}"
        return resource_path(f"{parent}/{self._segment}", child_id)
