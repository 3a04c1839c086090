"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They validate on construction so an invalid query can never be sent.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, TypeVar, Union

LIMIT_PARAM: Final = "limit"


class _Missing:
    """Marker for a declared field the server did not send.

    Distinct from ``None``, which means the server sent an explicit JSON
    ``null``.  There is exactly one instance: ``MISSING``.
    """

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Missing:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

T = TypeVar("T")

# A decoded field: the value, an explicit null, or not sent at all.
Maybe = Union[T, None, _Missing]


def is_present(value: Any) -> bool:
    """True unless *value* is the ``MISSING`` marker (``None`` is present)."""
    return value is not MISSING


@dataclass(frozen=True)
class ListQuery:
    """The fixed part of a list request: resource path plus filters.

    Cursor and limit parameters are never part of the base query; they are
    added per page by ``params()`` so every page of a walk shares the same
    filters.
    """

    path: str
    filters: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError(f"List path must start with '/', got {self.path!r}")
        for key, value in self.filters:
            if key == LIMIT_PARAM:
                raise ValueError("'limit' is a page parameter, not a filter")
            if not isinstance(value, str):
                raise TypeError(
                    f"Filter {key!r} must be a string, got {type(value).__name__}"
                )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(path: str, filters: Mapping[str, Any] | None = None) -> ListQuery:
        """Build a query, rendering filter values the way the API expects."""
        pairs = tuple(
            (key, _render(value))
            for key, value in (filters or {}).items()
            if value is not None
        )
        return ListQuery(path, pairs)

    def params(
        self,
        limit: int | None = None,
        cursor: tuple[str, str] | None = None,
    ) -> dict[str, str]:
        """Query mapping for one page: filters, then limit, then the cursor."""
        rendered = dict(self.filters)
        if limit is not None:
            rendered[LIMIT_PARAM] = str(limit)
        if cursor is not None:
            name, token = cursor
            rendered[name] = token
        return rendered


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
