"""Client error taxonomy.

Every failure an operation can report is an ``OmsClientError`` subclass.
Operations never raise them: they are returned inside ``Err`` so the caller
decides what to do.  They are still exceptions so ``Result.unwrap()`` can
raise them and callers can ``raise result.error`` when they prefer that.
"""

from __future__ import annotations

from typing import Any


class OmsClientError(Exception):
    """Base class for all client errors."""


class TransportError(OmsClientError):
    """The request never produced an HTTP response (connection, timeout, DNS)."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class RequestEncodingError(OmsClientError):
    """The caller-supplied attributes could not be encoded as JSON."""


class ApiError(OmsClientError):
    """The server answered with a non-2xx status.

    ``type``, ``message`` and ``code`` come from the structured error body
    when it could be decoded; otherwise they are ``None`` and ``raw_body``
    holds the response text.
    """

    def __init__(
        self,
        status: int,
        type: str | None = None,
        message: str | None = None,
        code: str | None = None,
        details: tuple[Any, ...] = (),
        log_id: str | None = None,
        raw_body: str | None = None,
    ) -> None:
        super().__init__(self._describe(status, type, message, raw_body))
        self.status = status
        self.type = type
        self.message = message
        self.code = code
        self.details = details
        self.log_id = log_id
        self.raw_body = raw_body

    @property
    def is_structured(self) -> bool:
        return self.type is not None or self.message is not None

    @staticmethod
    def _describe(
        status: int, type: str | None, message: str | None, raw_body: str | None
    ) -> str:
        if type or message:
            return f"HTTP {status} {type or 'error'}: {message or 'no message'}"
        return f"HTTP {status}: {raw_body or 'empty response body'}"


# --- Decoding -----------------------------------------------------------------


class DecodeError(OmsClientError):
    """A 2xx response body did not match the expected shape."""

    def __init__(self, message: str, path: tuple[str | int, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    @property
    def field(self) -> str:
        """Dotted rendering of ``path``, e.g. ``line_items.data[1].amount``."""
        return render_path(self.path)

    @property
    def index(self) -> int | None:
        """Index of the failing list element when the path starts at a list."""
        if self.path and isinstance(self.path[0], int):
            return self.path[0]
        return None


class MalformedJson(DecodeError):
    """The body is not well-formed JSON."""


class FieldMismatch(DecodeError):
    """A present value cannot be coerced into its declared shape."""

    def __init__(
        self, path: tuple[str | int, ...], expected: str, actual: str
    ) -> None:
        where = render_path(path) or "<root>"
        super().__init__(f"{where}: expected {expected}, got {actual}", path)
        self.expected = expected
        self.actual = actual


# --- Pagination ---------------------------------------------------------------


class PaginationError(OmsClientError):
    """A page that does not exist was requested."""


class NoNextPage(PaginationError):
    def __init__(self) -> None:
        super().__init__("Collection has no next page")


class NoPreviousPage(PaginationError):
    def __init__(self) -> None:
        super().__init__("Collection has no previous page")


def render_path(path: tuple[str | int, ...]) -> str:
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered
