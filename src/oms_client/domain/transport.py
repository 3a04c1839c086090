"""Abstract transport — the HTTP collaborator the client depends on.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (requests, in-memory fakes)
live elsewhere.

Contract:
  - returns the full body for *every* status code; a 404 is an ``Ok``
    carrying ``RawResponse(status=404, ...)``, not an error;
  - reports only failures to obtain a response as ``Err(TransportError)``;
  - never retries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from oms_client.domain.exceptions import TransportError
from oms_client.domain.result import Result


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(ABC):

    @abstractmethod
    def request(
        self,
        method: HttpMethod,
        path: str,
        query: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> Result[RawResponse, TransportError]:
        """Perform one HTTP round trip against the configured base URL."""
