"""``requests``-backed implementation of Transport."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import requests

from oms_client.domain.exceptions import TransportError
from oms_client.domain.result import Err, Ok, Result
from oms_client.domain.transport import HttpMethod, RawResponse, Transport
from oms_client.infrastructure.config.settings import ClientSettings

logger = logging.getLogger(__name__)

USER_AGENT = "oms-client-python"


class RequestsTransport(Transport):
    """One ``requests.Session`` per transport; safe to share across threads
    only as far as ``requests.Session`` itself is.

    Every status code is returned as an ``Ok(RawResponse)``; only failures
    to get a response at all (connection refused, DNS, timeout, invalid
    URL) become ``Err(TransportError)``.
    """

    def __init__(
        self,
        settings: ClientSettings,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    # --- Transport interface --------------------------------------------------

    def request(
        self,
        method: HttpMethod,
        path: str,
        query: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> Result[RawResponse, TransportError]:
        url = self._settings.base_url + path
        try:
            response = self._session.request(
                method.value,
                url,
                params=dict(query) if query else None,
                data=body,
                headers=self._headers(has_body=body is not None),
                auth=(self._settings.api_key.get_secret_value(), ""),
                timeout=self._settings.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method.value, path, exc)
            return Err(TransportError(f"{method.value} {path} failed: {exc}", cause=exc))

        logger.debug(
            "%s %s -> HTTP %d (%d bytes)",
            method.value,
            path,
            response.status_code,
            len(response.content),
        )
        return Ok(RawResponse(status=response.status_code, body=response.content))

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Internal helpers -----------------------------------------------------

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "Accept": self._settings.accept_header,
            "Accept-Language": self._settings.locale,
            "User-Agent": USER_AGENT,
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers
