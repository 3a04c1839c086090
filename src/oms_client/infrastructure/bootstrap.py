"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from typing import Any

from oms_client.application.client import OmsClient
from oms_client.domain.transport import Transport
from oms_client.infrastructure.config.settings import ClientSettings
from oms_client.infrastructure.http.requests_transport import RequestsTransport


def settings(**overrides: Any) -> ClientSettings:
    """Settings from the environment, with *overrides* taking priority."""
    return ClientSettings(**overrides)


def transport(client_settings: ClientSettings) -> RequestsTransport:
    return RequestsTransport(client_settings)


def client(
    client_settings: ClientSettings | None = None,
    http: Transport | None = None,
) -> OmsClient:
    """Build a client; pass *http* to substitute the transport."""
    client_settings = client_settings or settings()
    return OmsClient(
        http if http is not None else transport(client_settings),
        orders_endpoint=client_settings.orders_endpoint,
        next_param=client_settings.next_param,
        previous_param=client_settings.previous_param,
    )
