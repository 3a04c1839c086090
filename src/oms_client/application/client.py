"""OmsClient — one independently configured connection to the API.

Nothing is global: the transport, endpoint path and cursor parameter names
are all given at construction, so a sandbox and a production client can
live side by side in one process.
"""

from __future__ import annotations

from oms_client.application.executor import RequestExecutor
from oms_client.application.orders import DEFAULT_ENDPOINT, Orders
from oms_client.application.pagination import (
    DEFAULT_NEXT_PARAM,
    DEFAULT_PREVIOUS_PARAM,
    Pager,
)
from oms_client.domain.transport import Transport


class OmsClient:

    def __init__(
        self,
        transport: Transport,
        orders_endpoint: str = DEFAULT_ENDPOINT,
        next_param: str = DEFAULT_NEXT_PARAM,
        previous_param: str = DEFAULT_PREVIOUS_PARAM,
    ) -> None:
        self._transport = transport
        self._executor = RequestExecutor(transport)
        self._pager = Pager(self._executor, next_param, previous_param)
        self.orders = Orders(self._executor, self._pager, orders_endpoint)

    @property
    def transport(self) -> Transport:
        return self._transport
