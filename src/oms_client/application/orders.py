"""Application service: operations on the Order resource.

Each method is one request/response round trip composed from the
executor (single objects) or the pager (lists).  Nothing is raised:
every method returns ``Ok(value)`` or ``Err(OmsClientError)``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oms_client.application.executor import RequestExecutor, resource_path
from oms_client.application.pagination import Pager
from oms_client.application.sub_resource import NestedResource
from oms_client.domain.exceptions import OmsClientError
from oms_client.domain.model.charge import CHARGE_SHAPE, Charge
from oms_client.domain.model.collection import PaginatedCollection
from oms_client.domain.model.order import (
    DISCOUNT_LINE_SHAPE,
    LINE_ITEM_SHAPE,
    ORDER_SHAPE,
    SHIPPING_LINE_SHAPE,
    TAX_LINE_SHAPE,
    DiscountLine,
    LineItem,
    Order,
    ShippingLine,
    TaxLine,
)
from oms_client.domain.model.value_objects import ListQuery
from oms_client.domain.result import Result
from oms_client.domain.transport import HttpMethod

DEFAULT_ENDPOINT = "/orders"
CUSTOMER_ORDERS_LIMIT = 20


class Orders:

    def __init__(
        self,
        executor: RequestExecutor,
        pager: Pager,
        endpoint: str = DEFAULT_ENDPOINT,
    ) -> None:
        self._executor = executor
        self._pager = pager
        self._endpoint = endpoint

        self.line_items = NestedResource(executor, endpoint, "line_items", LINE_ITEM_SHAPE)
        self.shipping_lines = NestedResource(
            executor, endpoint, "shipping_lines", SHIPPING_LINE_SHAPE
        )
        self.tax_lines = NestedResource(executor, endpoint, "tax_lines", TAX_LINE_SHAPE)
        self.discount_lines = NestedResource(
            executor, endpoint, "discount_lines", DISCOUNT_LINE_SHAPE
        )
        self.charges = NestedResource(executor, endpoint, "charges", CHARGE_SHAPE)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    # --- Lists ----------------------------------------------------------------

    def list(
        self,
        limit: int | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> Result[PaginatedCollection, OmsClientError]:
        """List orders; *filters* are sent unchanged on every page."""
        query = ListQuery.of(self._endpoint, filters)
        return self._pager.first_page(query, ORDER_SHAPE, limit)

    def list_customer_orders(
        self,
        customer_id: str,
        limit: int | None = CUSTOMER_ORDERS_LIMIT,
    ) -> Result[PaginatedCollection, OmsClientError]:
        """Orders placed by *customer_id*, with their last payment expanded."""
        return self.list(
            limit=limit,
            filters={
                "expand[]": "last_payment_info",
                "customer_info.customer_id": customer_id,
            },
        )

    def next_page(
        self, collection: PaginatedCollection, limit: int | None = None
    ) -> Result[PaginatedCollection, OmsClientError]:
        return self._pager.fetch_next(collection, limit)

    def previous_page(
        self, collection: PaginatedCollection, limit: int | None = None
    ) -> Result[PaginatedCollection, OmsClientError]:
        return self._pager.fetch_previous(collection, limit)

    # --- Single orders --------------------------------------------------------

    def retrieve(self, order_id: str) -> Result[Order, OmsClientError]:
        return self._executor.execute(
            HttpMethod.GET, resource_path(self._endpoint, order_id), ORDER_SHAPE
        )

    def create(self, attrs: Mapping[str, Any]) -> Result[Order, OmsClientError]:
        return self._executor.execute(
            HttpMethod.POST, self._endpoint, ORDER_SHAPE, attrs=attrs
        )

    def update(
        self, order_id: str, attrs: Mapping[str, Any]
    ) -> Result[Order, OmsClientError]:
        return self._executor.execute(
            HttpMethod.PUT,
            resource_path(self._endpoint, order_id),
            ORDER_SHAPE,
            attrs=attrs,
        )

    def capture(self, order_id: str) -> Result[Order, OmsClientError]:
        """Capture a pre-authorized order."""
        return self._executor.execute(
            HttpMethod.POST,
            resource_path(self._endpoint, order_id, "capture"),
            ORDER_SHAPE,
            attrs={},
        )

    def refund(
        self,
        order_id: str,
        reason: str,
        amount: int | None = None,
    ) -> Result[Order, OmsClientError]:
        """Refund an order.

        ``amount`` is only sent when given; without it the refunded amount
        is left to the server.
        """
        attrs: dict[str, Any] = {"reason": reason}
        if amount is not None:
            attrs["amount"] = amount
        return self._executor.execute(
            HttpMethod.POST,
            resource_path(self._endpoint, order_id, "refunds"),
            ORDER_SHAPE,
            attrs=attrs,
        )

    # --- Nested resources -----------------------------------------------------

    def create_charge(
        self, order_id: str, attrs: Mapping[str, Any]
    ) -> Result[Charge, OmsClientError]:
        return self.charges.create(order_id, attrs)

    def create_line_item(
        self, order_id: str, attrs: Mapping[str, Any]
    ) -> Result[LineItem, OmsClientError]:
        return self.line_items.create(order_id, attrs)

    def update_line_item(
        self, order_id: str, line_id: str, attrs: Mapping[str, Any]
    ) -> Result[LineItem, OmsClientError]:
        return self.line_items.update(order_id, line_id, attrs)

    def delete_line_item(
        self, order_id: str, line_id: str
    ) -> Result[LineItem, OmsClientError]:
        return self.line_items.delete(order_id, line_id)

    def create_shipping_line(
        self, order_id: str, attrs: Mapping[str, Any]
    ) -> Result[ShippingLine, OmsClientError]:
        return self.shipping_lines.create(order_id, attrs)

    def update_shipping_line(
        self, order_id: str, line_id: str, attrs: Mapping[str, Any]
    ) -> Result[ShippingLine, OmsClientError]:
        return self.shipping_lines.update(order_id, line_id, attrs)

    def delete_shipping_line(
        self, order_id: str, line_id: str
    ) -> Result[ShippingLine, OmsClientError]:
        return self.shipping_lines.delete(order_id, line_id)

    def create_tax_line(
        self, order_id: str, attrs: Mapping[str, Any]
    ) -> Result[TaxLine, OmsClientError]:
        return self.tax_lines.create(order_id, attrs)

    def update_tax_line(
        self, order_id: str, line_id: str, attrs: Mapping[str, Any]
    ) -> Result[TaxLine, OmsClientError]:
        return self.tax_lines.update(order_id, line_id, attrs)

    def delete_tax_line(
        self, order_id: str, line_id: str
    ) -> Result[TaxLine, OmsClientError]:
        return self.tax_lines.delete(order_id, line_id)

    def create_discount_line(
        self, order_id: str, attrs: Mapping[str, Any]
    ) -> Result[DiscountLine, OmsClientError]:
        return self.discount_lines.create(order_id, attrs)

    def update_discount_line(
        self, order_id: str, line_id: str, attrs: Mapping[str, Any]
    ) -> Result[DiscountLine, OmsClientError]:
        return self.discount_lines.update(order_id, line_id, attrs)

    def delete_discount_line(
        self, order_id: str, line_id: str
    ) -> Result[DiscountLine, OmsClientError]:
        return self.discount_lines.delete(order_id, line_id)
