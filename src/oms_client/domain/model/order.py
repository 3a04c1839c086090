"""Order — the root resource of the API — and the lines nested in it.

Every entity is a frozen dataclass whose fields default to ``MISSING`` so
a decoded value records exactly what the server sent.  The ``*_SHAPE``
constants are the decoding templates for each type; ``ORDER_SHAPE``
embeds all the others.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from oms_client.domain.model.charge import CHARGE_SHAPE
from oms_client.domain.model.collection import ListObject, list_shape
from oms_client.domain.model.customer import (
    CUSTOMER_INFO_SHAPE,
    SHIPPING_CONTACT_SHAPE,
    CustomerInfo,
    ShippingContact,
)
from oms_client.domain.model.shape import ListOf, Object, Raw, Scalar
from oms_client.domain.model.value_objects import MISSING, Maybe


class PaymentStatus(str, Enum):
    """Values the server reports in ``Order.payment_status``."""

    PENDING_PAYMENT = "pending_payment"
    PAID = "paid"
    PRE_AUTHORIZED = "pre_authorized"
    PARTIALLY_REFUNDED = "partially_refunded"
    REFUNDED = "refunded"
    CANCELED = "canceled"
    EXPIRED = "expired"


@dataclass(frozen=True)
class LineItem:
    id: Maybe[str] = MISSING
    object: Maybe[str] = MISSING
    name: Maybe[str] = MISSING
    description: Maybe[str] = MISSING
    unit_price: Maybe[int] = MISSING
    quantity: Maybe[int] = MISSING
    amount: Maybe[int] = MISSING
    sku: Maybe[str] = MISSING
    brand: Maybe[str] = MISSING
    type: Maybe[str] = MISSING
    tags: Maybe[tuple[str, ...]] = MISSING
    parent_id: Maybe[str] = MISSING
    antifraud_info: Maybe[Mapping[str, Any]] = MISSING
    metadata: Maybe[Mapping[str, Any]] = MISSING


@dataclass(frozen=True)
class ShippingLine:
    id: Maybe[str] = MISSING
    object: Maybe[str] = MISSING
    amount: Maybe[int] = MISSING
    carrier: Maybe[str] = MISSING
    tracking_number: Maybe[str] = MISSING
    method: Maybe[str] = MISSING
    parent_id: Maybe[str] = MISSING
    metadata: Maybe[Mapping[str, Any]] = MISSING


@dataclass(frozen=True)
class TaxLine:
    id: Maybe[str] = MISSING
    object: Maybe[str] = MISSING
    description: Maybe[str] = MISSING
    amount: Maybe[int] = MISSING
    parent_id: Maybe[str] = MISSING
    metadata: Maybe[Mapping[str, Any]] = MISSING


@dataclass(frozen=True)
class DiscountLine:
    id: Maybe[str] = MISSING
    object: Maybe[str] = MISSING
    code: Maybe[str] = MISSING
    type: Maybe[str] = MISSING
    amount: Maybe[int] = MISSING
    parent_id: Maybe[str] = MISSING


@dataclass(frozen=True)
class Order:
    """Order as returned by the API.

    ``amount`` is in the currency's minor unit (cents).  The embedded
    ``*_lines`` and ``charges`` are ``ListObject`` envelopes; they are not
    re-fetchable collections.
    """

    id: Maybe[str] = MISSING
    object: Maybe[str] = MISSING
    created_at: Maybe[int] = MISSING
    updated_at: Maybe[int] = MISSING
    currency: Maybe[str] = MISSING
    amount: Maybe[int] = MISSING
    amount_refunded: Maybe[int] = MISSING
    payment_status: Maybe[str] = MISSING
    livemode: Maybe[bool] = MISSING
    metadata: Maybe[Mapping[str, Any]] = MISSING
    line_items: Maybe[ListObject] = MISSING
    shipping_lines: Maybe[ListObject] = MISSING
    tax_lines: Maybe[ListObject] = MISSING
    discount_lines: Maybe[ListObject] = MISSING
    shipping_contact: Maybe[ShippingContact] = MISSING
    customer_info: Maybe[CustomerInfo] = MISSING
    charges: Maybe[ListObject] = MISSING

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID


# ---------------------------------------------------------------------------
# Decoding templates
# ---------------------------------------------------------------------------
LINE_ITEM_SHAPE = Object.of(
    LineItem,
    tags=ListOf(Scalar(str)),
    antifraud_info=Raw(),
    metadata=Raw(),
)
SHIPPING_LINE_SHAPE = Object.of(ShippingLine, metadata=Raw())
TAX_LINE_SHAPE = Object.of(TaxLine, metadata=Raw())
DISCOUNT_LINE_SHAPE = Object.of(DiscountLine)

ORDER_SHAPE = Object.of(
    Order,
    metadata=Raw(),
    line_items=list_shape(LINE_ITEM_SHAPE),
    shipping_lines=list_shape(SHIPPING_LINE_SHAPE),
    tax_lines=list_shape(TAX_LINE_SHAPE),
    discount_lines=list_shape(DISCOUNT_LINE_SHAPE),
    shipping_contact=SHIPPING_CONTACT_SHAPE,
    customer_info=CUSTOMER_INFO_SHAPE,
    charges=list_shape(CHARGE_SHAPE),
)
