"""Customer-facing objects embedded in an order."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from oms_client.domain.model.shape import Object, Raw
from oms_client.domain.model.value_objects import MISSING, Maybe


@dataclass(frozen=True)
class Address:
    object: Maybe[str] = MISSING
    street1: Maybe[str] = MISSING
    street2: Maybe[str] = MISSING
    city: Maybe[str] = MISSING
    state: Maybe[str] = MISSING
    country: Maybe[str] = MISSING
    postal_code: Maybe[str] = MISSING
    residential: Maybe[bool] = MISSING


@dataclass(frozen=True)
class ShippingContact:
    id: Maybe[str] = MISSING
    object: Maybe[str] = MISSING
    created_at: Maybe[int] = MISSING
    phone: Maybe[str] = MISSING
    receiver: Maybe[str] = MISSING
    between_streets: Maybe[str] = MISSING
    parent_id: Maybe[str] = MISSING
    default: Maybe[bool] = MISSING
    deleted: Maybe[bool] = MISSING
    address: Maybe[Address] = MISSING
    metadata: Maybe[Mapping[str, Any]] = MISSING


@dataclass(frozen=True)
class CustomerInfo:
    """Snapshot of the buyer stored on the order (not the Customer resource)."""

    object: Maybe[str] = MISSING
    customer_id: Maybe[str] = MISSING
    name: Maybe[str] = MISSING
    email: Maybe[str] = MISSING
    phone: Maybe[str] = MISSING
    corporate: Maybe[bool] = MISSING


ADDRESS_SHAPE = Object.of(Address)

SHIPPING_CONTACT_SHAPE = Object.of(
    ShippingContact,
    address=ADDRESS_SHAPE,
    metadata=Raw(),
)

CUSTOMER_INFO_SHAPE = Object.of(CustomerInfo)
