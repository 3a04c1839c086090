"""Charge — a payment attempt against an order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from oms_client.domain.model.shape import Object, Raw
from oms_client.domain.model.value_objects import MISSING, Maybe


@dataclass(frozen=True)
class PaymentSource:
    """How a charge was (or will be) paid: card, cash reference, bank transfer.

    Only a subset of the fields is populated for any given ``type``.
    """

    object: Maybe[str] = MISSING
    type: Maybe[str] = MISSING
    name: Maybe[str] = MISSING
    last4: Maybe[str] = MISSING
    brand: Maybe[str] = MISSING
    exp_month: Maybe[str] = MISSING
    exp_year: Maybe[str] = MISSING
    auth_code: Maybe[str] = MISSING
    issuer: Maybe[str] = MISSING
    account_type: Maybe[str] = MISSING
    country: Maybe[str] = MISSING
    service_name: Maybe[str] = MISSING
    barcode_url: Maybe[str] = MISSING
    reference: Maybe[str] = MISSING
    clabe: Maybe[str] = MISSING
    bank: Maybe[str] = MISSING
    store_name: Maybe[str] = MISSING
    expires_at: Maybe[int] = MISSING


@dataclass(frozen=True)
class Charge:
    id: Maybe[str] = MISSING
    object: Maybe[str] = MISSING
    created_at: Maybe[int] = MISSING
    paid_at: Maybe[int] = MISSING
    currency: Maybe[str] = MISSING
    amount: Maybe[int] = MISSING
    fee: Maybe[int] = MISSING
    livemode: Maybe[bool] = MISSING
    status: Maybe[str] = MISSING
    description: Maybe[str] = MISSING
    failure_code: Maybe[str] = MISSING
    failure_message: Maybe[str] = MISSING
    order_id: Maybe[str] = MISSING
    customer_id: Maybe[str] = MISSING
    device_fingerprint: Maybe[str] = MISSING
    monthly_installments: Maybe[int] = MISSING
    payment_method: Maybe[PaymentSource] = MISSING
    refunds: Maybe[Any] = MISSING


PAYMENT_SOURCE_SHAPE = Object.of(PaymentSource)

CHARGE_SHAPE = Object.of(
    Charge,
    payment_method=PAYMENT_SOURCE_SHAPE,
    refunds=Raw(),
)
