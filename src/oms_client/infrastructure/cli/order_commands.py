"""CLI commands for the Order resource."""

from __future__ import annotations

from typing import Any

import click
from pydantic import ValidationError

from oms_client.domain.model.collection import PaginatedCollection
from oms_client.domain.model.order import Order
from oms_client.domain.model.value_objects import is_present
from oms_client.domain.result import Result
from oms_client.infrastructure import bootstrap


def _client(obj: dict[str, Any] | None):
    try:
        client_settings = bootstrap.settings(**(obj or {}))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise click.BadParameter(problems) from exc
    return bootstrap.client(client_settings)


def _unwrap(result: Result[Any, Any]) -> Any:
    """Turn an ``Err`` into a clean CLI failure."""
    if result.is_err():
        raise click.ClickException(str(result.error))
    return result.value


def _show(value: Any) -> str:
    return str(value) if is_present(value) and value is not None else "-"


def _money(amount: Any, currency: Any = None) -> str:
    if not isinstance(amount, int):
        return "-"
    suffix = f" {currency}" if isinstance(currency, str) else ""
    return f"{amount / 100:.2f}{suffix}"


@click.command("list")
@click.option("--customer", "customer_id", default=None, help="Only this customer's orders.")
@click.option("--limit", type=int, default=None, help="Page size.")
@click.option("--pages", type=click.IntRange(min=1), default=1, show_default=True, help="Pages to walk forward.")
@click.pass_obj
def order_list(
    obj: dict[str, Any] | None,
    customer_id: str | None,
    limit: int | None,
    pages: int,
) -> None:
    """List orders, walking forward page by page."""
    orders = _client(obj).orders

    if customer_id:
        page = _unwrap(orders.list_customer_orders(customer_id, limit=limit or 20))
    else:
        page = _unwrap(orders.list(limit=limit))

    _display_page(page)
    for _ in range(pages - 1):
        if not page.has_next:
            break
        page = _unwrap(orders.next_page(page))
        click.echo()
        _display_page(page)


def _display_page(page: PaginatedCollection) -> None:
    if not page.elements:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<28} {'Payment status':<20} {'Amount':>16}")
    click.echo("-" * 66)
    for order in page:
        click.echo(
            f"{_show(order.id):<28} {_show(order.payment_status):<20} "
            f"{_money(order.amount, order.currency):>16}"
        )
    if page.next:
        click.echo(f"(more: next cursor {page.next})")


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {_show(order.id)}  (payment_status={_show(order.payment_status)})")
    if is_present(order.customer_info) and order.customer_info is not None:
        info = order.customer_info
        click.echo(f"Customer: {_show(info.name)} <{_show(info.email)}>")
    click.echo()

    items = order.line_items if is_present(order.line_items) and order.line_items else ()
    click.echo(f"  {'Item':<24} {'Qty':>5} {'Unit price':>12}")
    click.echo(f"  {'-'*43}")
    for item in items:
        click.echo(
            f"  {_show(item.name):<24} {_show(item.quantity):>5} "
            f"{_money(item.unit_price):>12}"
        )
    click.echo(f"  {'-'*43}")
    click.echo(f"  {'Order Total':<30} {_money(order.amount, order.currency):>12}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(obj: dict[str, Any] | None, order_id: str) -> None:
    """Show details of an existing order."""
    order = _unwrap(_client(obj).orders.retrieve(order_id))
    _display_order(order)


@click.command("capture")
@click.option("--id", "order_id", required=True, help="Order ID to capture.")
@click.pass_obj
def order_capture(obj: dict[str, Any] | None, order_id: str) -> None:
    """Capture a pre-authorized order."""
    order = _unwrap(_client(obj).orders.capture(order_id))
    click.echo(f"Order {order_id} captured (payment_status={_show(order.payment_status)}).")


@click.command("refund")
@click.option("--id", "order_id", required=True, help="Order ID to refund.")
@click.option("--reason", required=True, help="Refund reason, e.g. requested_by_client.")
@click.option("--amount", type=int, default=None, help="Amount in cents; omit to leave it to the server.")
@click.pass_obj
def order_refund(
    obj: dict[str, Any] | None, order_id: str, reason: str, amount: int | None
) -> None:
    """Refund an order, fully or partially."""
    order = _unwrap(_client(obj).orders.refund(order_id, reason, amount))
    click.echo(
        f"Order {order_id} refunded "
        f"(amount_refunded={_money(order.amount_refunded, order.currency)})."
    )
