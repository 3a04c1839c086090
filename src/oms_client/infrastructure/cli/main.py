from __future__ import annotations

import click

from oms_client.infrastructure.cli.order_commands import (
    order_capture,
    order_list,
    order_refund,
    order_show,
)
from oms_client.infrastructure.config.logging import configure_logging


@click.group()
@click.option("--base-url", default=None, help="API base URL (default: OMS_CLIENT_BASE_URL).")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every request.")
@click.option("--log-json", is_flag=True, default=False, help="Emit logs as JSON lines.")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None, verbose: bool, log_json: bool) -> None:
    """OMS client — talk to the order-management API"""
    configure_logging(verbose=verbose, log_json=log_json)
    ctx.obj = {"base_url": base_url} if base_url else {}


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
order.add_command(order_capture)
order.add_command(order_list)
order.add_command(order_refund)
order.add_command(order_show)
