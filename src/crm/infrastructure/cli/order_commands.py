"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from crm.application.create_order import CreateOrderHandler
from crm.application.dto import OrderItemSpec
from crm.application.list_records import ListOrdersHandler
from crm.application.update_order_status import UpdateOrderStatusHandler
from crm.domain.exceptions import DomainException
from crm.domain.model.order import OrderStatus
from crm.infrastructure.bootstrap import (
    authorized_client,
    customer_repository,
    item_repository,
    order_repository,
)
from crm.infrastructure.http.api_client import ApiError

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _parse_item(raw: str) -> OrderItemSpec:
    """Parse 'REF' or 'REF:QTY'. The quantity text is passed on untouched."""
    ref, sep, qty = raw.rpartition(":")
    if not sep:
        ref, qty = raw, "1"
    if not ref.strip():
        raise click.BadParameter(f"Invalid item '{raw}'. Expected 'ItemRef' or 'ItemRef:Quantity'.")
    return OrderItemSpec(item_ref=ref.strip(), quantity=qty.strip())


def display_order(dto) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.code}  [{dto.id}]  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Items:    {dto.total_quantity}")
    click.echo(f"Total:    {dto.total_price}")
    if dto.lines:
        for line in dto.lines:
            click.echo(f"  {line.item_name} x {line.quantity} @ {line.price}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--code", default="", help="Order code (auto if blank).")
@click.option("--status", default=OrderStatus.PENDING.value, type=STATUS_CHOICE, show_default=True)
@click.option(
    "--item",
    "items",
    required=True,
    multiple=True,
    help="Item ID or code, optionally with ':Qty'. Repeat per item.",
)
def order_create(customer_id: str, code: str, status: str, items: tuple[str, ...]) -> None:
    """Create a new order.

    Naming the same item twice removes it again, like unticking it.
    """
    specs = [_parse_item(raw) for raw in items]

    try:
        client = authorized_client()
        handler = CreateOrderHandler(
            order_repo=order_repository(client),
            customer_repo=customer_repository(client),
            item_repo=item_repository(client),
        )
        dto = handler.handle(
            customer_id=customer_id, item_specs=specs, order_code=code, status=status
        )
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    click.echo("Order saved.")
    display_order(dto)


@click.command("list")
def order_list() -> None:
    """List orders with item counts and totals."""
    try:
        client = authorized_client()
        handler = ListOrdersHandler(
            order_repo=order_repository(client),
            customer_repo=customer_repository(client),
            item_repo=item_repository(client),
        )
        orders = handler.handle()
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    display_orders(orders)


def display_orders(orders) -> None:
    if not orders:
        click.echo("No orders found.")
        return
    for i, dto in enumerate(orders):
        if i:
            click.echo()
        display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--status", required=True, type=STATUS_CHOICE, help="New status.")
def order_status(order_id: str, status: str) -> None:
    """Change an order's status."""
    try:
        client = authorized_client()
        handler = UpdateOrderStatusHandler(
            order_repo=order_repository(client),
            customer_repo=customer_repository(client),
            item_repo=item_repository(client),
        )
        dto = handler.handle(order_id=order_id, status=status)
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.code} is now {dto.status}.")
