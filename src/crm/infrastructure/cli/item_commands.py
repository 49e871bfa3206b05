"""CLI commands for catalog items."""

from __future__ import annotations

import click

from crm.application.add_item import AddItemHandler
from crm.application.list_records import ListItemsHandler
from crm.domain.exceptions import DomainException
from crm.infrastructure.bootstrap import authorized_client, item_repository
from crm.infrastructure.http.api_client import ApiError


def display_items(items) -> None:
    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'Code':<20} {'Name':<24} {'Price':>10} {'Cost':>10}")
    click.echo("-" * 67)
    for it in items:
        click.echo(f"{it.code:<20} {it.name:<24} {it.price:>10} {it.cost:>10}")
        if it.photo:
            click.echo(f"  photo: {it.photo}")


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--code", default="", help="Catalog code (auto if blank).")
@click.option("--price", default="", help="Price (e.g. 15.00).")
@click.option("--cost", default="", help="Cost (e.g. 9.50).")
@click.option("--photo", default="", help="Photo URL.")
def item_add(name: str, code: str, price: str, cost: str, photo: str) -> None:
    """Add an item to the catalog."""
    try:
        handler = AddItemHandler(item_repo=item_repository(authorized_client()))
        dto = handler.handle(name=name, code=code, price=price, cost=cost, photo=photo)
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item '{dto.name}' saved (ID: {dto.code}) at {dto.price}")


@click.command("list")
def item_list() -> None:
    """List the catalog."""
    try:
        items = ListItemsHandler(item_repo=item_repository(authorized_client())).handle()
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    display_items(items)
