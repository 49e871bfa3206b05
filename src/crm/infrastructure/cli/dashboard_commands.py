"""CLI command showing one dashboard tab."""

from __future__ import annotations

import click

from crm.application.show_dashboard import TABS, ShowDashboardHandler
from crm.domain.exceptions import DomainException
from crm.infrastructure.bootstrap import (
    authorized_client,
    customer_repository,
    item_repository,
    order_repository,
)
from crm.infrastructure.cli.customer_commands import display_customers
from crm.infrastructure.cli.item_commands import display_items
from crm.infrastructure.cli.order_commands import display_orders
from crm.infrastructure.http.api_client import ApiError

_DISPLAY = {
    "customers": display_customers,
    "items": display_items,
    "orders": display_orders,
}


@click.command("dashboard")
@click.option("--tab", type=click.Choice(TABS), default="customers", show_default=True)
def dashboard(tab: str) -> None:
    """Show one tab of the dashboard."""
    try:
        client = authorized_client()
        handler = ShowDashboardHandler(
            customer_repo=customer_repository(client),
            item_repo=item_repository(client),
            order_repo=order_repository(client),
        )
        view = handler.handle(tab)
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    click.echo(" | ".join(f"[{t.title()}]" if t == view.tab else t.title() for t in TABS))
    click.echo()
    _DISPLAY[view.tab](view.rows)
