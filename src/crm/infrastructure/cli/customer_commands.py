"""CLI commands for customers."""

from __future__ import annotations

import click

from crm.application.add_customer import AddCustomerHandler
from crm.application.list_records import ListCustomersHandler
from crm.domain.exceptions import DomainException
from crm.infrastructure.bootstrap import authorized_client, customer_repository
from crm.infrastructure.http.api_client import ApiError


def display_customers(customers) -> None:
    """Shared formatting for the customer list."""
    if not customers:
        click.echo("No customers found.")
        return
    for c in customers:
        click.echo(f"{c.name}  [{c.id}]")
        click.echo(f"  Email:   {c.email}")
        click.echo(f"  Phone:   {c.phone}")
        click.echo(f"  Address: {c.address}")


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--phone", default="", help="Phone number.")
@click.option("--address", default="", help="Postal address.")
def customer_add(name: str, email: str, phone: str, address: str) -> None:
    """Add a new customer."""
    try:
        handler = AddCustomerHandler(customer_repo=customer_repository(authorized_client()))
        dto = handler.handle(name=name, email=email, phone=phone, address=address)
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{dto.name}' saved  [{dto.id}]")


@click.command("list")
def customer_list() -> None:
    """List all customers."""
    try:
        handler = ListCustomersHandler(customer_repo=customer_repository(authorized_client()))
        customers = handler.handle()
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    display_customers(customers)
