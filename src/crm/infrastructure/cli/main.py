import click

from crm.infrastructure.cli.auth_commands import login, logout
from crm.infrastructure.cli.customer_commands import customer_add, customer_list
from crm.infrastructure.cli.dashboard_commands import dashboard
from crm.infrastructure.cli.item_commands import item_add, item_list
from crm.infrastructure.cli.order_commands import order_create, order_list, order_status
from crm.infrastructure.config import load_settings
from crm.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """CRM: customers, items and orders"""
    configure_logging(load_settings().log_level, verbose=verbose)


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def item() -> None:
    """Manage the item catalog."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
cli.add_command(login)
cli.add_command(logout)
cli.add_command(dashboard)
customer.add_command(customer_add)
customer.add_command(customer_list)
item.add_command(item_add)
item.add_command(item_list)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_status)
