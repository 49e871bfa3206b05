"""CLI tests with click's CliRunner.

The composition-root factories imported by each command module are
replaced with in-memory fakes.
"""

import pytest
from click.testing import CliRunner

from crm.domain.model.customer import Customer
from crm.domain.model.item import Item
from crm.domain.model.order import Order, OrderLine, OrderStatus
from crm.domain.model.value_objects import Money
from crm.infrastructure.cli import (
    auth_commands,
    customer_commands,
    dashboard_commands,
    item_commands,
    order_commands,
)
from crm.infrastructure.cli.main import cli
from crm.infrastructure.http.api_client import ApiError
from tests.fakes import (
    FakeAuthGateway,
    FakeCustomerRepository,
    FakeItemRepository,
    FakeOrderRepository,
    FakeSessionRepository,
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def repos(monkeypatch):
    customers = FakeCustomerRepository([Customer(id="c1", name="Alice", email="alice@example.com")])
    items = FakeItemRepository(
        [Item(id="i1", code="W-1", name="Widget", price=Money.of("10"), cost=Money.of("4"))]
    )
    orders = FakeOrderRepository()
    for module in (customer_commands, item_commands, order_commands, dashboard_commands):
        monkeypatch.setattr(module, "authorized_client", lambda: object())
        if hasattr(module, "customer_repository"):
            monkeypatch.setattr(module, "customer_repository", lambda client: customers)
        if hasattr(module, "item_repository"):
            monkeypatch.setattr(module, "item_repository", lambda client: items)
        if hasattr(module, "order_repository"):
            monkeypatch.setattr(module, "order_repository", lambda client: orders)
    return customers, items, orders


class TestAuthCommands:

    def test_login_and_logout(self, runner, monkeypatch):
        session = FakeSessionRepository()
        monkeypatch.setattr(auth_commands, "auth_gateway", lambda: FakeAuthGateway())
        monkeypatch.setattr(auth_commands, "session_store", lambda: session)

        result = runner.invoke(cli, ["login", "--username", "admin", "--password", "secret"])
        assert result.exit_code == 0, result.output
        assert session.token == "tok-123"

        result = runner.invoke(cli, ["logout"])
        assert result.exit_code == 0
        assert session.token is None

    def test_bad_login(self, runner, monkeypatch):
        monkeypatch.setattr(auth_commands, "auth_gateway", lambda: FakeAuthGateway())
        monkeypatch.setattr(auth_commands, "session_store", lambda: FakeSessionRepository())
        result = runner.invoke(cli, ["login", "--username", "admin", "--password", "nope"])
        assert result.exit_code == 1
        assert "Invalid credentials" in result.output

    def test_commands_need_login(self, runner, monkeypatch, tmp_path):
        monkeypatch.setenv("CRM_SESSION_FILE", str(tmp_path / "session.json"))
        result = runner.invoke(cli, ["customer", "list"])
        assert result.exit_code == 1
        assert "Not logged in" in result.output


    def test_unwritable_session_file_reported(self, runner, monkeypatch, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        monkeypatch.setenv("CRM_SESSION_FILE", str(blocker / "session.json"))
        result = runner.invoke(cli, ["login", "--username", "admin", "--password", "secret"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not isinstance(result.exception, OSError)


class TestCustomerAndItemCommands:

    def test_customer_add_and_list(self, runner, repos):
        result = runner.invoke(cli, ["customer", "add", "--name", "Bob", "--email", "bob@example.com"])
        assert result.exit_code == 0, result.output
        assert "Customer 'Bob' saved" in result.output

        result = runner.invoke(cli, ["customer", "list"])
        assert result.output.index("Bob") < result.output.index("Alice")

    def test_customer_add_requires_email_value(self, runner, repos):
        result = runner.invoke(cli, ["customer", "add", "--name", "Bob", "--email", " "])
        assert result.exit_code == 1
        assert "email is required" in result.output

    def test_item_add_and_list(self, runner, repos):
        result = runner.invoke(cli, ["item", "add", "--name", "Gadget", "--price", "5.5"])
        assert result.exit_code == 0, result.output
        assert "(ID: ITEM_" in result.output

        result = runner.invoke(cli, ["item", "list"])
        assert "Gadget" in result.output
        assert "5.50" in result.output

    def test_item_add_huge_price_not_submitted(self, runner, repos):
        _, items, _ = repos
        result = runner.invoke(cli, ["item", "add", "--name", "Gold", "--price", "1e27"])
        assert result.exit_code == 1
        assert "Invalid item price" in result.output
        assert len(items.list_all()) == 1

    def test_api_error_reported(self, runner, repos, monkeypatch):
        def broken(client):
            raise ApiError("Network error: refused")

        monkeypatch.setattr(item_commands, "item_repository", broken)
        result = runner.invoke(cli, ["item", "list"])
        assert result.exit_code == 1
        assert "Network error" in result.output


class TestOrderCommands:

    def test_create_shows_totals(self, runner, repos):
        result = runner.invoke(
            cli,
            ["order", "create", "--customer", "c1", "--code", "A-1", "--item", "W-1:3"],
        )
        assert result.exit_code == 0, result.output
        assert "Order A-1" in result.output
        assert "Customer: Alice" in result.output
        assert "Total:    30.00" in result.output
        assert "Widget x 3 @ 10.00" in result.output

    def test_create_with_huge_quantity(self, runner, repos):
        result = runner.invoke(
            cli, ["order", "create", "--customer", "c1", "--item", "W-1:99999999999999999999999999999"]
        )
        assert result.exit_code == 0, result.output
        assert "Widget x 1 @ 10.00" in result.output

    def test_create_rejects_unknown_status(self, runner, repos):
        result = runner.invoke(
            cli, ["order", "create", "--customer", "c1", "--item", "i1", "--status", "Lost"]
        )
        assert result.exit_code == 2

    def test_list_and_status(self, runner, repos):
        _, _, orders = repos
        orders.add(Order(id=None, code="ORD-7", customer_id="c1", lines=(OrderLine("i1", 1, Money.of("10")),)))

        result = runner.invoke(cli, ["order", "list"])
        assert "Order ORD-7" in result.output

        result = runner.invoke(cli, ["order", "status", "--id", "o1", "--status", "completed"])
        assert result.exit_code == 0, result.output
        assert "ORD-7 is now Completed" in result.output
        assert orders.status_updates == [("o1", OrderStatus.COMPLETED)]

    def test_status_unknown_order(self, runner, repos):
        result = runner.invoke(cli, ["order", "status", "--id", "o9", "--status", "Pending"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestDashboardCommand:

    def test_default_tab_is_customers(self, runner, repos):
        result = runner.invoke(cli, ["dashboard"])
        assert result.exit_code == 0, result.output
        assert "[Customers]" in result.output
        assert "Alice" in result.output

    def test_orders_tab_empty(self, runner, repos):
        result = runner.invoke(cli, ["dashboard", "--tab", "orders"])
        assert "[Orders]" in result.output
        assert "No orders found." in result.output
