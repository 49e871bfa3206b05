"""Tests for the API-backed repositories and auth gateway.

A recording stand-in replaces ApiClient so only the JSON mapping is
exercised.
"""

import pytest

from crm.domain.exceptions import AuthenticationError
from crm.domain.model.customer import Customer
from crm.domain.model.item import Item
from crm.domain.model.order import Order, OrderLine, OrderStatus
from crm.domain.model.value_objects import Money
from crm.infrastructure.http.api_client import ApiError
from crm.infrastructure.http.http_auth_gateway import HttpAuthGateway
from crm.infrastructure.http.http_customer_repository import HttpCustomerRepository
from crm.infrastructure.http.http_item_repository import HttpItemRepository
from crm.infrastructure.http.http_order_repository import HttpOrderRepository


class RecordingClient:

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def _call(self, method, path, body=None):
        self.calls.append((method, path, body))
        if self.error is not None:
            raise self.error
        return self.reply

    def get(self, path):
        return self._call("GET", path)

    def post(self, path, body):
        return self._call("POST", path, body)

    def patch(self, path, body):
        return self._call("PATCH", path, body)


class TestHttpCustomerRepository:

    def test_list_maps_wire_fields(self):
        client = RecordingClient([{"_id": "c1", "name": "Alice", "email": "a@x", "phone": None}])
        [c] = HttpCustomerRepository(client).list_all()
        assert c == Customer(id="c1", name="Alice", email="a@x", phone="", address="")

    def test_add_posts_form_and_returns_saved(self):
        client = RecordingClient({"_id": "c9", "name": "Bob", "email": "b@x", "phone": "1", "address": "A"})
        saved = HttpCustomerRepository(client).add(Customer.create("Bob", "b@x", "1", "A"))
        assert saved.id == "c9"
        assert client.calls == [
            ("POST", "/api/customers", {"name": "Bob", "email": "b@x", "phone": "1", "address": "A"})
        ]


class TestHttpItemRepository:

    def test_list_parses_string_and_numeric_prices(self):
        client = RecordingClient([
            {"_id": "i1", "itemId": "W-1", "name": "Widget", "price": "15.5", "cost": 9},
            {"_id": "i2", "name": "Loose", "photo": ""},
        ])
        first, second = HttpItemRepository(client).list_all()
        assert first.price == Money.of("15.5")
        assert first.cost == Money.of("9")
        assert second.code == ""
        assert second.price == Money.zero()
        assert second.photo is None

    def test_add_posts_item_code(self):
        client = RecordingClient({"_id": "i3", "itemId": "W-1", "name": "Widget", "price": "15", "cost": "9"})
        HttpItemRepository(client).add(Item.create("Widget", "W-1", "15", "9"))
        _, path, body = client.calls[0]
        assert path == "/api/items"
        assert body == {"itemId": "W-1", "name": "Widget", "price": "15", "cost": "9", "photo": ""}


class TestHttpOrderRepository:

    def test_add_shapes_submission_payload(self):
        client = RecordingClient({
            "_id": "o1",
            "orderId": "ORD-1",
            "customerId": "c1",
            "status": "Pending",
            "items": [{"itemMongoId": "i1", "quantity": 2, "price": "10.00"}],
        })
        order = Order.create("c1", [OrderLine("i1", 2, Money.of("10.00"))], code="ORD-1")
        saved = HttpOrderRepository(client).add(order)

        assert client.calls[0][2] == {
            "customerId": "c1",
            "orderId": "ORD-1",
            "status": "Pending",
            "items": [{"itemMongoId": "i1", "quantity": 2, "price": "10.00"}],
        }
        assert saved.id == "o1"
        assert saved.lines == (OrderLine("i1", 2, Money.of("10.00")),)

    def test_list_normalises_lines_and_status(self):
        client = RecordingClient([{
            "_id": "o2",
            "orderId": "ORD-2",
            "customerId": "c1",
            "status": "Shipped",
            "items": [{"itemMongoId": "i1", "quantity": "x"}, {"itemMongoId": "i2", "quantity": 3, "price": 4}],
        }])
        [order] = HttpOrderRepository(client).list_all()
        assert order.status == OrderStatus.PENDING
        assert order.lines == (OrderLine("i1", 1, None), OrderLine("i2", 3, Money.of("4")))

    def test_update_status_patches_order(self):
        client = RecordingClient(None)
        HttpOrderRepository(client).update_status("o 1", OrderStatus.IN_PROGRESS)
        assert client.calls == [("PATCH", "/api/orders/o%201", {"status": "In Progress"})]


class TestHttpAuthGateway:

    def test_returns_token(self):
        client = RecordingClient({"token": "abc"})
        assert HttpAuthGateway(client).login("admin", "pw") == "abc"
        assert client.calls == [("POST", "/api/login", {"username": "admin", "password": "pw"})]

    def test_rejection_uses_server_message(self):
        client = RecordingClient(error=ApiError("Wrong", status_code=401, detail="Wrong"))
        with pytest.raises(AuthenticationError, match="Wrong"):
            HttpAuthGateway(client).login("admin", "pw")

    def test_rejection_without_message(self):
        client = RecordingClient(error=ApiError("HTTP 401 from API", status_code=401))
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            HttpAuthGateway(client).login("admin", "pw")

    def test_network_error_propagates(self):
        client = RecordingClient(error=ApiError("Network error: refused"))
        with pytest.raises(ApiError, match="Network error"):
            HttpAuthGateway(client).login("admin", "pw")

    def test_missing_token(self):
        with pytest.raises(AuthenticationError, match="did not include a token"):
            HttpAuthGateway(RecordingClient({})).login("admin", "pw")
