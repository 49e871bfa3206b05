"""API-backed implementation of OrderRepository."""

from __future__ import annotations

import logging
from urllib.parse import quote

from crm.domain.exceptions import ValidationError
from crm.domain.model.order import Order, OrderLine, OrderStatus
from crm.domain.model.value_objects import coerce_quantity, price_or_zero
from crm.domain.repository.order_repository import OrderRepository
from crm.infrastructure.http.api_client import ApiClient

logger = logging.getLogger(__name__)

ORDERS_PATH = "/api/orders"


class HttpOrderRepository(OrderRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        data = self._client.get(ORDERS_PATH) or []
        return [self._to_domain(raw) for raw in data]

    def add(self, order: Order) -> Order:
        return self._to_domain(self._client.post(ORDERS_PATH, self._to_raw(order)))

    def update_status(self, order_id: str, status: OrderStatus) -> None:
        self._client.patch(f"{ORDERS_PATH}/{quote(order_id, safe='')}", {"status": status.value})

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "customerId": order.customer_id,
            "orderId": order.code,
            "status": order.status.value,
            "items": [
                {
                    "itemMongoId": line.item_id,
                    "quantity": line.quantity,
                    "price": str(price_or_zero(line.price).amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = tuple(
            OrderLine(
                item_id=str(i.get("itemMongoId") or ""),
                quantity=coerce_quantity(i.get("quantity")),
                price=price_or_zero(i["price"]) if i.get("price") not in (None, "") else None,
            )
            for i in raw.get("items") or []
        )
        try:
            status = OrderStatus.parse(raw.get("status") or "")
        except ValidationError:
            logger.warning(
                "Order %s has unknown status %r; showing it as Pending",
                raw.get("_id"),
                raw.get("status"),
            )
            status = OrderStatus.PENDING
        return Order(
            id=str(raw["_id"]),
            code=str(raw.get("orderId") or ""),
            customer_id=str(raw.get("customerId") or ""),
            status=status,
            lines=lines,
        )
