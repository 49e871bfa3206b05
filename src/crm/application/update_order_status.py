"""Application service: Update Order Status use case."""

from __future__ import annotations

import logging

from crm.application.dto import OrderDTO, order_to_dto
from crm.domain.exceptions import EntityNotFoundError
from crm.domain.model.order import OrderStatus
from crm.domain.repository.customer_repository import CustomerRepository
from crm.domain.repository.item_repository import ItemRepository
from crm.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        item_repo: ItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._item_repo = item_repo

    def handle(self, order_id: str, status: str) -> OrderDTO:
        """Change an order's status.

        The status is validated before anything is sent. The returned DTO
        reflects the local change; concurrent edits elsewhere are not
        reconciled.
        """
        new_status = OrderStatus.parse(status)

        order = next((o for o in self._order_repo.list_all() if o.id == order_id), None)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        self._order_repo.update_status(order_id, new_status)
        order.change_status(new_status)
        logger.info("Order %s status set to %s", order.code, new_status.value)
        return order_to_dto(order, self._customer_repo.list_all(), self._item_repo.list_all())
