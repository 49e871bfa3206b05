"""Application services: listing customers, items and orders (queries)."""

from __future__ import annotations

from crm.application.dto import (
    CustomerDTO,
    ItemDTO,
    OrderDTO,
    customer_to_dto,
    item_to_dto,
    order_to_dto,
)
from crm.domain.repository.customer_repository import CustomerRepository
from crm.domain.repository.item_repository import ItemRepository
from crm.domain.repository.order_repository import OrderRepository


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        return [customer_to_dto(c) for c in self._customer_repo.list_all()]


class ListItemsHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self) -> list[ItemDTO]:
        return [item_to_dto(i) for i in self._item_repo.list_all()]


class ListOrdersHandler:
    """Orders with totals, and with names looked up for display.

    Customer and item names come from the current lists; a reference that
    cannot be resolved is shown as its raw ID.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        item_repo: ItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._item_repo = item_repo

    def handle(self) -> list[OrderDTO]:
        orders = self._order_repo.list_all()
        if not orders:
            return []
        customers = self._customer_repo.list_all()
        items = self._item_repo.list_all()
        return [order_to_dto(o, customers, items) for o in orders]
