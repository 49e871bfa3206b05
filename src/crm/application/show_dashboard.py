"""Application service: Show Dashboard use case (query).

The dashboard has one tab per record type; showing a tab loads that
tab's list only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from crm.application.dto import CustomerDTO, ItemDTO, OrderDTO
from crm.application.list_records import (
    ListCustomersHandler,
    ListItemsHandler,
    ListOrdersHandler,
)
from crm.domain.exceptions import ValidationError
from crm.domain.repository.customer_repository import CustomerRepository
from crm.domain.repository.item_repository import ItemRepository
from crm.domain.repository.order_repository import OrderRepository

TABS = ("customers", "items", "orders")

Row = Union[CustomerDTO, ItemDTO, OrderDTO]


@dataclass(frozen=True)
class DashboardDTO:
    tab: str
    rows: list[Row]


class ShowDashboardHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        item_repo: ItemRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._item_repo = item_repo
        self._order_repo = order_repo

    def handle(self, tab: str = "customers") -> DashboardDTO:
        tab = (tab or "").strip().lower()
        if tab not in TABS:
            raise ValidationError(f"Unknown tab '{tab}' (expected one of: {', '.join(TABS)})")

        rows: list[Row]
        if tab == "customers":
            rows = list(ListCustomersHandler(self._customer_repo).handle())
        elif tab == "items":
            rows = list(ListItemsHandler(self._item_repo).handle())
        else:
            rows = list(
                ListOrdersHandler(
                    self._order_repo, self._customer_repo, self._item_repo
                ).handle()
            )
        return DashboardDTO(tab=tab, rows=rows)
