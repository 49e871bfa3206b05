"""Application service: Create Order use case.

Orchestrates the lookups (customer, catalog) and the Order Composer.
Requested items are toggled into a ComposerState exactly as the form
would do it, then submitted as a single order.
"""

from __future__ import annotations

import logging

from crm.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from crm.domain.exceptions import EntityNotFoundError
from crm.domain.model.item import Item
from crm.domain.model.order import OrderStatus
from crm.domain.repository.customer_repository import CustomerRepository
from crm.domain.repository.item_repository import ItemRepository
from crm.domain.repository.order_repository import OrderRepository
from crm.domain.service.order_composer import ComposerState

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        item_repo: ItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._item_repo = item_repo

    def handle(
        self,
        customer_id: str,
        item_specs: list[OrderItemSpec],
        order_code: str | None = None,
        status: str = OrderStatus.PENDING.value,
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Check the customer exists.
        2. Resolve each item reference against the catalog (ID or code).
        3. Toggle each item in and set its quantity from the raw text.
           Naming the same item twice toggles it back out.
        4. Let the Order aggregate validate, submit, return a DTO.
        """
        customers = self._customer_repo.list_all()
        if not any(c.id == customer_id for c in customers):
            raise EntityNotFoundError(f"Customer not found: '{customer_id}'")

        catalog = self._item_repo.list_all()

        state = (
            ComposerState()
            .select_customer(customer_id)
            .set_code(order_code or "")
            .set_status(status)
        )
        for spec in item_specs:
            item = self._find_item(catalog, spec.item_ref)
            state = state.toggle(item)
            if state.contains(item.id):  # type: ignore[arg-type]
                state = state.set_quantity(item.id, spec.quantity)  # type: ignore[arg-type]

        order = state.to_order()
        saved = self._order_repo.add(order)
        logger.info(
            "Order %s created for customer %s with %d line(s)",
            saved.code,
            saved.customer_id,
            len(saved.lines),
        )
        return order_to_dto(saved, customers, catalog)

    @staticmethod
    def _find_item(catalog: list[Item], ref: str) -> Item:
        ref = ref.strip()
        for item in catalog:
            if item.id == ref:
                return item
        # Codes are not unique; the first match wins.
        for item in catalog:
            if item.code.lower() == ref.lower():
                return item
        raise EntityNotFoundError(f"Item not found: '{ref}'")
