"""Order Composer: selecting catalog items into an order.

Every function here is pure. Line sets are tuples and each operation
returns a new tuple, so callers keep the previous state if they want
it. Nothing is raised: quantities and prices go through the
``coerce_quantity`` and ``price_or_zero`` rules instead.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from crm.domain.model.item import Item
from crm.domain.model.order import Order, OrderLine, OrderStatus
from crm.domain.model.value_objects import Money, coerce_quantity, price_or_zero

Lines = tuple[OrderLine, ...]


@dataclass(frozen=True)
class OrderTotals:
    total_quantity: int
    total_price: str  # two decimals, e.g. "25.50"


def toggle_line(lines: Iterable[OrderLine], item: Item) -> Lines:
    """Remove the line for ``item`` if present, otherwise append one.

    A new line starts at quantity 1 with the item's current price.
    """
    current = tuple(lines)
    if any(line.item_id == item.id for line in current):
        return tuple(line for line in current if line.item_id != item.id)
    return current + (OrderLine(item_id=item.id, quantity=1, price=item.price),)  # type: ignore[arg-type]


def set_quantity(lines: Iterable[OrderLine], item_id: str, raw_quantity: object) -> Lines:
    """Replace the quantity of the line for ``item_id``.

    ``raw_quantity`` is whatever the operator typed; see ``coerce_quantity``.
    """
    quantity = coerce_quantity(raw_quantity)
    return tuple(
        replace(line, quantity=quantity) if line.item_id == item_id else line
        for line in lines
    )


def compute_totals(lines: Iterable[OrderLine]) -> OrderTotals:
    total_quantity = 0
    total_price = Money.zero()
    for line in lines:
        quantity = coerce_quantity(line.quantity)
        total_quantity += quantity
        total_price = total_price + price_or_zero(line.price) * quantity
    return OrderTotals(total_quantity=total_quantity, total_price=str(total_price))


@dataclass(frozen=True)
class ComposerState:
    """Everything the "create order" form holds before submission.

    Each method returns a new state; the reducer style keeps the form
    free of shared mutable state.
    """

    customer_id: str = ""
    order_code: str = ""
    status: OrderStatus = OrderStatus.PENDING
    lines: Lines = ()

    def select_customer(self, customer_id: str) -> ComposerState:
        return replace(self, customer_id=customer_id)

    def set_code(self, order_code: str) -> ComposerState:
        return replace(self, order_code=order_code)

    def set_status(self, status: str | OrderStatus) -> ComposerState:
        return replace(self, status=OrderStatus.parse(status))

    def toggle(self, item: Item) -> ComposerState:
        return replace(self, lines=toggle_line(self.lines, item))

    def set_quantity(self, item_id: str, raw_quantity: object) -> ComposerState:
        return replace(self, lines=set_quantity(self.lines, item_id, raw_quantity))

    def contains(self, item_id: str) -> bool:
        return any(line.item_id == item_id for line in self.lines)

    def totals(self) -> OrderTotals:
        return compute_totals(self.lines)

    def to_order(self) -> Order:
        """Validate the form and build a new Order from it."""
        return Order.create(
            customer_id=self.customer_id,
            lines=self.lines,
            code=self.order_code,
            status=self.status,
        )

    @staticmethod
    def reset() -> ComposerState:
        return ComposerState()
