"""Order aggregate.

The Order owns its lines. Lines are normally built with the Order
Composer (``crm.domain.service.order_composer``) and handed to
``Order.create`` once the operator submits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from crm.domain.exceptions import ValidationError
from crm.domain.model.value_objects import DEFAULT_QUANTITY, Money
from crm.domain.service.codes import ORDER_CODE_PREFIX, resolve_code

if TYPE_CHECKING:
    from crm.domain.service.order_composer import OrderTotals


class OrderStatus(Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @staticmethod
    def parse(value: str | OrderStatus) -> OrderStatus:
        """Accept a status or its display value (case-insensitive)."""
        if isinstance(value, OrderStatus):
            return value
        wanted = (value or "").strip().lower()
        for status in OrderStatus:
            if status.value.lower() == wanted:
                return status
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(f"Unknown order status {value!r} (expected one of: {allowed})")


@dataclass(frozen=True)
class OrderLine:
    """One (item, quantity, price snapshot) entry of an order.

    ``price`` is copied from the item when the line is selected, so later
    catalog price changes do not touch it. ``None`` means the API sent no
    price.
    """

    item_id: str
    quantity: int = DEFAULT_QUANTITY
    price: Money | None = None


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders. The ``__init__`` stays simple
    so repositories can rebuild orders returned by the API as they are.
    """

    id: str | None
    code: str
    customer_id: str
    status: OrderStatus = OrderStatus.PENDING
    lines: tuple[OrderLine, ...] = field(default_factory=tuple)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        lines: tuple[OrderLine, ...] | list[OrderLine],
        code: str | None = None,
        status: str | OrderStatus = OrderStatus.PENDING,
    ) -> Order:
        """Create a new order; a blank code gets an ``ORD_<millis>`` fallback."""
        if not customer_id or not customer_id.strip():
            raise ValidationError("A customer must be selected")

        if not lines:
            raise ValidationError("Order must contain at least one item")

        item_ids = [line.item_id for line in lines]
        if len(set(item_ids)) != len(item_ids):
            raise ValidationError("Each item may appear only once per order")

        return Order(
            id=None,
            code=resolve_code(code, ORDER_CODE_PREFIX),
            customer_id=customer_id.strip(),
            status=OrderStatus.parse(status),
            lines=tuple(lines),
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, status: str | OrderStatus) -> None:
        """Move to any of the four statuses; there is no transition graph."""
        self.status = OrderStatus.parse(status)

    # --- Computed properties --------------------------------------------------

    def totals(self) -> OrderTotals:
        """Item count and two-decimal total, as computed by the composer."""
        from crm.domain.service.order_composer import compute_totals

        return compute_totals(self.lines)
