"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals. Amounts are pre-formatted strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from crm.domain.model.customer import Customer
from crm.domain.model.item import Item
from crm.domain.model.order import Order
from crm.domain.model.value_objects import coerce_quantity, price_or_zero


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: a catalog reference (ID or code) and the quantity as typed."""

    item_ref: str
    quantity: str = "1"


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    name: str
    email: str
    phone: str
    address: str


@dataclass(frozen=True)
class ItemDTO:
    id: str
    code: str
    name: str
    price: str
    cost: str
    photo: str | None


@dataclass(frozen=True)
class OrderLineDTO:
    item_id: str
    item_name: str  # falls back to the item ID when unknown
    quantity: int
    price: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    code: str
    customer_id: str
    customer_name: str  # falls back to the customer ID when unknown
    status: str
    lines: list[OrderLineDTO]
    total_quantity: int
    total_price: str


# --- Mapping ------------------------------------------------------------------


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id or "",
        name=customer.name,
        email=customer.email,
        phone=customer.phone,
        address=customer.address,
    )


def item_to_dto(item: Item) -> ItemDTO:
    return ItemDTO(
        id=item.id or "",
        code=item.code,
        name=item.name,
        price=str(item.price),
        cost=str(item.cost),
        photo=item.photo,
    )


def order_to_dto(
    order: Order,
    customers: Iterable[Customer] = (),
    items: Iterable[Item] = (),
) -> OrderDTO:
    """Flatten an order, resolving names from the lists the caller holds."""
    customer_names = {c.id: c.name for c in customers}
    item_names = {i.id: i.name for i in items}
    totals = order.totals()
    return OrderDTO(
        id=order.id or "",
        code=order.code,
        customer_id=order.customer_id,
        customer_name=customer_names.get(order.customer_id) or order.customer_id,
        status=order.status.value,
        lines=[
            OrderLineDTO(
                item_id=line.item_id,
                item_name=item_names.get(line.item_id) or line.item_id,
                quantity=coerce_quantity(line.quantity),
                price=str(price_or_zero(line.price)),
            )
            for line in order.lines
        ],
        total_quantity=totals.total_quantity,
        total_price=totals.total_price,
    )
