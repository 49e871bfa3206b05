"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from crm.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Submit a new order and return it as persisted."""

    @abstractmethod
    def update_status(self, order_id: str, status: OrderStatus) -> None:
        """Change the status of an existing order."""
