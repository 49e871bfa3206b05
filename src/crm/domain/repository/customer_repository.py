"""Abstract repository for Customer entities.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete implementation talks to the remote API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from crm.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer, newest first."""

    @abstractmethod
    def add(self, customer: Customer) -> Customer:
        """Persist a new customer and return it with its assigned ID."""
