"""Application service: Add Customer use case."""

from __future__ import annotations

import logging

from crm.application.dto import CustomerDTO, customer_to_dto
from crm.domain.model.customer import Customer
from crm.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        name: str,
        email: str,
        phone: str = "",
        address: str = "",
    ) -> CustomerDTO:
        customer = Customer.create(name=name, email=email, phone=phone, address=address)
        saved = self._customer_repo.add(customer)
        logger.info("Customer %s created (%s)", saved.id, saved.name)
        return customer_to_dto(saved)
