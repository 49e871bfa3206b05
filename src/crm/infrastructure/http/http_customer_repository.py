"""API-backed implementation of CustomerRepository."""

from __future__ import annotations

from crm.domain.model.customer import Customer
from crm.domain.repository.customer_repository import CustomerRepository
from crm.infrastructure.http.api_client import ApiClient

CUSTOMERS_PATH = "/api/customers"


class HttpCustomerRepository(CustomerRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- CustomerRepository interface -----------------------------------------

    def list_all(self) -> list[Customer]:
        data = self._client.get(CUSTOMERS_PATH) or []
        return [self._to_domain(raw) for raw in data]

    def add(self, customer: Customer) -> Customer:
        return self._to_domain(self._client.post(CUSTOMERS_PATH, self._to_raw(customer)))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "name": customer.name,
            "email": customer.email,
            "phone": customer.phone,
            "address": customer.address,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=str(raw["_id"]),
            name=raw.get("name") or "",
            email=raw.get("email") or "",
            phone=raw.get("phone") or "",
            address=raw.get("address") or "",
        )
