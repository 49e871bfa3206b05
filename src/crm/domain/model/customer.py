"""Customer entity.

Customers are created from the dashboard form and never edited there
afterwards, so the dataclass is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from crm.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Customer:

    id: str | None
    name: str
    email: str
    phone: str = ""
    address: str = ""

    @staticmethod
    def create(
        name: str,
        email: str,
        phone: str = "",
        address: str = "",
    ) -> Customer:
        """Build a new, not yet persisted customer from form input."""
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        if not email or not email.strip():
            raise ValidationError("Customer email is required")
        return Customer(
            id=None,
            name=name.strip(),
            email=email.strip(),
            phone=(phone or "").strip(),
            address=(address or "").strip(),
        )
