"""Item entity: one entry of the catalog orders are composed from."""

from __future__ import annotations

from dataclasses import dataclass

from crm.domain.exceptions import ValidationError
from crm.domain.model.value_objects import Money, price_or_zero
from crm.domain.service.codes import ITEM_CODE_PREFIX, resolve_code


@dataclass(frozen=True)
class Item:
    """A catalog item.

    ``id`` is the identity assigned by the API; ``code`` is the separate,
    human-assigned catalog code shown next to the name.
    """

    id: str | None
    code: str
    name: str
    price: Money
    cost: Money
    photo: str | None = None

    @staticmethod
    def create(
        name: str,
        code: str | None = None,
        price: str | None = None,
        cost: str | None = None,
        photo: str | None = None,
    ) -> Item:
        """Build a new item from form input.

        A blank code gets an ``ITEM_<millis>`` fallback. Blank price or
        cost means zero; text that is not a number is rejected.
        """
        if not name or not name.strip():
            raise ValidationError("Item name is required")

        return Item(
            id=None,
            code=resolve_code(code, ITEM_CODE_PREFIX),
            name=name.strip(),
            price=_parse_amount(price, "price"),
            cost=_parse_amount(cost, "cost"),
            photo=photo.strip() if photo and photo.strip() else None,
        )


def _parse_amount(raw: str | None, label: str) -> Money:
    if raw is None or not str(raw).strip():
        return price_or_zero(None)
    try:
        return Money.of(raw)
    except ValidationError as exc:
        raise ValidationError(f"Invalid item {label}: {raw!r}") from exc
