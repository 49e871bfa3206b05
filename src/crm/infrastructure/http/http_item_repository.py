"""API-backed implementation of ItemRepository."""

from __future__ import annotations

from crm.domain.model.item import Item
from crm.domain.model.value_objects import price_or_zero
from crm.domain.repository.item_repository import ItemRepository
from crm.infrastructure.http.api_client import ApiClient

ITEMS_PATH = "/api/items"


class HttpItemRepository(ItemRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- ItemRepository interface ---------------------------------------------

    def list_all(self) -> list[Item]:
        data = self._client.get(ITEMS_PATH) or []
        return [self._to_domain(raw) for raw in data]

    def add(self, item: Item) -> Item:
        return self._to_domain(self._client.post(ITEMS_PATH, self._to_raw(item)))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: Item) -> dict:
        return {
            "itemId": item.code,
            "name": item.name,
            "price": str(item.price.amount),
            "cost": str(item.cost.amount),
            "photo": item.photo or "",
        }

    @staticmethod
    def _to_domain(raw: dict) -> Item:
        # Stored prices may be strings or numbers, or missing altogether.
        return Item(
            id=str(raw["_id"]),
            code=str(raw.get("itemId") or ""),
            name=raw.get("name") or "",
            price=price_or_zero(raw.get("price")),
            cost=price_or_zero(raw.get("cost")),
            photo=raw.get("photo") or None,
        )
