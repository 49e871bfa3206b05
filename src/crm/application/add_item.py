"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from crm.application.dto import ItemDTO, item_to_dto
from crm.domain.model.item import Item
from crm.domain.repository.item_repository import ItemRepository

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(
        self,
        name: str,
        code: str | None = None,
        price: str | None = None,
        cost: str | None = None,
        photo: str | None = None,
    ) -> ItemDTO:
        """Add an item to the catalog.

        Catalog codes are not checked for uniqueness; a blank code gets an
        ``ITEM_<millis>`` fallback.
        """
        item = Item.create(name=name, code=code, price=price, cost=cost, photo=photo)
        saved = self._item_repo.add(item)
        logger.info("Item %s created (code=%s)", saved.id, saved.code)
        return item_to_dto(saved)
