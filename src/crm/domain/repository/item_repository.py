"""Abstract repository for catalog Items."""

from __future__ import annotations

from abc import ABC, abstractmethod

from crm.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return the whole catalog."""

    @abstractmethod
    def add(self, item: Item) -> Item:
        """Persist a new item and return it with its assigned ID."""
