from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_lite.domain.item import Item


class ItemLoader(ABC):
    """
    Port for reading the full catalog from its backing source.

    Called at most once per process by the catalog store.

    Raises:
        CatalogUnavailableError: If the source is unreadable or malformed
    """

    @abstractmethod
    def load_all(self) -> list[Item]: ...
