from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from catalog_lite.domain.errors import CatalogUnavailableError
from catalog_lite.domain.item import Item, SearchCriteria
from catalog_lite.domain.item_filters import filter_items
from catalog_lite.ports.item_loader import ItemLoader
from catalog_lite.ports.item_repository import ItemRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Catalog:
    items: tuple[Item, ...]
    by_id: dict[str, Item]


class _StaticItemLoader(ItemLoader):
    def __init__(self, items: Iterable[Item]) -> None:
        self._items = list(items)

    def load_all(self) -> list[Item]:
        return list(self._items)


class InMemoryItemRepository(ItemRepository):
    """
    Read-only catalog held in memory for the process lifetime.

    - Loads lazily, on first access, through the injected ItemLoader
    - Concurrent first accesses share a single load (lock-guarded once)
    - Stores items as an immutable tuple in loader order
    - A failed load is remembered: every later call re-raises it
    """

    def __init__(self, loader: ItemLoader) -> None:
        self._loader = loader
        self._lock = threading.Lock()
        self._catalog: _Catalog | None = None
        self._load_error: CatalogUnavailableError | None = None

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> InMemoryItemRepository:
        """Build a repository over a fixed list of items (handy for tests and scripts)."""
        return cls(_StaticItemLoader(items))

    def warm_up(self) -> int:
        """Force the one-time load now. Returns the number of items."""
        return len(self._get_catalog().items)

    def find_all(self) -> Sequence[Item]:
        return self._get_catalog().items

    def find_by_id(self, item_id: str) -> Item | None:
        return self._get_catalog().by_id.get(item_id)

    def find_matching(self, criteria: SearchCriteria) -> Iterator[Item]:
        # Trust that UseCase has validated inputs (contract programming)
        return filter_items(self._get_catalog().items, criteria)

    def _get_catalog(self) -> _Catalog:
        catalog = self._catalog
        if catalog is not None:
            return catalog

        with self._lock:
            if self._catalog is None:
                if self._load_error is not None:
                    # Fresh instance per call; the cached one keeps its first traceback only
                    raise CatalogUnavailableError(
                        self._load_error.message, **self._load_error.context
                    ) from self._load_error
                self._catalog = self._load()
            return self._catalog

    def _load(self) -> _Catalog:
        try:
            items = tuple(self._loader.load_all())
        except CatalogUnavailableError as exc:
            self._load_error = exc
            raise
        except Exception as exc:
            logger.error("Catalog load failed", exc_info=exc)
            self._load_error = CatalogUnavailableError(
                "Catalog could not be loaded", reason=str(exc)
            )
            raise self._load_error from exc

        logger.info("Catalog loaded", extra={"item_count": len(items)})
        return _Catalog(items=items, by_id={item.id: item for item in items})
