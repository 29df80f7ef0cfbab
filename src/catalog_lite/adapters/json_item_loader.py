"""JSON file implementation of ItemLoader."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from catalog_lite.domain.errors import CatalogUnavailableError
from catalog_lite.domain.item import Category, Item, ItemCondition, Seller
from catalog_lite.infra.data.records import ItemRecord
from catalog_lite.ports.item_loader import ItemLoader

logger = logging.getLogger(__name__)

_ITEM_RECORDS = TypeAdapter(list[ItemRecord])


class JsonItemLoader(ItemLoader):
    """
    Reads the catalog from a JSON array of item objects.

    - Validates every element against ItemRecord (pydantic)
    - Rejects duplicate item IDs
    - Converts ItemRecord (infrastructure) to Item (domain), keeping file order
    - Turns every I/O, JSON or schema failure into CatalogUnavailableError
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize loader with the dataset location.

        Args:
            path: Path to the JSON dataset
        """
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Item]:
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            logger.error(
                "Catalog file could not be read",
                exc_info=exc,
                extra={"path": str(self._path)},
            )
            raise CatalogUnavailableError(
                "Catalog data file could not be read", path=str(self._path)
            ) from exc

        try:
            records = _ITEM_RECORDS.validate_json(raw)
        except SchemaValidationError as exc:
            logger.error(
                "Catalog file is malformed",
                extra={"path": str(self._path), "error_count": exc.error_count()},
            )
            raise CatalogUnavailableError(
                "Catalog data file is malformed", path=str(self._path)
            ) from exc

        self._check_unique_ids(records)

        items = [self._to_domain(record) for record in records]
        logger.info(
            "Loaded items from JSON file",
            extra={"path": str(self._path), "item_count": len(items)},
        )
        return items

    def _check_unique_ids(self, records: list[ItemRecord]) -> None:
        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                raise CatalogUnavailableError(
                    "Catalog data file contains duplicate item IDs",
                    path=str(self._path),
                    identifier=record.id,
                )
            seen.add(record.id)

    @staticmethod
    def _to_domain(record: ItemRecord) -> Item:
        """
        Convert a file row (ItemRecord) to a domain entity (Item).

        Args:
            record: Validated row from the JSON file

        Returns:
            Item domain entity
        """
        return Item(
            id=record.id,
            title=record.title,
            price=record.price,
            description=record.description,
            image=record.image,
            stock=record.stock,
            condition=ItemCondition(record.condition) if record.condition else None,
            category=(
                Category(id=record.category.id, name=record.category.name)
                if record.category
                else None
            ),
            seller=(
                Seller(
                    id=record.seller.id,
                    name=record.seller.name,
                    reputation=record.seller.reputation,
                )
                if record.seller
                else None
            ),
        )
