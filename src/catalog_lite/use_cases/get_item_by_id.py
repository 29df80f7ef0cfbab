"""Get item by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from catalog_lite.domain.errors import NotFoundError
from catalog_lite.domain.item import Item
from catalog_lite.ports.input_validator import InputValidator
from catalog_lite.ports.item_repository import ItemRepository


@dataclass(frozen=True, slots=True)
class GetItemByIdRequest:
    """Request to get an item by ID."""

    item_id: str | None


@dataclass(frozen=True, slots=True)
class GetItemByIdResponse:
    """Response containing the requested item."""

    item: Item


class GetItemById:
    """
    Use case for retrieving a single item by ID.

    Responsibilities:
    - Validate item_id format through the input validator
    - Delegate to repository for data access
    - Raise NotFoundError if item doesn't exist
    """

    def __init__(self, item_repository: ItemRepository, input_validator: InputValidator) -> None:
        """
        Initialize use case with dependencies.

        Args:
            item_repository: Repository for item data access
            input_validator: Validation boundary for external input
        """
        self._repository = item_repository
        self._validator = input_validator

    def execute(self, request: GetItemByIdRequest) -> GetItemByIdResponse:
        """
        Execute the get item by ID use case.

        Args:
            request: Request containing item_id

        Returns:
            GetItemByIdResponse with the item, unchanged

        Raises:
            ValidationError: If item_id is blank, too long or badly shaped
            NotFoundError: If no item has the given ID
            CatalogUnavailableError: If the catalog could not be loaded
        """
        item_id = self._validator.validate_item_id(request.item_id)

        item = self._repository.find_by_id(item_id)

        if item is None:
            raise NotFoundError(resource="Item", identifier=item_id)

        return GetItemByIdResponse(item=item)
