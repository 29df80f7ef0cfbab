"""
Dependency injection for FastAPI routes.

Key principle: the catalog is loaded once per process, so the repository is a
cached singleton. Use cases are cheap and built per request.
Only stateless singletons (or the once-loaded catalog) should use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from catalog_lite.adapters.in_memory_item_repository import InMemoryItemRepository
from catalog_lite.adapters.json_item_loader import JsonItemLoader
from catalog_lite.adapters.security_input_validator import SecurityInputValidator
from catalog_lite.infra.config import catalog_data_file
from catalog_lite.ports.input_validator import InputValidator
from catalog_lite.ports.item_repository import ItemRepository
from catalog_lite.use_cases.get_item_by_id import GetItemById
from catalog_lite.use_cases.search_items import SearchItems


@lru_cache
def get_item_repository() -> InMemoryItemRepository:
    """
    Process-wide catalog store.

    Construction is cheap; the dataset itself is read lazily on first
    access and then reused by every request.
    """
    return InMemoryItemRepository(JsonItemLoader(catalog_data_file()))


@lru_cache
def get_input_validator() -> InputValidator:
    return SecurityInputValidator()


def get_get_item_by_id_use_case(
    repository: ItemRepository = Depends(get_item_repository),
    validator: InputValidator = Depends(get_input_validator),
) -> GetItemById:
    """
    Factory function that returns a configured GetItemById use case.

    Args:
        repository: Catalog store (injected by FastAPI)
        validator: Input validator (injected by FastAPI)

    Returns:
        GetItemById: Configured use case instance
    """
    return GetItemById(item_repository=repository, input_validator=validator)


def get_search_items_use_case(
    repository: ItemRepository = Depends(get_item_repository),
    validator: InputValidator = Depends(get_input_validator),
) -> SearchItems:
    """
    Factory function that returns a configured SearchItems use case.

    Args:
        repository: Catalog store (injected by FastAPI)
        validator: Input validator (injected by FastAPI)

    Returns:
        SearchItems: Configured use case instance
    """
    return SearchItems(item_repository=repository, input_validator=validator)
