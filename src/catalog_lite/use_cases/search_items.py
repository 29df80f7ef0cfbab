from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from catalog_lite.domain.item import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    Item,
    Paging,
    SearchCriteria,
)
from catalog_lite.domain.pagination import PaginatedResult, paginate
from catalog_lite.ports.input_validator import InputValidator
from catalog_lite.ports.item_repository import ItemRepository


@dataclass(frozen=True, slots=True)
class SearchItemsRequest:
    """Raw, unvalidated search parameters as received from the caller."""

    query: str | None = None
    category_id: str | None = None
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE


class SearchItems:
    """
    Item search with optional text/category filters and pagination.

    Validation happens here, before the repository sees anything: a request
    that fails validation never reaches the filters. Filtering itself is
    delegated to the repository; paging is applied to its full result.
    """

    def __init__(self, item_repository: ItemRepository, input_validator: InputValidator) -> None:
        self._repository = item_repository
        self._validator = input_validator

    def execute(self, request: SearchItemsRequest) -> Iterator[Item]:
        """
        Unpaginated search: lazily yield every matching item.

        ``page`` and ``size`` on the request are ignored.

        Raises:
            ValidationError: If the query or category is invalid
        """
        criteria = self._validate_criteria(request)
        return self._repository.find_matching(criteria)

    def execute_paginated(self, request: SearchItemsRequest) -> PaginatedResult[Item]:
        """
        Execute a paginated search.

        Validates paging first, then the query, then the category.

        Args:
            request: Raw search parameters

        Returns:
            One page of matching items with pagination metadata

        Raises:
            ValidationError: If any parameter is invalid
            CatalogUnavailableError: If the catalog could not be loaded
        """
        self._validator.validate_pagination(request.page, request.size)
        criteria = self._validate_criteria(request)

        # Materialize once so the count and the slice see the same result set
        matches = tuple(self._repository.find_matching(criteria))

        return paginate(matches, Paging(page=request.page, size=request.size))

    def _validate_criteria(self, request: SearchItemsRequest) -> SearchCriteria:
        return SearchCriteria(
            query=self._validator.validate_search_query(request.query),
            category_id=self._validator.validate_category(request.category_id),
        )
