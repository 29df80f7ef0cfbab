from __future__ import annotations

from catalog_lite.domain.item import Item
from catalog_lite.domain.pagination import PaginatedResult
from catalog_lite.entrypoints.http.dtos.items import (
    CategoryResponseDTO,
    ItemPageResponseDTO,
    ItemResponseDTO,
    ItemsSearchQueryDTO,
    SellerResponseDTO,
)
from catalog_lite.use_cases.search_items import SearchItemsRequest


class ItemMapper:
    """Maps between REST DTOs and domain models for items."""

    @staticmethod
    def to_search_request(dto: ItemsSearchQueryDTO) -> SearchItemsRequest:
        """
        Builds the (still unvalidated) domain search request from query params.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            SearchItemsRequest: Raw request for the SearchItems use case
        """
        return SearchItemsRequest(
            query=dto.q,
            category_id=dto.category,  # DTO uses 'category', domain uses 'category_id'
            page=dto.page,
            size=dto.size,
        )

    @staticmethod
    def to_item_response(item: Item) -> ItemResponseDTO:
        """
        Converts domain Item entity to REST response DTO.

        Handles Decimal → str and enum → name conversion at the boundary.
        """
        return ItemResponseDTO(
            id=item.id,
            title=item.title,
            price=str(item.price),  # Decimal → str at boundary
            description=item.description,
            image=item.image,
            stock=item.stock,
            condition=item.condition.name if item.condition else None,
            category=(
                CategoryResponseDTO(id=item.category.id, name=item.category.name)
                if item.category
                else None
            ),
            seller=(
                SellerResponseDTO(
                    id=item.seller.id,
                    name=item.seller.name,
                    reputation=item.seller.reputation,
                )
                if item.seller
                else None
            ),
        )

    @staticmethod
    def to_page_response(result: PaginatedResult[Item]) -> ItemPageResponseDTO:
        """
        Converts a domain page to the REST page response.

        Args:
            result: One page of items with pagination metadata

        Returns:
            ItemPageResponseDTO: REST response with items and derived page flags
        """
        return ItemPageResponseDTO(
            content=[ItemMapper.to_item_response(item) for item in result.content],
            page=result.page,
            size=result.size,
            total_elements=result.total_elements,
            total_pages=result.total_pages,
            has_next=result.has_next,
            has_previous=result.has_previous,
            is_first=result.is_first,
            is_last=result.is_last,
        )
