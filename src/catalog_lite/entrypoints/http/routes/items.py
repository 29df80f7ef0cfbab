from fastapi import APIRouter, Depends

from catalog_lite.entrypoints.http.dependencies import (
    get_get_item_by_id_use_case,
    get_search_items_use_case,
)
from catalog_lite.entrypoints.http.dtos.items import (
    ItemPageResponseDTO,
    ItemResponseDTO,
    ItemsSearchQueryDTO,
)
from catalog_lite.entrypoints.http.error_responses import ErrorResponse
from catalog_lite.entrypoints.http.mappers.item_mapper import ItemMapper
from catalog_lite.use_cases.get_item_by_id import GetItemById, GetItemByIdRequest
from catalog_lite.use_cases.search_items import SearchItems


router = APIRouter(prefix="/items", tags=["Items"])


@router.get(
    "",
    response_model=ItemPageResponseDTO,
    summary="Search and filter items",
    description="""
    Search and filter items with optional criteria and pagination.

    ## Filters
    - `q`: text search in title and description (case-insensitive substring)
    - `category`: exact, case-sensitive category ID
    - Both filters combine with AND semantics; no filters returns everything

    ## Pagination
    - Pages are 0-indexed (first page = 0)
    - Default size: 10
    - Max size: 100

    ## Example
    ```
    GET /api/items?q=laptop&category=MLU1648&page=0&size=10
    ```
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid parameters"},
        503: {"model": ErrorResponse, "description": "Catalog unavailable"},
    },
)
def search_items(
    query: ItemsSearchQueryDTO = Depends(),
    use_case: SearchItems = Depends(get_search_items_use_case),
) -> ItemPageResponseDTO:
    """Search items endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = ItemMapper.to_search_request(query)

    # 2. Execute use case (validates, filters, paginates)
    result = use_case.execute_paginated(request)

    # 3. Map to response
    return ItemMapper.to_page_response(result)


@router.get(
    "/{item_id}",
    response_model=ItemResponseDTO,
    summary="Get item by ID",
    description="""
    Retrieve a single item by its marketplace identifier (e.g. `MLU123456789`),
    including category and seller information.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid item ID format"},
        404: {"model": ErrorResponse, "description": "Item not found"},
        503: {"model": ErrorResponse, "description": "Catalog unavailable"},
    },
)
def get_item(
    item_id: str,
    use_case: GetItemById = Depends(get_get_item_by_id_use_case),
) -> ItemResponseDTO:
    """Get item endpoint: execute → map → return."""
    result = use_case.execute(GetItemByIdRequest(item_id=item_id))
    return ItemMapper.to_item_response(result.item)
