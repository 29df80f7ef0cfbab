from pydantic import BaseModel, ConfigDict, Field


class CategoryResponseDTO(BaseModel):
    id: str
    name: str | None = None


class SellerResponseDTO(BaseModel):
    id: str
    name: str | None = None
    reputation: float | None = None


class ItemResponseDTO(BaseModel):
    id: str
    title: str | None = None
    price: str
    description: str | None = None
    image: str | None = None
    stock: int | None = None
    condition: str | None = None
    category: CategoryResponseDTO | None = None
    seller: SellerResponseDTO | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "MLU123456789",
                "title": "Laptop Lenovo IdeaPad 3 15.6\"",
                "price": "649.99",
                "description": "Intel Core i5 processor, 8GB RAM, 512GB SSD",
                "image": "https://http2.mlstatic.com/D_NQ_NP_123456-MLU.webp",
                "stock": 12,
                "condition": "NEW",
                "category": {"id": "MLU1648", "name": "Computación"},
                "seller": {"id": "SELLER001", "name": "TecnoStore", "reputation": 4.8},
            }
        }
    )


class ItemsSearchQueryDTO(BaseModel):
    """
    Query parameters for searching items.

    Only types are checked here; ranges, lengths and charsets are enforced by
    the input validator so every caller goes through the same boundary.
    """

    q: str | None = Field(
        default=None,
        description="Text to match in title or description (case-insensitive)",
        examples=["laptop"],
    )
    category: str | None = Field(
        default=None,
        description="Category ID to filter by (exact match)",
        examples=["MLU1648"],
    )
    page: int = Field(
        default=0,
        description="Page number (0-based index). First page is 0.",
        examples=[0],
    )
    size: int = Field(
        default=10,
        description="Number of items per page (max: 100)",
        examples=[10],
    )


class ItemPageResponseDTO(BaseModel):
    content: list[ItemResponseDTO]
    page: int
    size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool
    is_first: bool
    is_last: bool
