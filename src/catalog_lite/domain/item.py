from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class ItemCondition(str, Enum):
    NEW = "NEW"
    USED = "USED"

    @property
    def display_name(self) -> str:
        return _CONDITION_DISPLAY_NAMES[self]


_CONDITION_DISPLAY_NAMES = {
    ItemCondition.NEW: "Nuevo",
    ItemCondition.USED: "Usado",
}


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Seller:
    id: str
    name: str | None = None
    reputation: float | None = None  # 0..5, None when the seller has no rating yet


@dataclass(frozen=True, slots=True)
class Item:
    id: str
    title: str | None
    price: Decimal
    description: str | None = None
    image: str | None = None
    stock: int | None = None
    condition: ItemCondition | None = None
    category: Category | None = None
    seller: Seller | None = None


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """
    Validated filter dimensions for a catalog search.

    Both fields are expected to come out of the input validator: ``query`` is
    the HTML-escaped text term and ``category_id`` the trimmed category code.
    ``None`` means "no filter on that dimension", never "match nothing".
    """

    query: str | None = None
    category_id: str | None = None


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return self.page * self.size
