from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from catalog_lite.domain.item import Paging

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PaginatedResult(Generic[T]):
    """
    One page of a filtered result set plus its position in the whole.

    ``total_elements`` is always the unpaginated filtered count, so the derived
    flags stay meaningful when ``page`` points past the last page (content is
    then empty, ``has_next`` is False and ``is_last`` is True).
    """

    content: tuple[T, ...]
    total_elements: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size == 0:
            return 0
        return -(-self.total_elements // self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page >= self.total_pages - 1


def paginate(items: Sequence[T], paging: Paging) -> PaginatedResult[T]:
    """
    Slice an already filtered sequence into a single page.

    The same sequence feeds both the count and the slice, so the two always
    describe the same snapshot.

    Args:
        items: Full filtered result set, in catalog order
        paging: Pre-validated page index and size

    Returns:
        PaginatedResult with at most ``paging.size`` items
    """
    start = paging.offset
    end = start + paging.size

    return PaginatedResult(
        content=tuple(items[start:end]),
        total_elements=len(items),
        page=paging.page,
        size=paging.size,
    )
