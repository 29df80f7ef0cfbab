"""Item filter predicates.

Each filter dimension is a small predicate; a search combines the ones
present in the criteria with AND semantics. A new dimension is added by
writing a new predicate and registering it in ``build_predicate``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from catalog_lite.domain.item import Item, SearchCriteria


class ItemPredicate(ABC):
    @abstractmethod
    def matches(self, item: Item) -> bool: ...


@dataclass(frozen=True, slots=True)
class MatchAll(ItemPredicate):
    def matches(self, item: Item) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class TextPredicate(ItemPredicate):
    """Case-insensitive substring match on title or description."""

    query: str

    def matches(self, item: Item) -> bool:
        needle = self.query.lower()
        return _contains(item.title, needle) or _contains(item.description, needle)


@dataclass(frozen=True, slots=True)
class CategoryPredicate(ItemPredicate):
    """Exact, case-sensitive match on the category code."""

    category_id: str

    def matches(self, item: Item) -> bool:
        return item.category is not None and item.category.id == self.category_id


@dataclass(frozen=True, slots=True)
class AllOf(ItemPredicate):
    predicates: tuple[ItemPredicate, ...]

    def matches(self, item: Item) -> bool:
        return all(predicate.matches(item) for predicate in self.predicates)


def _contains(haystack: str | None, needle: str) -> bool:
    # A missing field never matches
    return haystack is not None and needle in haystack.lower()


def build_predicate(criteria: SearchCriteria) -> ItemPredicate:
    """
    Build the predicate for a validated search.

    Blank or missing dimensions are skipped, so empty criteria match every item.
    """
    predicates: list[ItemPredicate] = []

    if criteria.category_id:
        predicates.append(CategoryPredicate(criteria.category_id))
    if criteria.query:
        predicates.append(TextPredicate(criteria.query))

    if not predicates:
        return MatchAll()
    if len(predicates) == 1:
        return predicates[0]
    return AllOf(tuple(predicates))


def filter_items(items: Iterable[Item], criteria: SearchCriteria) -> Iterator[Item]:
    """Lazily yield the items matching ``criteria``, preserving source order."""
    predicate = build_predicate(criteria)
    return (item for item in items if predicate.matches(item))
