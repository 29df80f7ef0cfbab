from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

from catalog_lite.domain.item import Item, SearchCriteria


class ItemRepository(ABC):
    """
    Port for catalog data access.

    The catalog is read-only: implementations hand out the same ordered,
    immutable item set for the whole process lifetime.

    Contract (Preconditions):
        - criteria and IDs must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def find_all(self) -> Sequence[Item]:
        """Return every item in catalog order."""
        ...

    @abstractmethod
    def find_by_id(self, item_id: str) -> Item | None:
        """Return the item with exactly this ID, or None."""
        ...

    @abstractmethod
    def find_matching(self, criteria: SearchCriteria) -> Iterator[Item]:
        """
        Lazily yield items matching the criteria (AND semantics), in catalog order.

        Precondition: criteria must be validated by caller (UseCase).
        """
        ...
