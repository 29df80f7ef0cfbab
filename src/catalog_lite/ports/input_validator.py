from __future__ import annotations

from abc import ABC, abstractmethod


class InputValidator(ABC):
    """
    Port for the validation boundary.

    Every value that reaches the catalog from outside passes through one of
    these methods first. Implementations are pure (no I/O) and signal bad
    input by raising ValidationError, never by returning a sentinel.
    """

    @abstractmethod
    def validate_item_id(self, item_id: str | None) -> str:
        """Return the trimmed item ID, or raise ValidationError."""
        ...

    @abstractmethod
    def validate_search_query(self, query: str | None) -> str | None:
        """Return the sanitized query, None when blank, or raise ValidationError."""
        ...

    @abstractmethod
    def validate_category(self, category_id: str | None) -> str | None:
        """Return the trimmed category ID, None when blank, or raise ValidationError."""
        ...

    @abstractmethod
    def validate_pagination(self, page: int, size: int) -> None:
        """Raise ValidationError if page or size is out of range."""
        ...
