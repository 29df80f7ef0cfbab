from __future__ import annotations

import re

from catalog_lite.domain.errors import ValidationError
from catalog_lite.domain.item import MAX_PAGE_SIZE
from catalog_lite.ports.input_validator import InputValidator

MAX_QUERY_LENGTH = 200
MAX_CATEGORY_LENGTH = 50
MAX_ITEM_ID_LENGTH = 50
MIN_PAGE_SIZE = 1

# Marketplace item IDs, e.g. MLU123456789, MLA987654321
ITEM_ID_PATTERN = re.compile(r"ML[A-Z]{1,3}\d+", re.ASCII)
CATEGORY_PATTERN = re.compile(r"[A-Za-z0-9_-]+", re.ASCII)

# Compared against the lowercased query
SUSPICIOUS_MARKERS = ("<script", "javascript:", "onerror=", "onload=", "<iframe")

# "&" must be replaced first so the other entities are not escaped twice
HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def _invalid(field: str, message: str, code: str) -> ValidationError:
    return ValidationError(
        message,
        errors=[{"field": field, "message": message, "code": code}],
    )


def escape_html(text: str) -> str:
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


class SecurityInputValidator(InputValidator):
    """
    Validation boundary for every externally supplied value.

    - Item IDs must look like a marketplace ID
    - Free-text queries are length-capped, screened for script injection
      markers and HTML-escaped
    - Category IDs are length-capped and restricted to a safe charset
    - Paging is bounded to 0 <= page and 1 <= size <= 100
    """

    def validate_item_id(self, item_id: str | None) -> str:
        if item_id is None or not item_id.strip():
            raise _invalid("item_id", "Item ID cannot be null or empty", "REQUIRED")

        trimmed = item_id.strip()

        if len(trimmed) > MAX_ITEM_ID_LENGTH:
            raise _invalid(
                "item_id",
                f"Item ID exceeds maximum length of {MAX_ITEM_ID_LENGTH} characters",
                "TOO_LONG",
            )

        if not ITEM_ID_PATTERN.fullmatch(trimmed):
            raise _invalid(
                "item_id",
                "Item ID format is invalid. Expected format: ML[A-Z]{1-3}[digits] "
                "(e.g., MLU123456789)",
                "INVALID_FORMAT",
            )

        return trimmed

    def validate_search_query(self, query: str | None) -> str | None:
        if query is None or not query.strip():
            return None

        trimmed = query.strip()

        if len(trimmed) > MAX_QUERY_LENGTH:
            raise _invalid(
                "q",
                f"Search query exceeds maximum length of {MAX_QUERY_LENGTH} characters",
                "TOO_LONG",
            )

        if self._contains_script_markers(trimmed):
            raise _invalid(
                "q",
                "Search query contains invalid characters or patterns",
                "SUSPICIOUS_CONTENT",
            )

        return escape_html(trimmed)

    def validate_category(self, category_id: str | None) -> str | None:
        if category_id is None or not category_id.strip():
            return None

        trimmed = category_id.strip()

        if len(trimmed) > MAX_CATEGORY_LENGTH:
            raise _invalid(
                "category",
                f"Category ID exceeds maximum length of {MAX_CATEGORY_LENGTH} characters",
                "TOO_LONG",
            )

        if not CATEGORY_PATTERN.fullmatch(trimmed):
            raise _invalid(
                "category",
                "Category ID contains invalid characters. "
                "Only alphanumeric, hyphens, and underscores are allowed",
                "INVALID_FORMAT",
            )

        return trimmed

    def validate_pagination(self, page: int, size: int) -> None:
        if page < 0:
            raise _invalid("page", "Page number cannot be negative", "OUT_OF_RANGE")
        if size < MIN_PAGE_SIZE:
            raise _invalid("size", f"Page size must be at least {MIN_PAGE_SIZE}", "OUT_OF_RANGE")
        if size > MAX_PAGE_SIZE:
            raise _invalid("size", f"Page size cannot exceed {MAX_PAGE_SIZE} items", "OUT_OF_RANGE")

    @staticmethod
    def _contains_script_markers(text: str) -> bool:
        lowered = text.lower()
        return any(marker in lowered for marker in SUSPICIOUS_MARKERS)
