"""
Unit tests for FastAPI dependency injection functions.

- The catalog store is a process-wide singleton (loaded once)
- The validator is a stateless singleton
- Use cases are built fresh per request around those singletons
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import Mock

import pytest

from catalog_lite.adapters.in_memory_item_repository import InMemoryItemRepository
from catalog_lite.adapters.security_input_validator import SecurityInputValidator
from catalog_lite.entrypoints.http.dependencies import (
    get_get_item_by_id_use_case,
    get_input_validator,
    get_item_repository,
    get_search_items_use_case,
)
from catalog_lite.use_cases.get_item_by_id import GetItemById
from catalog_lite.use_cases.search_items import SearchItems


@pytest.fixture(autouse=True)
def clear_singletons() -> Iterator[None]:
    get_item_repository.cache_clear()
    get_input_validator.cache_clear()
    yield
    get_item_repository.cache_clear()
    get_input_validator.cache_clear()


# ==============================================================================
# Singletons
# ==============================================================================


def test_item_repository_is_cached() -> None:
    assert get_item_repository() is get_item_repository()


def test_item_repository_is_in_memory_store() -> None:
    assert isinstance(get_item_repository(), InMemoryItemRepository)


def test_item_repository_reads_configured_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    data_file = tmp_path / "items.json"
    data_file.write_text('[{"id": "MLU42", "title": "Only item", "price": "1.00"}]', encoding="utf-8")
    monkeypatch.setenv("CATALOG_DATA_FILE", str(data_file))

    repository = get_item_repository()

    assert [item.id for item in repository.find_all()] == ["MLU42"]


def test_item_repository_does_not_load_on_construction(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("CATALOG_DATA_FILE", str(tmp_path / "missing.json"))

    # Building the store must not touch the file; only queries do
    get_item_repository()


def test_input_validator_is_cached() -> None:
    validator = get_input_validator()

    assert isinstance(validator, SecurityInputValidator)
    assert validator is get_input_validator()


# ==============================================================================
# Use Case Factories
# ==============================================================================


def test_get_item_by_id_use_case_wiring() -> None:
    repository = Mock()
    validator = Mock()

    use_case = get_get_item_by_id_use_case(repository=repository, validator=validator)

    assert isinstance(use_case, GetItemById)
    assert use_case._repository is repository
    assert use_case._validator is validator


def test_search_items_use_case_wiring() -> None:
    repository = Mock()
    validator = Mock()

    use_case = get_search_items_use_case(repository=repository, validator=validator)

    assert isinstance(use_case, SearchItems)
    assert use_case._repository is repository
    assert use_case._validator is validator


def test_use_cases_are_fresh_per_call_but_share_the_store() -> None:
    repository = get_item_repository()
    validator = get_input_validator()

    first = get_search_items_use_case(repository=repository, validator=validator)
    second = get_search_items_use_case(repository=repository, validator=validator)

    assert first is not second
    assert first._repository is second._repository


def test_use_case_factories_are_not_cached() -> None:
    # lru_cache adds __wrapped__
    assert not hasattr(get_get_item_by_id_use_case, "__wrapped__")
    assert not hasattr(get_search_items_use_case, "__wrapped__")
    assert hasattr(get_item_repository, "__wrapped__")
