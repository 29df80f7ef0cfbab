"""Test suite for GetItemById use case."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from catalog_lite.adapters.security_input_validator import SecurityInputValidator
from catalog_lite.domain.errors import CatalogUnavailableError, NotFoundError, ValidationError
from catalog_lite.domain.item import Category, Item, ItemCondition
from catalog_lite.ports.item_repository import ItemRepository
from catalog_lite.use_cases.get_item_by_id import (
    GetItemById,
    GetItemByIdRequest,
    GetItemByIdResponse,
)


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock ItemRepository."""
    return Mock(spec=ItemRepository)


@pytest.fixture()
def use_case(mock_repository: Mock) -> GetItemById:
    return GetItemById(item_repository=mock_repository, input_validator=SecurityInputValidator())


@pytest.fixture()
def sample_item() -> Item:
    return Item(
        id="MLU123456789",
        title="Laptop Lenovo IdeaPad 3",
        price=Decimal("649.99"),
        stock=12,
        condition=ItemCondition.NEW,
        category=Category(id="MLU1648", name="Computación"),
    )


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_execute_returns_item_when_found(
    use_case: GetItemById, mock_repository: Mock, sample_item: Item
) -> None:
    mock_repository.find_by_id.return_value = sample_item

    result = use_case.execute(GetItemByIdRequest(item_id="MLU123456789"))

    assert isinstance(result, GetItemByIdResponse)
    assert result.item is sample_item


def test_execute_looks_up_trimmed_id(
    use_case: GetItemById, mock_repository: Mock, sample_item: Item
) -> None:
    mock_repository.find_by_id.return_value = sample_item

    use_case.execute(GetItemByIdRequest(item_id="  MLU123456789 "))

    mock_repository.find_by_id.assert_called_once_with("MLU123456789")


# ==============================================================================
# Not Found Error Tests
# ==============================================================================


def test_execute_raises_not_found_for_unknown_id(use_case: GetItemById, mock_repository: Mock) -> None:
    mock_repository.find_by_id.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(GetItemByIdRequest(item_id="MLU999999999"))

    assert exc_info.value.message == "Item with identifier 'MLU999999999' not found"
    assert exc_info.value.context == {"resource": "Item", "identifier": "MLU999999999"}


# ==============================================================================
# Validation Tests
# ==============================================================================


@pytest.mark.parametrize("item_id", [None, "", "   ", "123456789", "MLU-1", "MLU" + "1" * 48])
def test_invalid_id_never_reaches_repository(
    use_case: GetItemById, mock_repository: Mock, item_id: str | None
) -> None:
    with pytest.raises(ValidationError):
        use_case.execute(GetItemByIdRequest(item_id=item_id))

    mock_repository.find_by_id.assert_not_called()


def test_validator_is_consulted_before_lookup(mock_repository: Mock, sample_item: Item) -> None:
    validator = Mock(spec=SecurityInputValidator)
    validator.validate_item_id.return_value = "MLU123456789"
    mock_repository.find_by_id.return_value = sample_item
    use_case = GetItemById(item_repository=mock_repository, input_validator=validator)

    use_case.execute(GetItemByIdRequest(item_id=" raw "))

    validator.validate_item_id.assert_called_once_with(" raw ")
    mock_repository.find_by_id.assert_called_once_with("MLU123456789")


# ==============================================================================
# Catalog Unavailable
# ==============================================================================


def test_catalog_unavailable_propagates(use_case: GetItemById, mock_repository: Mock) -> None:
    mock_repository.find_by_id.side_effect = CatalogUnavailableError("Catalog could not be loaded")

    with pytest.raises(CatalogUnavailableError):
        use_case.execute(GetItemByIdRequest(item_id="MLU123456789"))
