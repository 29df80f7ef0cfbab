"""Tests for REST error response models."""

from catalog_lite.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    """Tests for ErrorDetail model."""

    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(field="size", message="Page size must be at least 1", code="OUT_OF_RANGE")

        assert detail.model_dump() == {
            "field": "size",
            "message": "Page size must be at least 1",
            "code": "OUT_OF_RANGE",
        }

    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="page", message="Input should be a valid integer")

        assert detail.code is None

    def test_example_is_valid(self) -> None:
        """ErrorDetail example matches model schema."""
        example = ErrorDetail.model_json_schema()["example"]

        detail = ErrorDetail.model_validate(example)

        assert detail.field == "page"


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_creates_simple_error_response(self) -> None:
        response = ErrorResponse(detail="Item with identifier 'MLU1' not found", code="NOT_FOUND")

        assert response.code == "NOT_FOUND"
        assert response.errors is None

    def test_serializes_validation_error_to_json(self) -> None:
        errors = [ErrorDetail(field="q", message="Too long", code="TOO_LONG")]
        response = ErrorResponse(detail="Too long", code="VALIDATION_ERROR", errors=errors)

        json_str = response.model_dump_json()

        assert '"code":"VALIDATION_ERROR"' in json_str
        assert '"field":"q"' in json_str

    def test_parses_handler_output(self) -> None:
        """The body produced by the exception handlers parses as ErrorResponse."""
        data = {
            "detail": "Catalog could not be loaded",
            "code": "CATALOG_UNAVAILABLE",
        }

        response = ErrorResponse.model_validate(data)

        assert response.detail == "Catalog could not be loaded"

    def test_examples_are_valid(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert len(schema["examples"]) >= 2
        for example in schema["examples"]:
            assert ErrorResponse.model_validate(example).code is not None
