"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "page",
                "message": "Page number cannot be negative",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Item with identifier 'MLU999999999' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field detail:
            {
                "detail": "Page size cannot exceed 100 items",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "size",
                        "message": "Page size cannot exceed 100 items",
                        "code": "OUT_OF_RANGE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Item with identifier 'MLU999999999' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Search query contains invalid characters or patterns",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "q",
                            "message": "Search query contains invalid characters or patterns",
                            "code": "SUSPICIOUS_CONTENT",
                        },
                    ],
                },
            ]
        }
    )
