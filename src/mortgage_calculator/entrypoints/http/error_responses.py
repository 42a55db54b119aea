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
                "field": "annual_income",
                "message": "annual_income must be greater than 0",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)

    Examples:
        Domain error:
            {
                "detail": "loan_term_months must be <= 1200 (got 1500)",
                "code": "TERM_TOO_LARGE"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "annual_income",
                        "message": "annual_income is required",
                        "code": "MISSING"
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
                {
                    "detail": "loan_term_months must be <= 1200 (got 1500)",
                    "code": "TERM_TOO_LARGE",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "annual_income",
                            "message": "annual_income is required",
                            "code": "MISSING",
                        },
                        {
                            "field": "hoa_monthly",
                            "message": "hoa_monthly must be a valid number: 'abc'",
                            "code": "NOT_A_NUMBER",
                        },
                    ],
                },
            ]
        }
    )
