"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the entrypoint adapters.
"""

from enum import Enum
from typing import Any


class ValidationReason(str, Enum):
    """Machine-readable reason code attached to a field-level validation error."""

    MISSING = "MISSING"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    OUT_OF_RANGE = "OUT_OF_RANGE"


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP (or any other transport) by an adapter.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Caller input has the wrong shape or is out of range.

    Always recoverable by the caller correcting the input. Carries every
    failing field at once so all problems can be reported in one round trip.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "annual_income", "message": "Required", "code": "MISSING"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed, in reporting order."""
        return [error["field"] for error in self.errors or []]

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class TermTooLargeError(DomainError):
    """Requested loan term exceeds the configured sanity bound.

    Prevents pathological schedule sizes.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "TERM_TOO_LARGE"

    def __init__(self, term_months: int, max_term_months: int, **context: Any) -> None:
        message = f"loan_term_months must be <= {max_term_months} (got {term_months})"
        super().__init__(
            message,
            term_months=term_months,
            max_term_months=max_term_months,
            **context,
        )
