"""Domain error classes.

Protocol-agnostic errors raised by the snowball engine.
Callers translate them into whatever response format they expose.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus structured context that callers
    can translate into their own error format.
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
    """Business rule validation error.

    Used for invalid inputs and domain invariant violations.

    Examples:
        - Malformed money amounts
        - Negative debt balances
        - Unknown frequencies
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
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "balance", "message": "Must be >= 0"}]
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


class ConflictError(DomainError):
    """Operation conflicts with the current state of a resource.

    Examples:
        - Recording a payment against a debt that is already paid
    """

    error_code: str = "CONFLICT"


class InvalidAmount(ValidationError):
    """Money input is malformed, non-finite or of an unsupported type."""

    error_code: str = "INVALID_AMOUNT"


class DivisionByZero(DomainError):
    """Money division with a zero divisor."""

    error_code: str = "DIVISION_BY_ZERO"


class NegativeDuration(ValidationError):
    """A projection helper was given a negative number of months."""

    error_code: str = "NEGATIVE_DURATION"


class InvalidFrequency(ValidationError):
    error_code: str = "INVALID_FREQUENCY"


class InvalidDebt(ValidationError):
    error_code: str = "INVALID_DEBT"


class DebtAlreadyPaid(ConflictError):
    """A payment was recorded against a debt whose status is already paid."""

    error_code: str = "DEBT_ALREADY_PAID"

    def __init__(self, debt_id: str, **context: Any) -> None:
        super().__init__(
            "Cannot record payment on a debt that is already paid off",
            debt_id=debt_id,
            **context,
        )


class PaymentExceedsBalance(ValidationError):
    error_code: str = "PAYMENT_EXCEEDS_BALANCE"
