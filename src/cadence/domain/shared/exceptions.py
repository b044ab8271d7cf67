"""Error codes and the exception categories every engine error belongs to.

Hosts catch ``DomainException`` to handle any engine failure and switch on
``code`` for the specific case.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable codes a host can switch on; values never change."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_RULE = "INVALID_RULE"
    INVALID_TRANSFER = "INVALID_TRANSFER"

    # Not Found Errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    ORPHANED_REFERENCE = "ORPHANED_REFERENCE"

    # Business Rule Violations
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    INVALID_TRANSACTION_STATE = "INVALID_TRANSACTION_STATE"
    TRANSACTION_ALREADY_EXECUTED = "TRANSACTION_ALREADY_EXECUTED"
    CALENDAR_ARITHMETIC_EXHAUSTED = "CALENDAR_ARITHMETIC_EXHAUSTED"
    PATTERN_CONFIRMATION_FAILED = "PATTERN_CONFIRMATION_FAILED"

    # Persistence Errors
    STORE_ERROR = "STORE_ERROR"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base of every error the engine raises on purpose.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Identifiers and values that explain the failure, for logs
    """

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serializable form for hosts that report engine errors."""
        return {
            "error": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Input the engine refuses to store: amounts, rules, transfers."""

    default_code = ErrorCode.VALIDATION_ERROR


class BusinessRuleViolation(DomainException):
    """A valid request that the current ledger state does not allow."""

    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND

