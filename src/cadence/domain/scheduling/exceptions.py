"""Scheduling domain exceptions."""

from typing import Any
from uuid import UUID

from cadence.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidRuleError(ValidationError):
    """Raised when a recurrence rule has a bad interval or unit.

    Rejected at template creation time so the evaluator never sees it.
    """

    def __init__(self, reason: str, interval: Any = None, unit: Any = None) -> None:
        super().__init__(
            message=f"Invalid recurrence rule: {reason}",
            code=ErrorCode.INVALID_RULE,
            details={
                "interval": interval,
                "unit": str(unit) if unit is not None else None,
            },
        )


class CalendarArithmeticExhausted(BusinessRuleViolation):  # NOQA: N818
    """Raised when no next occurrence can be computed for a rule.

    Treated as "the series ends here" by every caller.
    """

    def __init__(self, from_date: Any, rule: str) -> None:
        super().__init__(
            message=f"Cannot compute the occurrence after {from_date} for {rule}",
            code=ErrorCode.CALENDAR_ARITHMETIC_EXHAUSTED,
            details={"from_date": str(from_date), "rule": rule},
        )


class OrphanedReferenceError(EntityNotFoundError):
    """Raised when a transaction points at an account or category that vanished."""

    def __init__(
        self,
        transaction_id: str | UUID,
        reference: str,
        reference_id: str | UUID | None,
    ) -> None:
        super().__init__(
            message=(
                f"Transaction '{transaction_id}' references missing "
                f"{reference} '{reference_id}'"
            ),
            code=ErrorCode.ORPHANED_REFERENCE,
            details={
                "transaction_id": str(transaction_id),
                "reference": reference,
                "reference_id": str(reference_id) if reference_id else None,
            },
        )


class StoreError(DomainException):
    """Raised by the transaction store when persisting changes fails."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"Store operation failed: {reason}",
            code=ErrorCode.STORE_ERROR,
            details=details,
        )


class TransactionNotFoundError(EntityNotFoundError):
    """Raised when a transaction cannot be found."""

    def __init__(self, transaction_id: str | UUID) -> None:
        super().__init__(
            message=f"Transaction '{transaction_id}' not found",
            code=ErrorCode.TRANSACTION_NOT_FOUND,
            details={"transaction_id": str(transaction_id)},
        )


class InvalidTransactionStateError(BusinessRuleViolation):
    """Raised when an operation is not legal for the transaction's kind or status."""

    def __init__(self, transaction_id: str | UUID | None, reason: str) -> None:
        super().__init__(
            message=f"Invalid transaction state: {reason}",
            code=ErrorCode.INVALID_TRANSACTION_STATE,
            details={
                "transaction_id": str(transaction_id) if transaction_id else None,
                "reason": reason,
            },
        )


class TransactionAlreadyExecutedError(BusinessRuleViolation):
    """Raised when confirming or executing a transaction twice."""

    def __init__(self, transaction_id: str | UUID | None = None) -> None:
        super().__init__(
            message="Transaction has already been executed",
            code=ErrorCode.TRANSACTION_ALREADY_EXECUTED,
            details={"transaction_id": str(transaction_id)} if transaction_id else None,
        )


class NegativeAmountError(ValidationError):
    """Raised when a negative amount is provided; the sign lives in the type."""

    def __init__(self, amount: Any) -> None:
        super().__init__(
            message=f"Amount must not be negative, got {amount}",
            code=ErrorCode.INVALID_AMOUNT,
            details={"amount": str(amount)},
        )


class InvalidTransferError(ValidationError):
    """Raised when transfer and destination account fields disagree."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Invalid transfer: {reason}",
            code=ErrorCode.INVALID_TRANSFER,
            details={"reason": reason},
        )


class PatternConfirmationError(BusinessRuleViolation):
    """Raised when a detected pattern cannot be turned into a template."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Cannot confirm recurring pattern: {reason}",
            code=ErrorCode.PATTERN_CONFIRMATION_FAILED,
            details={"reason": reason},
        )
