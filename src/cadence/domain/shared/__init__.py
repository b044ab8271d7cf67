"""Shared domain components.

This module exports the exception hierarchy and time helpers used across
the engine.
"""

from cadence.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from cadence.domain.shared.time import today_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    # Utilities
    "today_utc",
    "utc_now",
]
