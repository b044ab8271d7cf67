"""Detected recurring pattern value objects."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Tuple
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from cadence.domain.scheduling.value_objects.recurrence_rule import RecurrenceRule
from cadence.domain.scheduling.value_objects.transaction_type import TransactionType


class PatternKey(BaseModel):
    """Grouping key two transactions must share to belong to one pattern."""

    model_config = ConfigDict(frozen=True)

    account_id: UUID
    category_id: UUID
    transaction_type: TransactionType
    currency: str
    amount_bucket: Decimal

    def __str__(self) -> str:
        return (
            f"{self.account_id}/{self.category_id}/"
            f"{self.transaction_type.value}/{self.amount_bucket} {self.currency}"
        )


class DetectedRecurringPattern(BaseModel):
    """A cluster of similar standalone transactions suggesting a recurrence.

    Computed fresh on every detection pass and never mutated. It only turns
    into persistent state when the user confirms it.
    """

    model_config = ConfigDict(frozen=True)

    key: PatternKey
    occurrences: int = Field(ge=1)
    average_amount: Decimal
    last_date: date
    matched_dates: Tuple[date, ...]
    transaction_ids: Tuple[UUID, ...]
    suggested_rule: RecurrenceRule
    notes: Optional[str] = None

    @property
    def account_id(self) -> UUID:
        return self.key.account_id

    @property
    def category_id(self) -> UUID:
        return self.key.category_id

    @property
    def transaction_type(self) -> TransactionType:
        return self.key.transaction_type

    @property
    def currency(self) -> str:
        return self.key.currency
