"""DTOs for the recurring occurrence report."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List
from uuid import UUID

from cadence.domain.scheduling.value_objects import TransactionType


@dataclass(frozen=True)
class OccurrenceReportLine:
    """One template's contribution to the report period."""

    template_id: UUID
    transaction_type: TransactionType
    rule_display: str
    occurrences: int
    amount: Decimal
    currency: str
    converted_total: Decimal

    def to_dict(self) -> dict:
        return {
            "template_id": str(self.template_id),
            "transaction_type": self.transaction_type.value,
            "rule": self.rule_display,
            "occurrences": self.occurrences,
            "amount": str(self.amount),
            "currency": self.currency,
            "converted_total": str(self.converted_total),
        }


@dataclass(frozen=True)
class RecurringOccurrenceReport:
    """Expected recurring income and expenses for a period."""

    period_start: date
    period_end: date
    currency: str
    lines: List[OccurrenceReportLine] = field(default_factory=list)

    @property
    def total_income(self) -> Decimal:
        return sum(
            (
                line.converted_total
                for line in self.lines
                if line.transaction_type == TransactionType.INCOME
            ),
            Decimal(0),
        )

    @property
    def total_expenses(self) -> Decimal:
        return sum(
            (
                line.converted_total
                for line in self.lines
                if line.transaction_type == TransactionType.EXPENSE
            ),
            Decimal(0),
        )

    @property
    def net(self) -> Decimal:
        return self.total_income - self.total_expenses

    def to_dict(self) -> dict:
        return {
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "currency": self.currency,
            "total_income": str(self.total_income),
            "total_expenses": str(self.total_expenses),
            "net": str(self.net),
            "lines": [line.to_dict() for line in self.lines],
        }
