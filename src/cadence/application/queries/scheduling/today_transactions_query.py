"""What happened (or is due) on a given day."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List, Optional

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.repositories import TransactionRepository
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext


class TodayTransactionsQuery:
    """Rows dated on a day. Templates never show up here."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: SchedulingContext) -> TodayTransactionsQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(self, day: Optional[date] = None) -> List[Transaction]:
        day = day or today_utc()
        rows = await self._transaction_repo.query(lambda t: t.happened_on(day))
        return sorted(rows, key=lambda t: t.created_at)
