"""List scheduled transactions waiting for the user."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List, Optional

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.repositories import TransactionRepository
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext


class ListAwaitingConfirmationQuery:
    """Due manual rows, oldest first (the "to confirm" queue)."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: SchedulingContext) -> ListAwaitingConfirmationQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(self, today: Optional[date] = None) -> List[Transaction]:
        today = today or today_utc()
        rows = await self._transaction_repo.query(
            lambda t: t.is_due(today) and not t.is_automatic,
        )
        return sorted(rows, key=lambda t: (t.scheduled_date, t.created_at))

    async def count(self, today: Optional[date] = None) -> int:
        return len(await self.execute(today))
