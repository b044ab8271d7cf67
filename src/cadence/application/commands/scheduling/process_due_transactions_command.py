"""Execute automatic scheduled transactions that have come due."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional

from cadence.application.dtos.scheduling import DueProcessingResult
from cadence.application.ports import AccountBalanceRecomputer, NotificationScheduler
from cadence.application.services.ledger_sync_service import LedgerSyncService
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.repositories import TransactionRepository
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class ProcessDueTransactionsCommand:
    """Sweep pending rows whose scheduled date has arrived.

    Automatic rows are executed on their scheduled date, so a missed row is
    booked on the day it was due. Manual rows are left pending and only
    counted; they wait in the confirmation queue.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        balance_recomputer: AccountBalanceRecomputer,
        notification_scheduler: NotificationScheduler,
    ):
        self._transaction_repo = transaction_repository
        self._notifications = notification_scheduler
        self._ledger = LedgerSyncService(transaction_repository, balance_recomputer)

    @classmethod
    def from_factory(
        cls,
        factory: SchedulingContext,
    ) -> ProcessDueTransactionsCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            balance_recomputer=factory.balance_recomputer(),
            notification_scheduler=factory.notification_scheduler(),
        )

    async def execute(self, today: Optional[date] = None) -> DueProcessingResult:
        today = today or today_utc()
        due = await self._transaction_repo.query(lambda t: t.is_due(today))
        due.sort(key=lambda t: (t.scheduled_date, t.created_at))

        executed: List[Transaction] = []
        awaiting = 0
        for transaction in due:
            if not transaction.is_automatic:
                awaiting += 1
                continue
            transaction.execute()
            await self._transaction_repo.add(transaction)
            executed.append(transaction)

        if executed:
            await self._ledger.commit_and_recompute(
                account_id
                for transaction in executed
                for account_id in transaction.affected_account_ids
            )
            for transaction in executed:
                await self._notifications.cancel(transaction.id)

        if executed or awaiting:
            logger.info(
                "Due sweep for %s: %d executed, %d awaiting confirmation",
                today,
                len(executed),
                awaiting,
            )

        return DueProcessingResult(
            automatic_executed=len(executed),
            awaiting_confirmation=awaiting,
            executed_ids=tuple(t.id for t in executed),
        )
