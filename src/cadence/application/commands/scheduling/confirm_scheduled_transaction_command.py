"""Confirm a pending transaction on behalf of the user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from cadence.application.ports import AccountBalanceRecomputer, NotificationScheduler
from cadence.application.services.ledger_sync_service import LedgerSyncService
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.exceptions import TransactionNotFoundError
from cadence.domain.scheduling.repositories import TransactionRepository

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class ConfirmScheduledTransactionCommand:
    """Execute a pending row the user has confirmed."""

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
    ) -> ConfirmScheduledTransactionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            balance_recomputer=factory.balance_recomputer(),
            notification_scheduler=factory.notification_scheduler(),
        )

    async def execute(self, transaction_id: UUID) -> Transaction:
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if not transaction:
            raise TransactionNotFoundError(transaction_id)

        # Raises for templates and for rows that already executed
        transaction.execute()
        await self._transaction_repo.add(transaction)
        await self._ledger.commit_and_recompute(transaction.affected_account_ids)
        await self._notifications.cancel(transaction.id)

        logger.info("Confirmed %s", transaction)
        return transaction
