"""Create a one-off transaction, optionally scheduled for a later date."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from cadence.application.ports import AccountBalanceRecomputer, NotificationScheduler
from cadence.application.services.ledger_sync_service import LedgerSyncService
from cadence.application.services.reference_check_service import (
    ReferenceCheckService,
)
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.repositories import (
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)
from cadence.domain.scheduling.value_objects import TransactionType
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class CreateTransactionCommand:
    """
    Create a standalone transaction.

    A row dated in the future becomes a scheduled transaction: it stays
    pending, gets a reminder and is executed by the due sweep (automatic) or
    by the user (manual). Anything else is booked immediately.
    """

    def __init__(  # NOQA: PLR0913
        self,
        transaction_repository: TransactionRepository,
        account_repository: AccountRepository,
        category_repository: CategoryRepository,
        balance_recomputer: AccountBalanceRecomputer,
        notification_scheduler: NotificationScheduler,
        default_currency: str = "EUR",
    ):
        self._transaction_repo = transaction_repository
        self._account_repo = account_repository
        self._default_currency = default_currency
        self._notifications = notification_scheduler
        self._references = ReferenceCheckService(
            account_repository,
            category_repository,
        )
        self._ledger = LedgerSyncService(transaction_repository, balance_recomputer)

    @classmethod
    def from_factory(cls, factory: SchedulingContext) -> CreateTransactionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            account_repository=factory.account_repository(),
            category_repository=factory.category_repository(),
            balance_recomputer=factory.balance_recomputer(),
            notification_scheduler=factory.notification_scheduler(),
            default_currency=factory.default_currency(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        account_id: UUID,
        on: Optional[date] = None,
        category_id: Optional[UUID] = None,
        destination_account_id: Optional[UUID] = None,
        currency: Optional[str] = None,
        notes: str = "",
        is_automatic: bool = False,
        is_negative_adjustment: bool = False,
        today: Optional[date] = None,
    ) -> Transaction:
        today = today or today_utc()
        on = on or today
        currency = currency or await self._account_currency(account_id)

        if on > today:
            transaction = Transaction.scheduled(
                transaction_type=transaction_type,
                amount=amount,
                account_id=account_id,
                scheduled_date=on,
                is_automatic=is_automatic,
                category_id=category_id,
                destination_account_id=destination_account_id,
                currency=currency,
                notes=notes,
                is_negative_adjustment=is_negative_adjustment,
            )
        else:
            transaction = Transaction.standalone(
                transaction_type=transaction_type,
                amount=amount,
                account_id=account_id,
                date=on,
                category_id=category_id,
                destination_account_id=destination_account_id,
                currency=currency,
                notes=notes,
                is_negative_adjustment=is_negative_adjustment,
            )

        await self._references.ensure_references(transaction)
        await self._transaction_repo.add(transaction)

        if transaction.is_scheduled:
            await self._ledger.commit()
            await self._notifications.schedule(transaction.id, on)
            logger.info("Scheduled %s for %s", transaction.id, on)
        else:
            await self._ledger.commit_and_recompute(transaction.affected_account_ids)
            logger.info("Created %s", transaction)

        return transaction

    async def _account_currency(self, account_id: UUID) -> str:
        account = await self._account_repo.find_by_id(account_id)
        return account.currency if account else self._default_currency
