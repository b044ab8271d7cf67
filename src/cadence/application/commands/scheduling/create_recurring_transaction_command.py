"""Create a recurring template together with its first occurrence."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from cadence.application.dtos.scheduling import RecurringSeriesResult
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
from cadence.domain.scheduling.services import OccurrencePlanner
from cadence.domain.scheduling.value_objects import RecurrenceRule, TransactionType
from cadence.domain.shared.exceptions import ValidationError
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class CreateRecurringTransactionCommand:
    """
    Create a template and materialize its first occurrence.

    The first occurrence follows the same rules as the materializer: due
    automatic rows are executed, due manual rows and future rows stay pending
    with a reminder. Later occurrences are left to the materializer.
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
    def from_factory(
        cls,
        factory: SchedulingContext,
    ) -> CreateRecurringTransactionCommand:
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
        rule: RecurrenceRule,
        start_date: Optional[date] = None,
        is_automatic: bool = False,
        category_id: Optional[UUID] = None,
        destination_account_id: Optional[UUID] = None,
        recurrence_end_date: Optional[date] = None,
        include_start_day_in_count: bool = False,
        currency: Optional[str] = None,
        notes: str = "",
        is_negative_adjustment: bool = False,
        today: Optional[date] = None,
    ) -> RecurringSeriesResult:
        """
        Create the series.

        Parameters
        ----------
        rule
            Validated recurrence rule
        start_date
            Anchor of the series (defaults to today)
        recurrence_end_date
            Last day an occurrence may fall on
        include_start_day_in_count
            When True the start date itself is not an occurrence and the
            first one falls a full step later
        is_negative_adjustment
            Adjustments only: every occurrence lowers the balance
        today
            Reference date for deciding whether the first occurrence is due

        Returns
        -------
        RecurringSeriesResult with the template and its first instance (None
        when the first occurrence falls after the end date)
        """
        today = today or today_utc()
        start_date = start_date or today

        if recurrence_end_date is not None and recurrence_end_date < start_date:
            msg = (
                f"Recurrence end date {recurrence_end_date} is before "
                f"the start date {start_date}"
            )
            raise ValidationError(msg)

        if currency is None:
            account = await self._account_repo.find_by_id(account_id)
            currency = account.currency if account else self._default_currency

        template = Transaction.template(
            transaction_type=transaction_type,
            amount=amount,
            account_id=account_id,
            recurrence_rule=rule,
            start_date=start_date,
            is_automatic=is_automatic,
            category_id=category_id,
            destination_account_id=destination_account_id,
            recurrence_end_date=recurrence_end_date,
            include_start_day_in_count=include_start_day_in_count,
            currency=currency,
            notes=notes,
            is_negative_adjustment=is_negative_adjustment,
        )
        await self._references.ensure_references(template)
        await self._transaction_repo.add(template)

        first_instance = None
        first_date = OccurrencePlanner.first_candidate(template, None)
        if first_date is not None and not template.is_past_end(first_date):
            first_instance = template.spawn_instance(first_date)
            if first_instance.is_due(today) and first_instance.is_automatic:
                first_instance.execute()
            await self._transaction_repo.add(first_instance)

        await self._ledger.commit()

        if first_instance is not None:
            if first_instance.is_scheduled:
                await self._notifications.schedule(
                    first_instance.id,
                    first_instance.scheduled_date,
                )
            else:
                await self._ledger.recompute(first_instance.affected_account_ids)

        logger.info(
            "Created recurring series %s (%s), first occurrence %s",
            template.id,
            rule,
            first_date,
        )
        return RecurringSeriesResult(template=template, first_instance=first_instance)
