"""Materialize due occurrences of every recurring template."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING, List, Optional

from cadence.application.dtos.scheduling import MaterializationResult
from cadence.application.ports import AccountBalanceRecomputer, NotificationScheduler
from cadence.application.services.ledger_sync_service import LedgerSyncService
from cadence.application.services.reference_check_service import (
    ReferenceCheckService,
)
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.exceptions import OrphanedReferenceError
from cadence.domain.scheduling.repositories import (
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)
from cadence.domain.scheduling.services import OccurrencePlanner
from cadence.domain.scheduling.value_objects import MaterializationPolicy
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class MaterializeRecurringTransactionsCommand:
    """
    Turn templates into concrete instances up to a horizon.

    For each template the rule is walked forward from the latest existing
    instance (or from the template's own date). Each missing occurrence on or
    before ``today + lookahead_days`` and the series end becomes an instance:

    - due and automatic: executed at once, booked on its scheduled date
    - due and manual: pending, with a reminder, until the user confirms it
    - not yet due: pending, with a reminder

    Running the command twice for the same day creates nothing the second
    time. Templates whose account or category has vanished are logged and
    skipped without stopping the batch.
    """

    def __init__(  # NOQA: PLR0913
        self,
        transaction_repository: TransactionRepository,
        account_repository: AccountRepository,
        category_repository: CategoryRepository,
        balance_recomputer: AccountBalanceRecomputer,
        notification_scheduler: NotificationScheduler,
        policy: Optional[MaterializationPolicy] = None,
    ):
        self._transaction_repo = transaction_repository
        self._notifications = notification_scheduler
        self._policy = policy or MaterializationPolicy()
        self._references = ReferenceCheckService(
            account_repository,
            category_repository,
        )
        self._ledger = LedgerSyncService(transaction_repository, balance_recomputer)

    @classmethod
    def from_factory(
        cls,
        factory: SchedulingContext,
        policy: Optional[MaterializationPolicy] = None,
    ) -> MaterializeRecurringTransactionsCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            account_repository=factory.account_repository(),
            category_repository=factory.category_repository(),
            balance_recomputer=factory.balance_recomputer(),
            notification_scheduler=factory.notification_scheduler(),
            policy=policy,
        )

    async def execute(self, today: Optional[date] = None) -> MaterializationResult:
        today = today or today_utc()
        horizon = today + timedelta(days=self._policy.lookahead_days)
        result = MaterializationResult()
        created: List[Transaction] = []

        templates = await self._transaction_repo.find_templates()
        templates.sort(key=lambda t: (t.date, t.created_at))

        for template in templates:
            remaining = self._policy.max_occurrences_per_run - len(created)
            if remaining <= 0:
                logger.warning(
                    "Materialization stopped after %d occurrences; "
                    "the rest follows on the next run",
                    len(created),
                )
                result.limit_reached = True
                break

            try:
                await self._references.ensure_references(template)
            except OrphanedReferenceError as e:
                logger.warning("Skipping template %s: %s", template.id, e.message)
                result.skipped_template_ids.append(template.id)
                continue

            created.extend(
                await self._materialize_template(template, today, horizon, remaining),
            )

        if not created:
            logger.debug("Nothing to materialize for %s", today)
            return result

        executed = [i for i in created if i.is_executed]
        pending = [i for i in created if not i.is_executed]
        result.executed_ids = [i.id for i in executed]
        result.pending_ids = [i.id for i in pending]

        recomputed = await self._ledger.commit_and_recompute(
            account_id for i in executed for account_id in i.affected_account_ids
        )
        result.recomputed_account_ids = list(recomputed)

        for instance in pending:
            await self._notifications.schedule(instance.id, instance.scheduled_date)

        logger.info(
            "Materialized %d occurrence(s): %d executed, %d pending",
            result.created_count,
            len(result.executed_ids),
            len(result.pending_ids),
        )
        return result

    async def _materialize_template(
        self,
        template: Transaction,
        today: date,
        horizon: date,
        limit: int,
    ) -> List[Transaction]:
        instances = await self._transaction_repo.find_instances(template.id)
        dates = OccurrencePlanner.pending_dates(template, instances, horizon, limit)

        created: List[Transaction] = []
        for scheduled_date in dates:
            # The template may have been deleted while we were walking
            current = await self._transaction_repo.find_by_id(template.id)
            if current is None:
                logger.info(
                    "Template %s disappeared, stopping its materialization",
                    template.id,
                )
                break

            instance = current.spawn_instance(scheduled_date)
            if instance.is_due(today) and instance.is_automatic:
                instance.execute()

            await self._transaction_repo.add(instance)
            created.append(instance)
            logger.debug(
                "Materialized %s of template %s (%s)",
                scheduled_date,
                template.id,
                instance.status.value,
            )

        return created
