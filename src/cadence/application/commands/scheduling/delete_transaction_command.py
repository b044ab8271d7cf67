"""Delete transactions, one occurrence or a whole recurring series at a time."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, List, Optional, Tuple
from uuid import UUID

from cadence.application.dtos.scheduling import DeletionResult
from cadence.application.ports import AccountBalanceRecomputer, NotificationScheduler
from cadence.application.services.ledger_sync_service import LedgerSyncService
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.repositories import TransactionRepository
from cadence.domain.scheduling.value_objects import DeletionScope

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class DeleteTransactionCommand:
    """
    Delete a transaction and reconcile what depended on it.

    The whole set of rows is worked out before anything is touched. Each
    scheduled row has its reminder cancelled before it is deleted; balances
    are recomputed once per distinct account after the commit. If anything
    fails before the commit lands, whether the store or the notification
    scheduler, the store is rolled back, cancelled reminders are restored and
    the error propagates.

    Scopes:

    - THIS_ONLY: the row itself. Deleting an instance leaves the template and
      its siblings alone; the template remembers the date so the occurrence
      is not generated again.
    - THIS_AND_FUTURE: the instance and every later sibling. The template is
      kept and its end date is moved to the day before.
    - ALL_IN_SERIES: the template and every instance, past ones included.

    A template cannot lose only itself without orphaning its instances, so
    any scope on a template deletes the series. Standalone rows ignore the
    scope. Unknown ids are a no-op.
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
    def from_factory(cls, factory: SchedulingContext) -> DeleteTransactionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            balance_recomputer=factory.balance_recomputer(),
            notification_scheduler=factory.notification_scheduler(),
        )

    async def execute(
        self,
        transaction_id: UUID,
        scope: DeletionScope = DeletionScope.THIS_ONLY,
    ) -> DeletionResult:
        target = await self._transaction_repo.find_by_id(transaction_id)
        if target is None:
            logger.debug("Delete of unknown transaction %s ignored", transaction_id)
            return DeletionResult.nothing(scope)

        rows, template_update, scope = await self._plan(target, scope)

        cancelled: List[Transaction] = []
        try:
            for row in rows:
                if row.is_scheduled:
                    await self._notifications.cancel(row.id)
                    cancelled.append(row)
                await self._transaction_repo.delete(row.id)
            if template_update is not None:
                await self._transaction_repo.add(template_update)
            await self._transaction_repo.commit()
        except Exception:
            logger.exception(
                "Deleting %s (%s) failed, rolling back",
                transaction_id,
                scope.value,
            )
            await self._transaction_repo.rollback()
            for row in cancelled:
                await self._notifications.schedule(row.id, row.scheduled_date)
            raise

        recomputed = await self._ledger.recompute(
            account_id for row in rows for account_id in row.affected_account_ids
        )

        logger.info(
            "Deleted %d transaction(s) for %s (%s)",
            len(rows),
            transaction_id,
            scope.value,
        )
        return DeletionResult(
            scope=scope,
            deleted_ids=tuple(row.id for row in rows),
            recomputed_account_ids=recomputed,
            capped_template_id=(
                template_update.id
                if template_update is not None
                and scope == DeletionScope.THIS_AND_FUTURE
                else None
            ),
        )

    async def _plan(
        self,
        target: Transaction,
        scope: DeletionScope,
    ) -> Tuple[List[Transaction], Optional[Transaction], DeletionScope]:
        """Return the rows to delete, the template to save and the scope used."""
        if target.is_standalone:
            return [target], None, DeletionScope.THIS_ONLY

        if target.is_template:
            scope = DeletionScope.ALL_IN_SERIES

        root_id = target.series_root_id
        template = await self._transaction_repo.find_by_id(root_id)
        instances = await self._transaction_repo.find_instances(root_id)

        if scope == DeletionScope.THIS_ONLY:
            if template is not None:
                template.skip_occurrence(target.scheduled_date or target.date)
            return [target], template, scope

        if scope == DeletionScope.THIS_AND_FUTURE:
            cutoff = target.scheduled_date or target.date
            earlier = [i for i in instances if (i.scheduled_date or i.date) < cutoff]
            if earlier:
                later = [i for i in instances if i not in earlier]
                if template is not None:
                    template.end_recurrence(cutoff - timedelta(days=1))
                return later, template, scope
            # Nothing of the series would survive
            scope = DeletionScope.ALL_IN_SERIES

        rows = list(instances)
        if template is not None:
            rows.insert(0, template)
        return rows, None, scope
