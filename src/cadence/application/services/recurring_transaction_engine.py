"""Single entry point that serializes every ledger mutation."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, AsyncIterator, List, Optional
from uuid import UUID

from cadence.application.commands.scheduling import (
    ConfirmDetectedPatternCommand,
    ConfirmScheduledTransactionCommand,
    CreateRecurringTransactionCommand,
    CreateTransactionCommand,
    DeleteTransactionCommand,
    MaterializeRecurringTransactionsCommand,
    ProcessDueTransactionsCommand,
)
from cadence.application.dtos.scheduling import (
    DeletionResult,
    DueProcessingResult,
    MaterializationResult,
    RecurringOccurrenceReport,
    RecurringSeriesResult,
)
from cadence.application.queries.scheduling import (
    DetectRecurringPatternsQuery,
    ListAwaitingConfirmationQuery,
    RecurringOccurrenceReportQuery,
    ReportPeriod,
    TodayTransactionsQuery,
)
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.value_objects import (
    DeletionScope,
    DetectedRecurringPattern,
    DetectionPolicy,
    MaterializationPolicy,
    RecurrenceRule,
    TransactionType,
)
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """Outcome of one scheduler tick."""

    materialization: MaterializationResult
    due: DueProcessingResult


class RecurringTransactionEngine:
    """
    Facade over the scheduling commands and queries.

    There is a single logical writer: every mutation runs under one
    ``asyncio.Lock``, so a materialization pass can never interleave with a
    delete of the series it is walking. A mutation that raises leaves nothing
    staged: the store is rolled back before the error propagates. Reads take
    no lock; pattern detection works on a snapshot of the store.
    """

    def __init__(
        self,
        context: SchedulingContext,
        detection_policy: Optional[DetectionPolicy] = None,
        materialization_policy: Optional[MaterializationPolicy] = None,
    ):
        self._context = context
        self._detection_policy = detection_policy or DetectionPolicy()
        self._materialization_policy = (
            materialization_policy or MaterializationPolicy()
        )
        self._lock = asyncio.Lock()

    @property
    def detection_policy(self) -> DetectionPolicy:
        return self._detection_policy

    @property
    def materialization_policy(self) -> MaterializationPolicy:
        return self._materialization_policy

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _writing(self) -> AsyncIterator[None]:
        async with self._lock:
            try:
                yield
            except Exception:
                await self._context.transaction_repository().rollback()
                raise

    async def tick(self, today: Optional[date] = None) -> TickResult:
        """Materialize new occurrences, then execute whatever became due."""
        today = today or today_utc()
        async with self._writing():
            materialize = MaterializeRecurringTransactionsCommand.from_factory(
                self._context,
                policy=self._materialization_policy,
            )
            materialization = await materialize.execute(today)
            due = await ProcessDueTransactionsCommand.from_factory(
                self._context,
            ).execute(today)
        return TickResult(materialization=materialization, due=due)

    async def materialize(self, today: Optional[date] = None) -> MaterializationResult:
        async with self._writing():
            return await MaterializeRecurringTransactionsCommand.from_factory(
                self._context,
                policy=self._materialization_policy,
            ).execute(today)

    async def process_due(self, today: Optional[date] = None) -> DueProcessingResult:
        async with self._writing():
            return await ProcessDueTransactionsCommand.from_factory(
                self._context,
            ).execute(today)

    async def create_transaction(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        account_id: UUID,
        **kwargs: Any,
    ) -> Transaction:
        async with self._writing():
            return await CreateTransactionCommand.from_factory(self._context).execute(
                transaction_type,
                amount,
                account_id,
                **kwargs,
            )

    async def create_recurring(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        account_id: UUID,
        rule: RecurrenceRule,
        **kwargs: Any,
    ) -> RecurringSeriesResult:
        async with self._writing():
            command = CreateRecurringTransactionCommand.from_factory(self._context)
            return await command.execute(
                transaction_type,
                amount,
                account_id,
                rule,
                **kwargs,
            )

    async def confirm(self, transaction_id: UUID) -> Transaction:
        async with self._writing():
            command = ConfirmScheduledTransactionCommand.from_factory(self._context)
            return await command.execute(transaction_id)

    async def delete(
        self,
        transaction_id: UUID,
        scope: DeletionScope = DeletionScope.THIS_ONLY,
    ) -> DeletionResult:
        async with self._writing():
            return await DeleteTransactionCommand.from_factory(self._context).execute(
                transaction_id,
                scope,
            )

    async def cancel_pending(self, transaction_id: UUID) -> DeletionResult:
        """Drop one pending occurrence from the confirmation queue."""
        return await self.delete(transaction_id, DeletionScope.THIS_ONLY)

    async def confirm_pattern(
        self,
        pattern: DetectedRecurringPattern,
        rule: Optional[RecurrenceRule] = None,
        is_automatic: bool = False,
        today: Optional[date] = None,
    ) -> RecurringSeriesResult:
        async with self._writing():
            command = ConfirmDetectedPatternCommand.from_factory(self._context)
            return await command.execute(
                pattern,
                rule=rule,
                is_automatic=is_automatic,
                today=today,
            )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def detect_patterns(
        self,
        today: Optional[date] = None,
    ) -> List[DetectedRecurringPattern]:
        return await DetectRecurringPatternsQuery.from_factory(
            self._context,
            policy=self._detection_policy,
        ).execute(today)

    async def awaiting_confirmation(
        self,
        today: Optional[date] = None,
    ) -> List[Transaction]:
        return await ListAwaitingConfirmationQuery.from_factory(
            self._context,
        ).execute(today)

    async def transactions_on(self, day: Optional[date] = None) -> List[Transaction]:
        return await TodayTransactionsQuery.from_factory(self._context).execute(day)

    async def occurrence_report(
        self,
        currency: str,
        period: ReportPeriod = ReportPeriod.MONTH,
        reference_date: Optional[date] = None,
    ) -> RecurringOccurrenceReport:
        return await RecurringOccurrenceReportQuery.from_factory(
            self._context,
        ).execute(currency, period, reference_date)
