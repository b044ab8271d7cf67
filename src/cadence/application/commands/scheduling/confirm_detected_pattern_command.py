"""Turn a detected recurring pattern into a real recurring series."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from cadence.application.commands.scheduling.create_recurring_transaction_command import (  # NOQA: E501
    CreateRecurringTransactionCommand,
)
from cadence.application.dtos.scheduling import RecurringSeriesResult
from cadence.domain.scheduling.exceptions import (
    OrphanedReferenceError,
    PatternConfirmationError,
)
from cadence.domain.scheduling.repositories import TransactionRepository
from cadence.domain.scheduling.value_objects import (
    DetectedRecurringPattern,
    RecurrenceRule,
)
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class ConfirmDetectedPatternCommand:
    """
    Accept a suggestion from the pattern detector.

    The template starts today, uses the pattern's average amount and the
    suggested rule (unless the user picked another one), and gets its first
    occurrence exactly like a template created by hand.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        create_recurring: CreateRecurringTransactionCommand,
    ):
        self._transaction_repo = transaction_repository
        self._create_recurring = create_recurring

    @classmethod
    def from_factory(cls, factory: SchedulingContext) -> ConfirmDetectedPatternCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            create_recurring=CreateRecurringTransactionCommand.from_factory(factory),
        )

    async def execute(
        self,
        pattern: DetectedRecurringPattern,
        rule: Optional[RecurrenceRule] = None,
        is_automatic: bool = False,
        today: Optional[date] = None,
    ) -> RecurringSeriesResult:
        today = today or today_utc()

        existing = await self._transaction_repo.query(
            lambda t: t.is_template
            and t.account_id == pattern.account_id
            and t.category_id == pattern.category_id
            and t.transaction_type == pattern.transaction_type
            and t.amount == pattern.average_amount,
        )
        if existing:
            msg = f"a matching recurring series already exists ({existing[0].id})"
            raise PatternConfirmationError(msg)

        try:
            result = await self._create_recurring.execute(
                transaction_type=pattern.transaction_type,
                amount=pattern.average_amount,
                account_id=pattern.account_id,
                rule=rule or pattern.suggested_rule,
                start_date=today,
                is_automatic=is_automatic,
                category_id=pattern.category_id,
                currency=pattern.currency,
                notes=pattern.notes or "",
                today=today,
            )
        except OrphanedReferenceError as e:
            raise PatternConfirmationError(e.message) from e

        logger.info(
            "Confirmed pattern %s as recurring series %s",
            pattern.key,
            result.template.id,
        )
        return result
