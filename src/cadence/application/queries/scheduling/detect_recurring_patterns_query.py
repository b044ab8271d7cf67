"""Detect recurring behaviour in plain transaction history."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional

from cadence.domain.scheduling.repositories import TransactionRepository
from cadence.domain.scheduling.services import RecurringPatternDetector
from cadence.domain.scheduling.value_objects import (
    DetectedRecurringPattern,
    DetectionPolicy,
)
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class DetectRecurringPatternsQuery:
    """Read-only query suggesting new recurring series.

    Patterns already covered by a template with the same account, category,
    type and amount are not suggested again.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        policy: Optional[DetectionPolicy] = None,
    ):
        self._transaction_repo = transaction_repository
        self._detector = RecurringPatternDetector(policy)

    @classmethod
    def from_factory(
        cls,
        factory: SchedulingContext,
        policy: Optional[DetectionPolicy] = None,
    ) -> DetectRecurringPatternsQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            policy=policy,
        )

    async def execute(
        self,
        today: Optional[date] = None,
    ) -> List[DetectedRecurringPattern]:
        today = today or today_utc()
        transactions = await self._transaction_repo.find_all()
        patterns = self._detector.detect(transactions, today)

        covered = {
            (t.account_id, t.category_id, t.transaction_type, t.amount)
            for t in transactions
            if t.is_template
        }
        suggestions = [
            p
            for p in patterns
            if (p.account_id, p.category_id, p.transaction_type, p.average_amount)
            not in covered
        ]

        if len(suggestions) < len(patterns):
            logger.debug(
                "%d pattern(s) already covered by a recurring series",
                len(patterns) - len(suggestions),
            )
        return suggestions
