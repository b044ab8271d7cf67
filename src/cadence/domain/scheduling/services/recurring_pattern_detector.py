"""Heuristic detection of undeclared recurring transactions."""

from __future__ import annotations

import logging
import statistics
from collections import defaultdict
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.value_objects import (
    DetectedRecurringPattern,
    DetectionPolicy,
    PatternKey,
    RecurrenceRule,
    RecurrenceUnit,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# Median gaps (in days) below which the next-larger unit is not suggested
_WEEK_THRESHOLD = 7
_MONTH_THRESHOLD = 28
_YEAR_THRESHOLD = 365


class RecurringPatternDetector:
    """
    Find clusters of similar standalone transactions.

    Looks back over ``policy.window_days`` days ending yesterday. The current
    day is excluded so a habit is suggested in the morning, before the user
    has recorded today's occurrence. Rows are grouped by account, category,
    type, currency and amount bucket; any group reaching
    ``policy.min_occurrences`` becomes a pattern.

    The detector is read-only and has no side effects.
    """

    def __init__(self, policy: Optional[DetectionPolicy] = None):
        self._policy = policy or DetectionPolicy()

    @property
    def policy(self) -> DetectionPolicy:
        return self._policy

    def window(self, today: date) -> tuple[date, date]:
        """Return the half-open ``[start, end)`` window scanned for ``today``."""
        return today - timedelta(days=self._policy.window_days), today

    def bucket(self, amount: Decimal) -> Decimal:
        """Round ``amount`` to the nearest multiple of the configured bucket."""
        size = self._policy.amount_bucket
        steps = (amount / size).to_integral_value(rounding=ROUND_HALF_UP)
        return (steps * size).quantize(size)

    def is_candidate(self, transaction: Transaction, today: date) -> bool:
        start, end = self.window(today)
        return (
            transaction.is_standalone
            and transaction.is_executed
            and transaction.account_id is not None
            and transaction.category_id is not None
            and start <= transaction.date < end
        )

    def detect(
        self,
        transactions: Iterable[Transaction],
        today: date,
    ) -> List[DetectedRecurringPattern]:
        groups: Dict[PatternKey, List[Transaction]] = defaultdict(list)

        for transaction in transactions:
            if not self.is_candidate(transaction, today):
                continue
            key = PatternKey(
                account_id=transaction.account_id,
                category_id=transaction.category_id,
                transaction_type=transaction.transaction_type,
                currency=transaction.currency,
                amount_bucket=self.bucket(transaction.amount),
            )
            groups[key].append(transaction)

        logger.debug(
            "Pattern scan for %s: %d candidate groups",
            today,
            len(groups),
        )

        patterns = [
            self._build_pattern(key, members)
            for key, members in groups.items()
            if len(members) >= self._policy.min_occurrences
        ]
        # Most occurrences first, most recent first among equals
        patterns.sort(key=lambda p: (p.occurrences, p.last_date), reverse=True)

        if patterns:
            logger.info("Detected %d recurring pattern(s)", len(patterns))
        return patterns

    def _build_pattern(
        self,
        key: PatternKey,
        members: List[Transaction],
    ) -> DetectedRecurringPattern:
        members = sorted(members, key=lambda t: (t.date, t.created_at))
        dates = tuple(t.date for t in members)
        total = sum((t.amount for t in members), Decimal(0))
        average = (total / len(members)).quantize(CENT, rounding=ROUND_HALF_UP)

        return DetectedRecurringPattern(
            key=key,
            occurrences=len(members),
            average_amount=average,
            last_date=dates[-1],
            matched_dates=dates,
            transaction_ids=tuple(t.id for t in members),
            suggested_rule=self.suggest_rule(dates),
            notes=members[-1].notes or None,
        )

    @staticmethod
    def suggest_rule(dates: Sequence[date]) -> RecurrenceRule:
        """Infer a rule from the median gap between distinct matched dates."""
        distinct = sorted(set(dates))
        if len(distinct) < 2:  # NOQA: PLR2004
            return RecurrenceRule(unit=RecurrenceUnit.DAY, interval=1)

        gaps = [(b - a).days for a, b in zip(distinct, distinct[1:])]
        median_gap = statistics.median(gaps)

        if median_gap < _WEEK_THRESHOLD:
            unit = RecurrenceUnit.DAY
        elif median_gap < _MONTH_THRESHOLD:
            unit = RecurrenceUnit.WEEK
        elif median_gap < _YEAR_THRESHOLD:
            unit = RecurrenceUnit.MONTH
        else:
            unit = RecurrenceUnit.YEAR
        return RecurrenceRule(unit=unit, interval=1)
