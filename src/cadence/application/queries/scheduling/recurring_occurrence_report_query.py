"""Expected recurring income and expenses for a day, month or year."""

from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from cadence.application.dtos.scheduling import (
    OccurrenceReportLine,
    RecurringOccurrenceReport,
)
from cadence.application.ports import CurrencyConverter
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.repositories import TransactionRepository
from cadence.domain.scheduling.value_objects.recurrence_rule import (
    last_day_of_month,
)
from cadence.domain.shared.time import today_utc

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext

logger = logging.getLogger(__name__)


class ReportPeriod(str, Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    def bounds(self, reference: date) -> Tuple[date, date]:
        """Inclusive first and last day of the period containing ``reference``."""
        if self is ReportPeriod.DAY:
            return reference, reference
        if self is ReportPeriod.MONTH:
            return (
                reference.replace(day=1),
                reference.replace(
                    day=last_day_of_month(reference.year, reference.month),
                ),
            )
        return date(reference.year, 1, 1), date(reference.year, 12, 31)


class RecurringOccurrenceReportQuery:
    """
    Count each template's occurrences in a period and total them.

    Amounts are converted into the report currency through the
    ``CurrencyConverter`` port; the engine itself never does currency maths.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        currency_converter: CurrencyConverter,
    ):
        self._transaction_repo = transaction_repository
        self._converter = currency_converter

    @classmethod
    def from_factory(
        cls,
        factory: SchedulingContext,
    ) -> RecurringOccurrenceReportQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            currency_converter=factory.currency_converter(),
        )

    async def execute(
        self,
        currency: str,
        period: ReportPeriod = ReportPeriod.MONTH,
        reference_date: Optional[date] = None,
    ) -> RecurringOccurrenceReport:
        reference_date = reference_date or today_utc()
        start, end = period.bounds(reference_date)
        currency = currency.upper()

        templates = await self._transaction_repo.find_templates()
        lines = []
        for template in sorted(templates, key=lambda t: t.date):
            occurrences = self.count_occurrences(template, start, end)
            if occurrences == 0:
                continue

            total = template.amount * occurrences
            converted = self._converter.convert(total, template.currency, currency)
            lines.append(
                OccurrenceReportLine(
                    template_id=template.id,
                    transaction_type=template.transaction_type,
                    rule_display=template.recurrence_rule.display_string,
                    occurrences=occurrences,
                    amount=template.amount,
                    currency=template.currency,
                    converted_total=converted,
                ),
            )

        logger.debug(
            "Occurrence report %s..%s: %d template(s) contribute",
            start,
            end,
            len(lines),
        )
        return RecurringOccurrenceReport(
            period_start=start,
            period_end=end,
            currency=currency,
            lines=lines,
        )

    @staticmethod
    def count_occurrences(template: Transaction, start: date, end: date) -> int:
        rule = template.recurrence_rule
        if rule is None:
            return 0

        count = rule.occurrences_between(
            template.date,
            start,
            end,
            include_start_day_in_count=template.include_start_day_in_count,
            end_date=template.recurrence_end_date,
            anchor_day=template.date.day,
        )
        skipped = sum(1 for d in template.skipped_dates if start <= d <= end)
        return max(count - skipped, 0)


