"""Scheduling queries - read-only views over the ledger."""

from cadence.application.queries.scheduling.detect_recurring_patterns_query import (
    DetectRecurringPatternsQuery,
)
from cadence.application.queries.scheduling.list_awaiting_confirmation_query import (
    ListAwaitingConfirmationQuery,
)
from cadence.application.queries.scheduling.recurring_occurrence_report_query import (
    RecurringOccurrenceReportQuery,
    ReportPeriod,
)
from cadence.application.queries.scheduling.today_transactions_query import (
    TodayTransactionsQuery,
)

__all__ = [
    "DetectRecurringPatternsQuery",
    "ListAwaitingConfirmationQuery",
    "RecurringOccurrenceReportQuery",
    "ReportPeriod",
    "TodayTransactionsQuery",
]
