"""Query layer - read operations without side effects."""

from cadence.application.queries.scheduling import (
    DetectRecurringPatternsQuery,
    ListAwaitingConfirmationQuery,
    RecurringOccurrenceReportQuery,
    ReportPeriod,
    TodayTransactionsQuery,
)

__all__ = [
    "DetectRecurringPatternsQuery",
    "ListAwaitingConfirmationQuery",
    "RecurringOccurrenceReportQuery",
    "ReportPeriod",
    "TodayTransactionsQuery",
]
