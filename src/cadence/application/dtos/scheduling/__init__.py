"""Scheduling DTOs."""

from cadence.application.dtos.scheduling.deletion_result_dto import DeletionResult
from cadence.application.dtos.scheduling.due_processing_result_dto import (
    DueProcessingResult,
)
from cadence.application.dtos.scheduling.materialization_result_dto import (
    MaterializationResult,
)
from cadence.application.dtos.scheduling.occurrence_report_dto import (
    OccurrenceReportLine,
    RecurringOccurrenceReport,
)
from cadence.application.dtos.scheduling.recurring_series_dto import (
    RecurringSeriesResult,
)

__all__ = [
    "DeletionResult",
    "DueProcessingResult",
    "MaterializationResult",
    "OccurrenceReportLine",
    "RecurringOccurrenceReport",
    "RecurringSeriesResult",
]
