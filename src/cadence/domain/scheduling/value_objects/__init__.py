"""Value objects for the scheduling domain."""

from cadence.domain.scheduling.value_objects.detected_pattern import (
    DetectedRecurringPattern,
    PatternKey,
)
from cadence.domain.scheduling.value_objects.engine_policy import (
    DetectionPolicy,
    MaterializationPolicy,
)
from cadence.domain.scheduling.value_objects.recurrence_rule import (
    RecurrenceRule,
    RecurrenceUnit,
    add_months,
)
from cadence.domain.scheduling.value_objects.transaction_status import (
    DeletionScope,
    TransactionKind,
    TransactionStatus,
)
from cadence.domain.scheduling.value_objects.transaction_type import TransactionType

__all__ = [
    "DeletionScope",
    "DetectedRecurringPattern",
    "DetectionPolicy",
    "MaterializationPolicy",
    "PatternKey",
    "RecurrenceRule",
    "RecurrenceUnit",
    "TransactionKind",
    "TransactionStatus",
    "TransactionType",
    "add_months",
]
