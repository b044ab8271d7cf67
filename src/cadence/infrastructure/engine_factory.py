"""Build a configured engine from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from cadence.application.services.recurring_transaction_engine import (
    RecurringTransactionEngine,
)
from cadence.domain.scheduling.value_objects import (
    DetectionPolicy,
    MaterializationPolicy,
)
from cadence.infrastructure.in_memory_context import InMemorySchedulingContext
from cadence_config import Settings, get_settings

if TYPE_CHECKING:
    from cadence.application.factories import SchedulingContext


def detection_policy_from_settings(settings: Settings) -> DetectionPolicy:
    return DetectionPolicy(
        window_days=settings.detection_window_days,
        min_occurrences=settings.detection_min_occurrences,
        amount_bucket=settings.detection_amount_bucket,
    )


def materialization_policy_from_settings(settings: Settings) -> MaterializationPolicy:
    return MaterializationPolicy(
        lookahead_days=settings.materialize_lookahead_days,
        max_occurrences_per_run=settings.max_occurrences_per_run,
    )


def create_engine(
    context: Optional[SchedulingContext] = None,
    settings: Optional[Settings] = None,
) -> RecurringTransactionEngine:
    """Create an engine over ``context`` (in-memory when omitted)."""
    settings = settings or get_settings()
    if context is None:
        context = InMemorySchedulingContext(base_currency=settings.default_currency)
    return RecurringTransactionEngine(
        context,
        detection_policy=detection_policy_from_settings(settings),
        materialization_policy=materialization_policy_from_settings(settings),
    )
