"""Domain services for the scheduling domain."""

from cadence.domain.scheduling.services.account_balance_service import (
    AccountBalanceService,
)
from cadence.domain.scheduling.services.occurrence_planner import OccurrencePlanner
from cadence.domain.scheduling.services.recurring_pattern_detector import (
    RecurringPatternDetector,
)

__all__ = [
    "AccountBalanceService",
    "OccurrencePlanner",
    "RecurringPatternDetector",
]
