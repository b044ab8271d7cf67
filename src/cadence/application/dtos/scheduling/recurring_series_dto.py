"""DTO for a newly created recurring series."""

from dataclasses import dataclass
from typing import Optional

from cadence.domain.scheduling.aggregates import Transaction


@dataclass(frozen=True)
class RecurringSeriesResult:
    """A template together with the first occurrence created alongside it."""

    template: Transaction
    first_instance: Optional[Transaction] = None
