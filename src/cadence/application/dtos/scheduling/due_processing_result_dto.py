"""DTO for the due-transaction sweep."""

from dataclasses import dataclass
from typing import Tuple
from uuid import UUID


@dataclass(frozen=True)
class DueProcessingResult:
    """Counts of due rows that were executed or still wait for the user."""

    automatic_executed: int = 0
    awaiting_confirmation: int = 0
    executed_ids: Tuple[UUID, ...] = ()

    @property
    def has_work_for_user(self) -> bool:
        return self.awaiting_confirmation > 0

    def to_dict(self) -> dict:
        return {
            "automatic_executed": self.automatic_executed,
            "awaiting_confirmation": self.awaiting_confirmation,
            "executed_ids": [str(i) for i in self.executed_ids],
        }
