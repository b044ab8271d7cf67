"""DTO for a materialization run."""

from dataclasses import dataclass, field
from typing import List
from uuid import UUID


@dataclass
class MaterializationResult:
    """Outcome of one pass of the occurrence materializer."""

    executed_ids: List[UUID] = field(default_factory=list)
    pending_ids: List[UUID] = field(default_factory=list)
    skipped_template_ids: List[UUID] = field(default_factory=list)
    recomputed_account_ids: List[UUID] = field(default_factory=list)
    limit_reached: bool = False

    @property
    def created_count(self) -> int:
        return len(self.executed_ids) + len(self.pending_ids)

    def to_dict(self) -> dict:
        return {
            "executed_ids": [str(i) for i in self.executed_ids],
            "pending_ids": [str(i) for i in self.pending_ids],
            "skipped_template_ids": [str(i) for i in self.skipped_template_ids],
            "recomputed_account_ids": [str(i) for i in self.recomputed_account_ids],
            "limit_reached": self.limit_reached,
        }
