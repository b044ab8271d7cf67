"""DTO for a delete operation."""

from dataclasses import dataclass
from typing import Optional, Tuple
from uuid import UUID

from cadence.domain.scheduling.value_objects import DeletionScope


@dataclass(frozen=True)
class DeletionResult:
    """What a delete actually removed and which balances it touched."""

    scope: DeletionScope
    deleted_ids: Tuple[UUID, ...] = ()
    recomputed_account_ids: Tuple[UUID, ...] = ()
    capped_template_id: Optional[UUID] = None

    @classmethod
    def nothing(cls, scope: DeletionScope) -> "DeletionResult":
        return cls(scope=scope)

    @property
    def deleted_count(self) -> int:
        return len(self.deleted_ids)

    def to_dict(self) -> dict:
        return {
            "scope": self.scope.value,
            "deleted_ids": [str(i) for i in self.deleted_ids],
            "recomputed_account_ids": [str(i) for i in self.recomputed_account_ids],
            "capped_template_id": (
                str(self.capped_template_id) if self.capped_template_id else None
            ),
        }
