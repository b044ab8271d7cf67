"""In-memory implementation of TransactionRepository."""

from __future__ import annotations

import copy
import logging
from typing import Dict, List, Optional
from uuid import UUID

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.exceptions import StoreError
from cadence.domain.scheduling.repositories import (
    TransactionPredicate,
    TransactionRepository,
)

logger = logging.getLogger(__name__)


class InMemoryTransactionRepository(TransactionRepository):
    """
    Dictionary-backed store with a staging area.

    Rows go in and come out as copies, so a caller mutating a loaded
    transaction changes nothing until it calls ``add`` again. Staged writes
    are visible to reads and become durable on ``commit``.
    """

    def __init__(self, transactions: Optional[List[Transaction]] = None):
        self._committed: Dict[UUID, Transaction] = {
            t.id: copy.deepcopy(t) for t in transactions or []
        }
        # None marks a staged delete
        self._staged: Dict[UUID, Optional[Transaction]] = {}
        self._commit_failure: Optional[str] = None

    async def add(self, transaction: Transaction) -> None:
        self._staged[transaction.id] = copy.deepcopy(transaction)

    async def delete(self, transaction_id: UUID) -> None:
        if transaction_id in self._view():
            self._staged[transaction_id] = None

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        transaction = self._view().get(transaction_id)
        return copy.deepcopy(transaction) if transaction else None

    async def query(self, predicate: TransactionPredicate) -> List[Transaction]:
        return [copy.deepcopy(t) for t in self._view().values() if predicate(t)]

    async def commit(self) -> None:
        if self._commit_failure is not None:
            reason, self._commit_failure = self._commit_failure, None
            raise StoreError(reason, details={"staged": len(self._staged)})

        for transaction_id, transaction in self._staged.items():
            if transaction is None:
                self._committed.pop(transaction_id, None)
            else:
                self._committed[transaction_id] = transaction
        logger.debug("Committed %d staged change(s)", len(self._staged))
        self._staged.clear()

    async def rollback(self) -> None:
        if self._staged:
            logger.debug("Discarding %d staged change(s)", len(self._staged))
        self._staged.clear()

    def fail_next_commit(self, reason: str = "simulated write failure") -> None:
        """Make the next ``commit`` raise StoreError."""
        self._commit_failure = reason

    @property
    def has_staged_changes(self) -> bool:
        return bool(self._staged)

    def __len__(self) -> int:
        return len(self._committed)

    def _view(self) -> Dict[UUID, Transaction]:
        view = dict(self._committed)
        for transaction_id, transaction in self._staged.items():
            if transaction is None:
                view.pop(transaction_id, None)
            else:
                view[transaction_id] = transaction
        return view
