"""Transaction repository interface.

Defines the contract for transaction persistence. Writes are staged until
``commit`` so a multi-row operation either lands completely or not at all.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional
from uuid import UUID

from cadence.domain.scheduling.aggregates import Transaction

TransactionPredicate = Callable[[Transaction], bool]


class TransactionRepository(ABC):
    """
    Repository interface for Transaction aggregates.

    Reads see staged writes of the current unit of work. ``commit`` makes
    them durable and ``rollback`` discards them.
    """

    @abstractmethod
    async def add(self, transaction: Transaction) -> None:
        """Stage a new or changed transaction."""

    @abstractmethod
    async def delete(self, transaction_id: UUID) -> None:
        """Stage the removal of a transaction; unknown ids are ignored."""

    @abstractmethod
    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Find transaction by ID."""

    @abstractmethod
    async def query(self, predicate: TransactionPredicate) -> List[Transaction]:
        """Return every transaction matching ``predicate``."""

    @abstractmethod
    async def commit(self) -> None:
        """
        Make staged writes durable.

        Raises
        ------
        StoreError
            If persisting fails; staged writes are left for ``rollback``
        """

    @abstractmethod
    async def rollback(self) -> None:
        """Discard staged writes."""

    async def find_all(self) -> List[Transaction]:
        return await self.query(lambda _: True)

    async def find_templates(self) -> List[Transaction]:
        """Find every recurring template."""
        return await self.query(lambda t: t.is_template)

    async def find_instances(self, template_id: UUID) -> List[Transaction]:
        """Find the instances generated from ``template_id``, oldest first."""
        instances = await self.query(
            lambda t: t.parent_recurring_transaction_id == template_id,
        )
        return sorted(instances, key=lambda t: (t.scheduled_date or t.date))

    async def find_by_account(self, account_id: UUID) -> List[Transaction]:
        """Find all transactions involving an account."""
        return await self.query(lambda t: account_id in t.affected_account_ids)
