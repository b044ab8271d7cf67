"""Commit staged ledger changes and bring balances up to date."""

from __future__ import annotations

import logging
from typing import Iterable, Tuple
from uuid import UUID

from cadence.application.ports import AccountBalanceRecomputer
from cadence.domain.scheduling.exceptions import StoreError
from cadence.domain.scheduling.repositories import TransactionRepository

logger = logging.getLogger(__name__)


class LedgerSyncService:
    """
    Finish a mutation: commit the store, then recompute touched balances.

    Balances are recomputed after the commit, once per distinct account,
    so they always describe durable state.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        balance_recomputer: AccountBalanceRecomputer,
    ):
        self._transaction_repo = transaction_repository
        self._recomputer = balance_recomputer

    async def commit(self) -> None:
        """
        Commit staged writes, rolling back if the store refuses them.

        Raises
        ------
        StoreError
            Re-raised after the rollback
        """
        try:
            await self._transaction_repo.commit()
        except StoreError as e:
            logger.error("Commit failed, rolling back: %s", e.message)
            await self._transaction_repo.rollback()
            raise

    async def recompute(self, account_ids: Iterable[UUID]) -> Tuple[UUID, ...]:
        """Recompute each distinct account once, in first-seen order."""
        seen: list[UUID] = []
        for account_id in account_ids:
            if account_id not in seen:
                seen.append(account_id)

        for account_id in seen:
            await self._recomputer.recompute(account_id)

        if seen:
            logger.debug("Recomputed balances for %d account(s)", len(seen))
        return tuple(seen)

    async def commit_and_recompute(
        self,
        account_ids: Iterable[UUID],
    ) -> Tuple[UUID, ...]:
        await self.commit()
        return await self.recompute(account_ids)
