"""Balance recomputer that folds the ledger."""

from __future__ import annotations

import logging
from uuid import UUID

from cadence.domain.scheduling.repositories import (
    AccountRepository,
    TransactionRepository,
)
from cadence.domain.scheduling.services import AccountBalanceService

logger = logging.getLogger(__name__)


class LedgerBalanceRecomputer:
    """Recompute an account's cached balance from its executed transactions."""

    def __init__(
        self,
        account_repository: AccountRepository,
        transaction_repository: TransactionRepository,
    ):
        self._account_repo = account_repository
        self._transaction_repo = transaction_repository

    async def recompute(self, account_id: UUID) -> None:
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            logger.warning("Cannot recompute balance of missing account %s", account_id)
            return

        transactions = await self._transaction_repo.find_by_account(account_id)
        balance = AccountBalanceService.calculate_balance(account, transactions)
        account.set_current_balance(balance)
        await self._account_repo.save(account)
        logger.debug("Balance of %s is now %s", account_id, balance)
