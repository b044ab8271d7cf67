"""Checks that a transaction's account and category still exist."""

from __future__ import annotations

import logging

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.exceptions import OrphanedReferenceError
from cadence.domain.scheduling.repositories import (
    AccountRepository,
    CategoryRepository,
)

logger = logging.getLogger(__name__)


class ReferenceCheckService:
    """Detect transactions whose account or category has vanished."""

    def __init__(
        self,
        account_repository: AccountRepository,
        category_repository: CategoryRepository,
    ):
        self._account_repo = account_repository
        self._category_repo = category_repository

    async def ensure_references(self, transaction: Transaction) -> None:
        """
        Verify every reference of ``transaction``.

        Raises
        ------
        OrphanedReferenceError
            For the first missing account, destination account or category
        """
        if transaction.account_id is None:
            raise OrphanedReferenceError(transaction.id, "account", None)

        for reference, account_id in (
            ("account", transaction.account_id),
            ("destination account", transaction.destination_account_id),
        ):
            if account_id is None:
                continue
            if await self._account_repo.find_by_id(account_id) is None:
                raise OrphanedReferenceError(transaction.id, reference, account_id)

        if transaction.category_id is not None:
            category = await self._category_repo.find_by_id(transaction.category_id)
            if category is None:
                raise OrphanedReferenceError(
                    transaction.id,
                    "category",
                    transaction.category_id,
                )
