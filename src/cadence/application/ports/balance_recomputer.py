"""Balance recomputer port."""

from typing import Protocol
from uuid import UUID


class AccountBalanceRecomputer(Protocol):
    """Port that brings an account's cached balance in line with the ledger.

    Implementations must be idempotent: recomputing twice in a row gives the
    same balance as recomputing once.
    """

    async def recompute(self, account_id: UUID) -> None:
        """Recompute the balance of ``account_id`` from its transactions."""
        ...
