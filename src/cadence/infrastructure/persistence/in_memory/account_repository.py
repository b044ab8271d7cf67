"""In-memory implementation of AccountRepository."""

import copy
from typing import Dict, List, Optional
from uuid import UUID

from cadence.domain.scheduling.entities import Account
from cadence.domain.scheduling.repositories import AccountRepository


class InMemoryAccountRepository(AccountRepository):
    def __init__(self, accounts: Optional[List[Account]] = None):
        self._accounts: Dict[UUID, Account] = {
            a.id: copy.deepcopy(a) for a in accounts or []
        }

    async def save(self, account: Account) -> None:
        self._accounts[account.id] = copy.deepcopy(account)

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        account = self._accounts.get(account_id)
        return copy.deepcopy(account) if account else None

    async def find_all(self) -> List[Account]:
        return [copy.deepcopy(a) for a in self._accounts.values()]

    async def remove(self, account_id: UUID) -> None:
        """Forget an account (leaves its transactions orphaned)."""
        self._accounts.pop(account_id, None)
