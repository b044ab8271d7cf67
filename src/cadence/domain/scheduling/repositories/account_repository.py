"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from cadence.domain.scheduling.entities import Account


class AccountRepository(ABC):
    """Repository interface for the accounts transactions point at."""

    @abstractmethod
    async def save(self, account: Account) -> None:
        """Save an account (including its cached balance)."""

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        """Find account by ID."""

    @abstractmethod
    async def find_all(self) -> List[Account]:
        """Find all accounts."""
