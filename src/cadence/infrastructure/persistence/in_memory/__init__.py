"""In-memory repositories."""

from cadence.infrastructure.persistence.in_memory.account_repository import (
    InMemoryAccountRepository,
)
from cadence.infrastructure.persistence.in_memory.category_repository import (
    InMemoryCategoryRepository,
)
from cadence.infrastructure.persistence.in_memory.transaction_repository import (
    InMemoryTransactionRepository,
)

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCategoryRepository",
    "InMemoryTransactionRepository",
]
