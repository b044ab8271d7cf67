"""Repository interfaces for the scheduling domain."""

from cadence.domain.scheduling.repositories.account_repository import (
    AccountRepository,
)
from cadence.domain.scheduling.repositories.category_repository import (
    CategoryRepository,
)
from cadence.domain.scheduling.repositories.transaction_repository import (
    TransactionPredicate,
    TransactionRepository,
)

__all__ = [
    "AccountRepository",
    "CategoryRepository",
    "TransactionPredicate",
    "TransactionRepository",
]
