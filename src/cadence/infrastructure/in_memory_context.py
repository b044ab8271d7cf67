"""In-memory wiring of every repository and port the engine needs."""

from __future__ import annotations

from decimal import Decimal
from typing import List, Mapping, Optional

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.entities import Account, Category
from cadence.infrastructure.balance import LedgerBalanceRecomputer
from cadence.infrastructure.currency import StaticRateCurrencyConverter
from cadence.infrastructure.notifications import InMemoryNotificationScheduler
from cadence.infrastructure.persistence.in_memory import (
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryTransactionRepository,
)


class InMemorySchedulingContext:
    """SchedulingContext whose repositories and ports live in process memory.

    Every call returns the same instance, so commands built from one context
    share one store.
    """

    def __init__(  # NOQA: PLR0913
        self,
        accounts: Optional[List[Account]] = None,
        categories: Optional[List[Category]] = None,
        transactions: Optional[List[Transaction]] = None,
        rates: Optional[Mapping[str, Decimal]] = None,
        base_currency: str = "EUR",
    ):
        self._accounts = InMemoryAccountRepository(accounts)
        self._categories = InMemoryCategoryRepository(categories)
        self._transactions = InMemoryTransactionRepository(transactions)
        self._recomputer = LedgerBalanceRecomputer(self._accounts, self._transactions)
        self._notifications = InMemoryNotificationScheduler()
        self._converter = StaticRateCurrencyConverter(rates, base_currency)
        self._default_currency = base_currency

    def transaction_repository(self) -> InMemoryTransactionRepository:
        return self._transactions

    def account_repository(self) -> InMemoryAccountRepository:
        return self._accounts

    def category_repository(self) -> InMemoryCategoryRepository:
        return self._categories

    def balance_recomputer(self) -> LedgerBalanceRecomputer:
        return self._recomputer

    def notification_scheduler(self) -> InMemoryNotificationScheduler:
        return self._notifications

    def currency_converter(self) -> StaticRateCurrencyConverter:
        return self._converter

    def default_currency(self) -> str:
        return self._default_currency
