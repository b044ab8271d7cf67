"""Scheduling context protocol for the application layer."""

from __future__ import annotations

from typing import Protocol

from cadence.application.ports import (
    AccountBalanceRecomputer,
    CurrencyConverter,
    NotificationScheduler,
)
from cadence.domain.scheduling.repositories import (
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)


class SchedulingContext(Protocol):
    """Protocol for handing repositories and ports to commands and queries."""

    def transaction_repository(self) -> TransactionRepository:
        """Get transaction repository."""
        ...

    def account_repository(self) -> AccountRepository:
        """Get account repository."""
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...

    def balance_recomputer(self) -> AccountBalanceRecomputer:
        """Get the balance recomputer."""
        ...

    def notification_scheduler(self) -> NotificationScheduler:
        """Get the notification scheduler."""
        ...

    def currency_converter(self) -> CurrencyConverter:
        """Get the currency converter."""
        ...

    def default_currency(self) -> str:
        """Currency for new rows whose account does not name one."""
        ...
