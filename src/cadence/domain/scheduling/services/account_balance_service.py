"""Account balance calculation service."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from cadence.domain.scheduling.aggregates import Transaction
    from cadence.domain.scheduling.entities import Account

logger = logging.getLogger(__name__)


class AccountBalanceService:
    """Service for calculating account balances.

    A balance is always a fold over the ledger: the opening balance plus the
    signed effect of every executed row touching the account. Nothing is ever
    patched incrementally, so recomputing is idempotent.
    """

    @staticmethod
    def calculate_balance(
        account: Account,
        transactions: Iterable[Transaction],
        as_of_date: Optional[date] = None,
    ) -> Decimal:
        balance = account.initial_balance

        for transaction in transactions:
            if as_of_date is not None and transaction.date > as_of_date:
                continue

            effect = transaction.balance_effect_on(account.id)
            if not effect:
                continue

            if transaction.currency != account.currency:
                logger.warning(
                    "Transaction %s is in %s but account %s is in %s; "
                    "amount is folded without conversion",
                    transaction.id,
                    transaction.currency,
                    account.id,
                    account.currency,
                )
            balance += effect

        return balance
