"""Transaction type enum and its effect on account balances."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Kind of money movement.

    Amounts are always stored non-negative; the sign a row has on a balance
    is decided here and nowhere else.
    """

    EXPENSE = "expense"
    INCOME = "income"
    TRANSFER = "transfer"
    ADJUSTMENT = "adjustment"

    @classmethod
    def from_string(cls, value: str) -> TransactionType:
        try:
            return cls(value.lower())
        except ValueError:
            valid = [t.value for t in cls]
            msg = f"Unknown transaction type: {value}. Valid: {valid}"
            raise ValueError(msg) from None

    def balance_effect(
        self,
        amount: Decimal,
        *,
        is_destination: bool = False,
        is_negative_adjustment: bool = False,
    ) -> Decimal:
        """Signed effect of ``amount`` on one side of the movement.

        ``is_destination`` selects the receiving account of a transfer.
        """
        if self is TransactionType.EXPENSE:
            return -amount
        if self is TransactionType.INCOME:
            return amount
        if self is TransactionType.TRANSFER:
            return amount if is_destination else -amount
        if self is TransactionType.ADJUSTMENT:
            return -amount if is_negative_adjustment else amount

        msg = f"Unhandled transaction type: {self!r}"
        raise AssertionError(msg)
