from cadence.infrastructure.balance.ledger_balance_recomputer import (
    LedgerBalanceRecomputer,
)

__all__ = ["LedgerBalanceRecomputer"]
