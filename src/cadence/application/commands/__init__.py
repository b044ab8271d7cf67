"""Command layer - write operations that mutate state.

Commands represent user intentions to change the ledger. They orchestrate
domain services and return structured results via DTOs.
"""

from cadence.application.commands.scheduling import (
    ConfirmDetectedPatternCommand,
    ConfirmScheduledTransactionCommand,
    CreateRecurringTransactionCommand,
    CreateTransactionCommand,
    DeleteTransactionCommand,
    MaterializeRecurringTransactionsCommand,
    ProcessDueTransactionsCommand,
)

__all__ = [
    "ConfirmDetectedPatternCommand",
    "ConfirmScheduledTransactionCommand",
    "CreateRecurringTransactionCommand",
    "CreateTransactionCommand",
    "DeleteTransactionCommand",
    "MaterializeRecurringTransactionsCommand",
    "ProcessDueTransactionsCommand",
]
