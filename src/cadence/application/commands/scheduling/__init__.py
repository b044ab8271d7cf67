"""Scheduling commands - create, materialize, confirm and delete transactions."""

from cadence.application.commands.scheduling.confirm_detected_pattern_command import (
    ConfirmDetectedPatternCommand,
)
from cadence.application.commands.scheduling.confirm_scheduled_transaction_command import (  # NOQA: E501
    ConfirmScheduledTransactionCommand,
)
from cadence.application.commands.scheduling.create_recurring_transaction_command import (  # NOQA: E501
    CreateRecurringTransactionCommand,
)
from cadence.application.commands.scheduling.create_transaction_command import (
    CreateTransactionCommand,
)
from cadence.application.commands.scheduling.delete_transaction_command import (
    DeleteTransactionCommand,
)
from cadence.application.commands.scheduling.materialize_recurring_transactions_command import (  # NOQA: E501
    MaterializeRecurringTransactionsCommand,
)
from cadence.application.commands.scheduling.process_due_transactions_command import (
    ProcessDueTransactionsCommand,
)

__all__ = [
    # Creation
    "CreateTransactionCommand",
    "CreateRecurringTransactionCommand",
    "ConfirmDetectedPatternCommand",
    # Lifecycle
    "ConfirmScheduledTransactionCommand",
    "MaterializeRecurringTransactionsCommand",
    "ProcessDueTransactionsCommand",
    # Deletion
    "DeleteTransactionCommand",
]
