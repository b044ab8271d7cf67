"""Lifecycle status and structural kind of a transaction row."""

from enum import Enum


class TransactionStatus(str, Enum):
    """Whether a row has affected balances yet."""

    PENDING = "pending"
    EXECUTED = "executed"


class TransactionKind(str, Enum):
    """Structural role of a row in a recurring series.

    - TEMPLATE: declares a recurrence rule, never itself "happens"
    - INSTANCE: a materialized occurrence linked to its template
    - STANDALONE: a one-off row with no recurrence relationship
    """

    TEMPLATE = "template"
    INSTANCE = "instance"
    STANDALONE = "standalone"


class DeletionScope(str, Enum):
    """How far a delete on a recurring row reaches."""

    THIS_ONLY = "this_only"
    THIS_AND_FUTURE = "this_and_future"
    ALL_IN_SERIES = "all_in_series"

    @property
    def description(self) -> str:
        if self is DeletionScope.THIS_ONLY:
            return "Delete only this transaction"
        if self is DeletionScope.THIS_AND_FUTURE:
            return "Delete this transaction and every later one in the series"
        return "Delete every transaction in the series, past ones included"
