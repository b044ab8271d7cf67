"""
Pytest configuration for cadence tests.

Provides accounts, categories, an in-memory scheduling context and
builders for the three kinds of transaction rows.
"""

from datetime import date
from decimal import Decimal

import pytest

from cadence.application.services.recurring_transaction_engine import (
    RecurringTransactionEngine,
)
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.entities import Account, Category
from cadence.domain.scheduling.value_objects import (
    RecurrenceRule,
    RecurrenceUnit,
    TransactionType,
)
from cadence.infrastructure.in_memory_context import InMemorySchedulingContext

TODAY = date(2026, 3, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def checking() -> Account:
    return Account("Checking", initial_balance=Decimal("1000.00"))


@pytest.fixture
def savings() -> Account:
    return Account("Savings", initial_balance=Decimal("500.00"))


@pytest.fixture
def rent() -> Category:
    return Category("Rent")


@pytest.fixture
def coffee() -> Category:
    return Category("Coffee")


@pytest.fixture
def context(checking, savings, rent, coffee) -> InMemorySchedulingContext:
    return InMemorySchedulingContext(
        accounts=[checking, savings],
        categories=[rent, coffee],
        rates={"USD": Decimal("1.10")},
    )


@pytest.fixture
def engine(context) -> RecurringTransactionEngine:
    return RecurringTransactionEngine(context)


@pytest.fixture
def monthly() -> RecurrenceRule:
    return RecurrenceRule(unit=RecurrenceUnit.MONTH, interval=1)


@pytest.fixture
def make_template(checking, rent, monthly):
    """Build a template; keyword arguments override the defaults."""

    def _make(**overrides) -> Transaction:
        params = {
            "transaction_type": TransactionType.EXPENSE,
            "amount": Decimal("800.00"),
            "account_id": checking.id,
            "recurrence_rule": monthly,
            "start_date": date(2026, 1, 1),
            "category_id": rent.id,
        }
        params.update(overrides)
        return Transaction.template(**params)

    return _make


@pytest.fixture
def make_standalone(checking, coffee):
    """Build an executed standalone row; keyword arguments override defaults."""

    def _make(**overrides) -> Transaction:
        params = {
            "transaction_type": TransactionType.EXPENSE,
            "amount": Decimal("3.50"),
            "account_id": checking.id,
            "date": TODAY,
            "category_id": coffee.id,
        }
        params.update(overrides)
        return Transaction.standalone(**params)

    return _make
