"""Tests for AccountBalanceService."""

from datetime import date
from decimal import Decimal

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.entities import Account
from cadence.domain.scheduling.services import AccountBalanceService
from cadence.domain.scheduling.value_objects import RecurrenceRule, TransactionType


class TestCalculateBalance:
    def setup_method(self):
        self.checking = Account("Checking", initial_balance=Decimal("100.00"))
        self.savings = Account("Savings", initial_balance=Decimal("0"))

    def test_no_transactions_is_initial_balance(self):
        balance = AccountBalanceService.calculate_balance(self.checking, [])

        assert balance == Decimal("100.00")

    def test_folds_executed_rows(self):
        transactions = [
            Transaction.standalone(TransactionType.INCOME, "50", self.checking.id),
            Transaction.standalone(TransactionType.EXPENSE, "20.50", self.checking.id),
            Transaction.standalone(
                TransactionType.ADJUSTMENT,
                "4.50",
                self.checking.id,
                is_negative_adjustment=True,
            ),
        ]

        balance = AccountBalanceService.calculate_balance(self.checking, transactions)

        assert balance == Decimal("125.00")

    def test_ignores_pending_rows_and_templates(self):
        transactions = [
            Transaction.scheduled(
                TransactionType.EXPENSE,
                "999",
                self.checking.id,
                scheduled_date=date(2030, 1, 1),
            ),
            Transaction.template(
                TransactionType.EXPENSE,
                "999",
                self.checking.id,
                RecurrenceRule(),
                date(2026, 1, 1),
            ),
        ]

        balance = AccountBalanceService.calculate_balance(self.checking, transactions)

        assert balance == Decimal("100.00")

    def test_transfer_counts_on_both_sides(self):
        transfer = Transaction.standalone(
            TransactionType.TRANSFER,
            "40",
            self.checking.id,
            destination_account_id=self.savings.id,
        )

        assert AccountBalanceService.calculate_balance(
            self.checking,
            [transfer],
        ) == Decimal("60.00")
        assert AccountBalanceService.calculate_balance(
            self.savings,
            [transfer],
        ) == Decimal("40")

    def test_as_of_date_cuts_off_later_rows(self):
        transactions = [
            Transaction.standalone(
                TransactionType.INCOME,
                "10",
                self.checking.id,
                date=date(2026, 1, 1),
            ),
            Transaction.standalone(
                TransactionType.INCOME,
                "10",
                self.checking.id,
                date=date(2026, 2, 1),
            ),
        ]

        balance = AccountBalanceService.calculate_balance(
            self.checking,
            transactions,
            as_of_date=date(2026, 1, 15),
        )

        assert balance == Decimal("110.00")

    def test_is_idempotent(self):
        transactions = [
            Transaction.standalone(TransactionType.EXPENSE, "1", self.checking.id),
        ]

        first = AccountBalanceService.calculate_balance(self.checking, transactions)
        second = AccountBalanceService.calculate_balance(self.checking, transactions)

        assert first == second == Decimal("99.00")
