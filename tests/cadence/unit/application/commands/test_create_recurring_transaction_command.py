"""Tests for CreateRecurringTransactionCommand."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from cadence.application.commands.scheduling import (
    CreateRecurringTransactionCommand,
)
from cadence.domain.scheduling.exceptions import OrphanedReferenceError
from cadence.domain.scheduling.value_objects import (
    TransactionKind,
    TransactionStatus,
    TransactionType,
)
from cadence.domain.shared.exceptions import ValidationError


@pytest.fixture
def command(context) -> CreateRecurringTransactionCommand:
    return CreateRecurringTransactionCommand.from_factory(context)


class TestCreateRecurringTransactionCommand:
    async def test_manual_series_starting_today(
        self,
        command,
        context,
        checking,
        rent,
        monthly,
        today,
    ):
        result = await command.execute(
            TransactionType.EXPENSE,
            Decimal("800"),
            checking.id,
            monthly,
            category_id=rent.id,
            today=today,
        )

        repo = context.transaction_repository()
        template = await repo.find_by_id(result.template.id)
        instances = await repo.find_instances(template.id)
        assert template.kind == TransactionKind.TEMPLATE
        assert template.date == today
        assert [i.id for i in instances] == [result.first_instance.id]
        assert instances[0].scheduled_date == today
        assert instances[0].status == TransactionStatus.PENDING
        assert (
            context.notification_scheduler().scheduled_for(instances[0].id) == today
        )

    async def test_automatic_series_in_the_past_books_first_occurrence(
        self,
        command,
        context,
        checking,
        monthly,
        today,
    ):
        result = await command.execute(
            TransactionType.EXPENSE,
            Decimal("800"),
            checking.id,
            monthly,
            start_date=date(2026, 1, 1),
            is_automatic=True,
            today=today,
        )

        account = await context.account_repository().find_by_id(checking.id)
        assert result.first_instance.is_executed
        assert result.first_instance.date == date(2026, 1, 1)
        assert account.current_balance == Decimal("200.00")
        assert context.notification_scheduler().reminders == {}

    async def test_future_series_first_occurrence_waits(
        self,
        command,
        context,
        checking,
        monthly,
        today,
    ):
        result = await command.execute(
            TransactionType.INCOME,
            Decimal("3000"),
            checking.id,
            monthly,
            start_date=date(2026, 4, 25),
            is_automatic=True,
            today=today,
        )

        assert result.first_instance.status == TransactionStatus.PENDING
        assert context.notification_scheduler().scheduled_for(
            result.first_instance.id,
        ) == date(2026, 4, 25)

    async def test_start_day_counted_moves_first_occurrence(
        self,
        command,
        checking,
        monthly,
        today,
    ):
        result = await command.execute(
            TransactionType.EXPENSE,
            Decimal("20"),
            checking.id,
            monthly,
            start_date=date(2026, 1, 31),
            include_start_day_in_count=True,
            today=today,
        )

        assert result.first_instance.scheduled_date == date(2026, 2, 28)

    async def test_first_occurrence_after_end_is_not_created(
        self,
        command,
        context,
        checking,
        monthly,
        today,
    ):
        result = await command.execute(
            TransactionType.EXPENSE,
            Decimal("20"),
            checking.id,
            monthly,
            start_date=date(2026, 1, 1),
            recurrence_end_date=date(2026, 1, 15),
            include_start_day_in_count=True,
            today=today,
        )

        assert result.first_instance is None
        assert len(context.transaction_repository()) == 1

    async def test_end_before_start_is_rejected(
        self,
        command,
        context,
        checking,
        monthly,
        today,
    ):
        with pytest.raises(ValidationError, match="before the start date"):
            await command.execute(
                TransactionType.EXPENSE,
                Decimal("20"),
                checking.id,
                monthly,
                start_date=date(2026, 3, 1),
                recurrence_end_date=date(2026, 2, 1),
                today=today,
            )

        assert len(context.transaction_repository()) == 0

    async def test_unknown_account_is_rejected(self, command, context, monthly, today):
        with pytest.raises(OrphanedReferenceError):
            await command.execute(
                TransactionType.EXPENSE,
                Decimal("20"),
                uuid4(),
                monthly,
                today=today,
            )

        assert len(context.transaction_repository()) == 0

    async def test_negative_adjustment_series(
        self,
        command,
        context,
        checking,
        monthly,
        today,
    ):
        result = await command.execute(
            TransactionType.ADJUSTMENT,
            Decimal("25"),
            checking.id,
            monthly,
            start_date=date(2026, 3, 1),
            is_automatic=True,
            is_negative_adjustment=True,
            today=today,
        )

        account = await context.account_repository().find_by_id(checking.id)
        assert result.template.is_negative_adjustment
        assert result.first_instance.is_negative_adjustment
        assert result.first_instance.is_executed
        assert account.current_balance == Decimal("975.00")
