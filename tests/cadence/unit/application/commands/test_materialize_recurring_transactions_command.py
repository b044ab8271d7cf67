"""Tests for MaterializeRecurringTransactionsCommand."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from cadence.application.commands.scheduling import (
    MaterializeRecurringTransactionsCommand,
)
from cadence.domain.scheduling.exceptions import StoreError
from cadence.domain.scheduling.value_objects import (
    MaterializationPolicy,
    TransactionStatus,
    TransactionType,
)


async def _seed(context, *rows):
    repo = context.transaction_repository()
    for row in rows:
        await repo.add(row)
    await repo.commit()


def _command(context, **policy) -> MaterializeRecurringTransactionsCommand:
    return MaterializeRecurringTransactionsCommand.from_factory(
        context,
        policy=MaterializationPolicy(**policy) if policy else None,
    )


async def _balance(context, account_id) -> Decimal:
    account = await context.account_repository().find_by_id(account_id)
    return account.current_balance


class TestManualTemplates:
    async def test_due_occurrences_wait_for_confirmation(
        self,
        context,
        make_template,
        today,
    ):
        template = make_template()
        await _seed(context, template)

        result = await _command(context).execute(today)

        instances = await context.transaction_repository().find_instances(template.id)
        assert [i.scheduled_date for i in instances] == [
            date(2026, 1, 1),
            date(2026, 2, 1),
            date(2026, 3, 1),
        ]
        assert all(i.status == TransactionStatus.PENDING for i in instances)
        assert all(i.is_scheduled for i in instances)
        assert result.pending_ids == [i.id for i in instances]
        assert result.executed_ids == []

        notifications = context.notification_scheduler()
        for instance in instances:
            assert notifications.scheduled_for(instance.id) == instance.scheduled_date

    async def test_running_twice_creates_nothing_new(
        self,
        context,
        make_template,
        today,
    ):
        template = make_template()
        await _seed(context, template)
        command = _command(context)

        await command.execute(today)
        second = await command.execute(today)

        instances = await context.transaction_repository().find_instances(template.id)
        assert len(instances) == 3
        assert second.created_count == 0
        assert len({i.scheduled_date for i in instances}) == 3


class TestAutomaticTemplates:
    async def test_due_occurrences_execute_and_update_balance(
        self,
        context,
        make_template,
        checking,
        today,
    ):
        template = make_template(is_automatic=True)
        await _seed(context, template)

        result = await _command(context).execute(today)

        instances = await context.transaction_repository().find_instances(template.id)
        assert all(i.is_executed for i in instances)
        assert [i.date for i in instances] == [i.scheduled_date for i in instances]
        assert len(result.executed_ids) == 3
        assert result.recomputed_account_ids == [checking.id]
        assert await _balance(context, checking.id) == Decimal("-1400.00")
        assert context.notification_scheduler().reminders == {}

    async def test_lookahead_creates_future_occurrences_pending(
        self,
        context,
        make_template,
        today,
    ):
        template = make_template(is_automatic=True)
        await _seed(context, template)

        result = await _command(context, lookahead_days=20).execute(today)

        instances = await context.transaction_repository().find_instances(template.id)
        future = instances[-1]
        assert future.scheduled_date == date(2026, 4, 1)
        assert future.status == TransactionStatus.PENDING
        assert result.pending_ids == [future.id]
        assert len(result.executed_ids) == 3
        assert context.notification_scheduler().scheduled_for(future.id) == date(
            2026,
            4,
            1,
        )

    async def test_transfer_recomputes_both_accounts(
        self,
        context,
        make_template,
        checking,
        savings,
        today,
    ):
        template = make_template(
            transaction_type=TransactionType.TRANSFER,
            amount=Decimal("100"),
            destination_account_id=savings.id,
            is_automatic=True,
            category_id=None,
            start_date=date(2026, 3, 1),
        )
        await _seed(context, template)

        result = await _command(context).execute(today)

        assert result.recomputed_account_ids == [checking.id, savings.id]
        assert await _balance(context, checking.id) == Decimal("900.00")
        assert await _balance(context, savings.id) == Decimal("600.00")


class TestSeriesBoundaries:
    async def test_end_date_stops_generation(self, context, make_template, today):
        template = make_template(recurrence_end_date=date(2026, 2, 10))
        await _seed(context, template)

        await _command(context).execute(today)

        instances = await context.transaction_repository().find_instances(template.id)
        assert [i.scheduled_date for i in instances] == [
            date(2026, 1, 1),
            date(2026, 2, 1),
        ]

    async def test_run_limit(self, context, make_template, today):
        template = make_template()
        await _seed(context, template)

        result = await _command(context, max_occurrences_per_run=2).execute(today)

        assert result.created_count == 2
        assert result.limit_reached is False

        second = await _command(context, max_occurrences_per_run=2).execute(today)
        assert second.created_count == 1

    async def test_limit_reached_across_templates(self, context, make_template, today):
        await _seed(context, make_template(), make_template())

        result = await _command(context, max_occurrences_per_run=3).execute(today)

        assert result.created_count == 3
        assert result.limit_reached is True


class TestFailureHandling:
    async def test_orphaned_template_is_skipped(
        self,
        context,
        make_template,
        today,
    ):
        orphan = make_template(category_id=uuid4())
        healthy = make_template()
        await _seed(context, orphan, healthy)

        result = await _command(context).execute(today)

        repo = context.transaction_repository()
        assert result.skipped_template_ids == [orphan.id]
        assert await repo.find_instances(orphan.id) == []
        assert len(await repo.find_instances(healthy.id)) == 3

    async def test_template_deleted_mid_walk_stops_generation(
        self,
        context,
        make_template,
        today,
    ):
        template = make_template()
        await _seed(context, template)
        repo = context.transaction_repository()
        repo.find_by_id = AsyncMock(side_effect=[template, None])

        result = await _command(context).execute(today)

        assert result.created_count == 1

    async def test_store_error_rolls_back(self, context, make_template, today):
        template = make_template()
        await _seed(context, template)
        repo = context.transaction_repository()
        repo.fail_next_commit("disk full")

        with pytest.raises(StoreError):
            await _command(context).execute(today)

        assert await repo.find_instances(template.id) == []
        assert not repo.has_staged_changes
        assert context.notification_scheduler().reminders == {}

    async def test_failed_reminder_leaves_balance_current(
        self,
        context,
        make_template,
        checking,
        today,
    ):
        await _seed(context, make_template(is_automatic=True))
        notifications = AsyncMock()
        notifications.schedule.side_effect = RuntimeError("push gateway down")
        command = MaterializeRecurringTransactionsCommand(
            transaction_repository=context.transaction_repository(),
            account_repository=context.account_repository(),
            category_repository=context.category_repository(),
            balance_recomputer=context.balance_recomputer(),
            notification_scheduler=notifications,
            policy=MaterializationPolicy(lookahead_days=20),
        )

        with pytest.raises(RuntimeError):
            await command.execute(today)

        assert await _balance(context, checking.id) == Decimal("-1400.00")
