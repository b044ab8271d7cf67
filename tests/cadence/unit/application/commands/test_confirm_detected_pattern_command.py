"""Tests for ConfirmDetectedPatternCommand."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from cadence.application.commands.scheduling import ConfirmDetectedPatternCommand
from cadence.domain.scheduling.exceptions import PatternConfirmationError
from cadence.domain.scheduling.value_objects import (
    DetectedRecurringPattern,
    PatternKey,
    RecurrenceRule,
    RecurrenceUnit,
    TransactionStatus,
    TransactionType,
)


@pytest.fixture
def make_pattern(checking, coffee):
    def _make(category_id=None) -> DetectedRecurringPattern:
        return DetectedRecurringPattern(
            key=PatternKey(
                account_id=checking.id,
                category_id=category_id or coffee.id,
                transaction_type=TransactionType.EXPENSE,
                currency="EUR",
                amount_bucket=Decimal("9.99"),
            ),
            occurrences=3,
            average_amount=Decimal("9.99"),
            last_date=date(2026, 3, 14),
            matched_dates=(date(2026, 3, 4), date(2026, 3, 9), date(2026, 3, 14)),
            transaction_ids=(uuid4(), uuid4(), uuid4()),
            suggested_rule=RecurrenceRule(unit=RecurrenceUnit.DAY, interval=5),
            notes="Streaming",
        )

    return _make


class TestConfirmDetectedPatternCommand:
    async def test_creates_series_from_pattern(
        self,
        context,
        make_pattern,
        checking,
        coffee,
        today,
    ):
        pattern = make_pattern()

        result = await ConfirmDetectedPatternCommand.from_factory(context).execute(
            pattern,
            today=today,
        )

        template = result.template
        assert template.is_template
        assert template.date == today
        assert template.amount == Decimal("9.99")
        assert template.account_id == checking.id
        assert template.category_id == coffee.id
        assert template.recurrence_rule == pattern.suggested_rule
        assert template.notes == "Streaming"
        assert result.first_instance.scheduled_date == today
        assert result.first_instance.status == TransactionStatus.PENDING

    async def test_user_rule_overrides_suggestion(self, context, make_pattern, today):
        weekly = RecurrenceRule(unit=RecurrenceUnit.WEEK, interval=1)

        result = await ConfirmDetectedPatternCommand.from_factory(context).execute(
            make_pattern(),
            rule=weekly,
            is_automatic=True,
            today=today,
        )

        assert result.template.recurrence_rule == weekly
        assert result.template.is_automatic
        assert result.first_instance.is_executed

    async def test_confirming_twice_is_rejected(self, context, make_pattern, today):
        command = ConfirmDetectedPatternCommand.from_factory(context)
        await command.execute(make_pattern(), today=today)

        with pytest.raises(PatternConfirmationError, match="already exists"):
            await command.execute(make_pattern(), today=today)

        assert len(await context.transaction_repository().find_templates()) == 1

    async def test_vanished_category_is_rejected(self, context, make_pattern, today):
        with pytest.raises(PatternConfirmationError):
            await ConfirmDetectedPatternCommand.from_factory(context).execute(
                make_pattern(category_id=uuid4()),
                today=today,
            )

        assert len(context.transaction_repository()) == 0
