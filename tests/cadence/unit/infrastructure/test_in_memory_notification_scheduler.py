"""Tests for InMemoryNotificationScheduler."""

from datetime import date
from uuid import uuid4

from cadence.infrastructure.notifications import InMemoryNotificationScheduler


class TestInMemoryNotificationScheduler:
    async def test_schedule_replaces_previous_reminder(self):
        scheduler = InMemoryNotificationScheduler()
        transaction_id = uuid4()

        await scheduler.schedule(transaction_id, date(2026, 3, 1))
        await scheduler.schedule(transaction_id, date(2026, 3, 2))

        assert scheduler.reminders == {transaction_id: date(2026, 3, 2)}

    async def test_cancel(self):
        scheduler = InMemoryNotificationScheduler()
        transaction_id = uuid4()
        await scheduler.schedule(transaction_id, date(2026, 3, 1))

        await scheduler.cancel(transaction_id)
        await scheduler.cancel(uuid4())

        assert scheduler.scheduled_for(transaction_id) is None
        assert scheduler.reminders == {}
