"""Tests for ListAwaitingConfirmationQuery."""

from datetime import date
from decimal import Decimal

from cadence.application.queries.scheduling import ListAwaitingConfirmationQuery
from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.value_objects import TransactionType


def _scheduled(account_id, day: date, is_automatic: bool = False) -> Transaction:
    return Transaction.scheduled(
        transaction_type=TransactionType.EXPENSE,
        amount=Decimal("15"),
        account_id=account_id,
        scheduled_date=day,
        is_automatic=is_automatic,
    )


class TestListAwaitingConfirmationQuery:
    async def test_lists_due_manual_rows_oldest_first(self, context, checking, today):
        later = _scheduled(checking.id, date(2026, 3, 12))
        earlier = _scheduled(checking.id, date(2026, 3, 1))
        automatic = _scheduled(checking.id, date(2026, 3, 5), is_automatic=True)
        future = _scheduled(checking.id, date(2026, 3, 16))
        repo = context.transaction_repository()
        for row in (later, earlier, automatic, future):
            await repo.add(row)
        await repo.commit()

        query = ListAwaitingConfirmationQuery.from_factory(context)

        rows = await query.execute(today)
        assert [r.id for r in rows] == [earlier.id, later.id]
        assert await query.count(today) == 2

    async def test_empty_queue(self, context, today):
        query = ListAwaitingConfirmationQuery.from_factory(context)

        assert await query.execute(today) == []
        assert await query.count(today) == 0
