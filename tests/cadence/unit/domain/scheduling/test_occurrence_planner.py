"""Tests for OccurrencePlanner."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.exceptions import InvalidTransactionStateError
from cadence.domain.scheduling.services import OccurrencePlanner
from cadence.domain.scheduling.value_objects import RecurrenceRule, TransactionType

ACCOUNT_ID = uuid4()


def _template(start: date, **overrides) -> Transaction:
    params = {
        "transaction_type": TransactionType.EXPENSE,
        "amount": Decimal("10"),
        "account_id": ACCOUNT_ID,
        "recurrence_rule": RecurrenceRule(unit="month"),
        "start_date": start,
    }
    params.update(overrides)
    return Transaction.template(**params)


class TestFirstCandidate:
    def test_unconsumed_start_is_the_first_occurrence(self):
        template = _template(date(2026, 1, 31))

        assert OccurrencePlanner.first_candidate(template, None) == date(2026, 1, 31)

    def test_consumed_start_moves_one_step(self):
        template = _template(date(2026, 1, 31), include_start_day_in_count=True)

        assert OccurrencePlanner.first_candidate(template, None) == date(2026, 2, 28)

    def test_continues_after_latest_instance_on_the_anchor_day(self):
        template = _template(date(2026, 1, 31))

        assert OccurrencePlanner.first_candidate(
            template,
            date(2026, 2, 28),
        ) == date(2026, 3, 31)


class TestPendingDates:
    def test_walks_up_to_the_horizon(self):
        template = _template(date(2026, 1, 31))

        dates = OccurrencePlanner.pending_dates(template, [], date(2026, 4, 15), 100)

        assert dates == [date(2026, 1, 31), date(2026, 2, 28), date(2026, 3, 31)]

    def test_skips_existing_instances(self):
        template = _template(date(2026, 1, 31))
        existing = [template.spawn_instance(date(2026, 1, 31))]

        dates = OccurrencePlanner.pending_dates(
            template,
            existing,
            date(2026, 3, 31),
            100,
        )

        assert dates == [date(2026, 2, 28), date(2026, 3, 31)]

    def test_is_idempotent_once_caught_up(self):
        template = _template(date(2026, 1, 1))
        horizon = date(2026, 3, 1)
        existing = [
            template.spawn_instance(d)
            for d in OccurrencePlanner.pending_dates(template, [], horizon, 100)
        ]

        assert OccurrencePlanner.pending_dates(template, existing, horizon, 100) == []

    def test_stops_at_series_end(self):
        template = _template(date(2026, 1, 1), recurrence_end_date=date(2026, 2, 15))

        dates = OccurrencePlanner.pending_dates(template, [], date(2026, 12, 31), 100)

        assert dates == [date(2026, 1, 1), date(2026, 2, 1)]

    def test_respects_limit(self):
        template = _template(date(2026, 1, 1), recurrence_rule=RecurrenceRule(unit="day"))

        dates = OccurrencePlanner.pending_dates(template, [], date(2026, 12, 31), 5)

        assert len(dates) == 5
        assert dates[-1] == date(2026, 1, 5)

    def test_skipped_dates_are_not_regenerated(self):
        template = _template(date(2026, 1, 1))
        existing = [template.spawn_instance(date(2026, 1, 1))]
        template.skip_occurrence(date(2026, 2, 1))

        dates = OccurrencePlanner.pending_dates(
            template,
            existing,
            date(2026, 3, 1),
            100,
        )

        assert dates == [date(2026, 3, 1)]

    def test_future_start_produces_nothing_yet(self):
        template = _template(date(2026, 6, 1))

        assert OccurrencePlanner.pending_dates(template, [], date(2026, 3, 15), 100) == []

    def test_rejects_non_templates(self):
        standalone = Transaction.standalone(TransactionType.EXPENSE, 1, ACCOUNT_ID)

        with pytest.raises(InvalidTransactionStateError):
            OccurrencePlanner.pending_dates(standalone, [], date(2026, 1, 1), 1)
