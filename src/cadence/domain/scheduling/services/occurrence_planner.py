"""Plans which occurrences of a template still need to be materialized."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from cadence.domain.scheduling.aggregates import Transaction
from cadence.domain.scheduling.exceptions import InvalidTransactionStateError


class OccurrencePlanner:
    """
    Walk a template's rule forward from where its series left off.

    The walk starts at the template's own date when no instance exists yet,
    otherwise one step after the latest instance. Month and year steps stay
    anchored on the template's day-of-month, so a series started on the 31st
    comes back to the 31st after a short month.
    """

    @staticmethod
    def first_candidate(
        template: Transaction,
        latest_scheduled: Optional[date],
    ) -> Optional[date]:
        rule = OccurrencePlanner._rule_of(template)
        anchor_day = template.date.day

        if latest_scheduled is None:
            return rule.next_occurrence(
                template.date,
                template.include_start_day_in_count,
                anchor_day=anchor_day,
            )
        return rule.next_occurrence(latest_scheduled, True, anchor_day=anchor_day)

    @staticmethod
    def pending_dates(
        template: Transaction,
        instances: Iterable[Transaction],
        horizon: date,
        limit: int,
    ) -> List[date]:
        """
        Return the dates still to materialize, oldest first.

        Parameters
        ----------
        template
            The series template
        instances
            Every existing instance of the template
        horizon
            Last date (inclusive) to materialize up to
        limit
            Maximum number of dates returned

        Returns
        -------
        Dates on or before both ``horizon`` and the series end that have no
        instance yet and were not deliberately deleted
        """
        rule = OccurrencePlanner._rule_of(template)
        existing = {i.scheduled_date or i.date for i in instances}
        existing |= template.skipped_dates
        latest = max(existing) if existing else None

        dates: List[date] = []
        candidate = OccurrencePlanner.first_candidate(template, latest)
        while (
            candidate is not None
            and candidate <= horizon
            and not template.is_past_end(candidate)
            and len(dates) < limit
        ):
            if candidate not in existing:
                dates.append(candidate)
            candidate = rule.next_occurrence(
                candidate,
                True,
                anchor_day=template.date.day,
            )
        return dates

    @staticmethod
    def _rule_of(template: Transaction):
        if not template.is_template or template.recurrence_rule is None:
            raise InvalidTransactionStateError(
                template.id,
                "occurrences can only be planned for templates",
            )
        return template.recurrence_rule
