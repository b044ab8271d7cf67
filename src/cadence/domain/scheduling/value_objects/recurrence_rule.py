"""Recurrence rule value object and occurrence calculator.

A rule is a unit (day, week, month, year) plus a fixed interval. All date
arithmetic is pure: the same rule, anchor and flag always give the same
answer, so callers may walk forward through time by feeding each result back
in as the next anchor.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from enum import Enum
from typing import Any, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from cadence.domain.scheduling.exceptions import (
    CalendarArithmeticExhausted,
    InvalidRuleError,
)

logger = logging.getLogger(__name__)

# Upper bound for occurrence walks over a window
MAX_WALK_STEPS = 10_000


class RecurrenceUnit(str, Enum):
    """Calendar unit a rule advances by."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @classmethod
    def from_string(cls, value: str) -> RecurrenceUnit:
        try:
            return cls(value.lower())
        except ValueError:
            msg = f"unknown unit '{value}'"
            raise InvalidRuleError(msg, unit=value) from None


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(d: date, months: int, anchor_day: Optional[int] = None) -> date:
    """Add months to a date, saturating the day at the end of the target month.

    ``anchor_day`` is the day-of-month the series started on; when given, the
    result uses it instead of ``d.day`` so a series anchored on the 31st
    returns to the 31st after passing through a shorter month.
    """
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    wanted_day = anchor_day if anchor_day is not None else d.day
    day = min(wanted_day, last_day_of_month(year, month))
    return date(year, month, day)


class RecurrenceRule(BaseModel):
    """Value object describing how often a template repeats."""

    unit: RecurrenceUnit = RecurrenceUnit.MONTH
    interval: int = 1

    model_config = ConfigDict(frozen=True)

    @field_validator("unit", mode="before")
    @classmethod
    def validate_unit(cls, v: Any) -> RecurrenceUnit:
        if isinstance(v, RecurrenceUnit):
            return v
        if isinstance(v, str):
            return RecurrenceUnit.from_string(v)
        msg = f"unit must be a RecurrenceUnit or string, got {type(v).__name__}"
        raise InvalidRuleError(msg, unit=v)

    @field_validator("interval", mode="before")
    @classmethod
    def validate_interval(cls, v: Any) -> int:
        if isinstance(v, bool) or not isinstance(v, int):
            msg = "interval must be an integer"
            raise InvalidRuleError(msg, interval=v)
        if v < 1:
            msg = "interval must be at least 1"
            raise InvalidRuleError(msg, interval=v)
        return v

    def __str__(self) -> str:
        return self.display_string

    @property
    def display_string(self) -> str:
        if self.interval == 1:
            return f"Every {self.unit.value}"
        return f"Every {self.interval} {self.unit.plural}"

    def advance(
        self,
        from_date: date,
        steps: int = 1,
        anchor_day: Optional[int] = None,
    ) -> date:
        """Move ``steps`` full rule steps forward from ``from_date``.

        Raises
        ------
        CalendarArithmeticExhausted
            If the result falls outside the representable calendar
        """
        amount = self.interval * steps
        try:
            if self.unit == RecurrenceUnit.DAY:
                return from_date + timedelta(days=amount)
            if self.unit == RecurrenceUnit.WEEK:
                return from_date + timedelta(weeks=amount)
            if self.unit == RecurrenceUnit.MONTH:
                return add_months(from_date, amount, anchor_day)
            if self.unit == RecurrenceUnit.YEAR:
                return add_months(from_date, amount * 12, anchor_day)
        except (OverflowError, ValueError) as e:
            raise CalendarArithmeticExhausted(from_date, str(self)) from e

        msg = f"unhandled unit {self.unit!r}"
        raise InvalidRuleError(msg, unit=self.unit)

    def next_occurrence(
        self,
        from_date: date,
        include_start_day_in_count: bool = True,
        anchor_day: Optional[int] = None,
    ) -> Optional[date]:
        """Return the occurrence following ``from_date``.

        With ``include_start_day_in_count`` the anchor day has already been
        consumed and the result is one full step later. Without it the
        anchor itself has not been counted yet and is returned unchanged.

        Returns None when the calendar cannot go any further; callers must
        end the series there.
        """
        if not include_start_day_in_count:
            return from_date

        try:
            return self.advance(from_date, anchor_day=anchor_day)
        except CalendarArithmeticExhausted:
            logger.warning(
                "Recurrence %s cannot continue after %s, ending series",
                self,
                from_date,
            )
            return None

    def next_occurrences(
        self,
        from_date: date,
        count: int,
        include_start_day_in_count: bool = True,
        end_date: Optional[date] = None,
        anchor_day: Optional[int] = None,
    ) -> List[date]:
        """Preview up to ``count`` occurrences after ``from_date``."""
        dates: List[date] = []
        for occurrence in self.iter_occurrences(
            from_date,
            include_start_day_in_count=include_start_day_in_count,
            end_date=end_date,
            anchor_day=anchor_day,
        ):
            if len(dates) >= count:
                break
            dates.append(occurrence)
        return dates

    def iter_occurrences(
        self,
        series_start: date,
        include_start_day_in_count: bool = True,
        end_date: Optional[date] = None,
        anchor_day: Optional[int] = None,
    ) -> Iterator[date]:
        """Yield occurrences in date order, starting from ``series_start``.

        Only the first step honours ``include_start_day_in_count``; every
        later step consumes its anchor. Stops after ``end_date`` or when the
        calendar runs out.
        """
        current = self.next_occurrence(
            series_start,
            include_start_day_in_count,
            anchor_day=anchor_day,
        )
        steps = 0
        while current is not None and steps < MAX_WALK_STEPS:
            if end_date is not None and current > end_date:
                return
            yield current
            steps += 1
            current = self.next_occurrence(current, True, anchor_day=anchor_day)

    def occurrences_between(  # NOQA: PLR0913
        self,
        series_start: date,
        window_start: date,
        window_end: date,
        include_start_day_in_count: bool = False,
        end_date: Optional[date] = None,
        anchor_day: Optional[int] = None,
    ) -> int:
        """Count occurrences falling inside ``[window_start, window_end]``."""
        if window_end < window_start:
            return 0

        count = 0
        for occurrence in self.iter_occurrences(
            series_start,
            include_start_day_in_count=include_start_day_in_count,
            end_date=end_date,
            anchor_day=anchor_day,
        ):
            if occurrence > window_end:
                break
            if occurrence >= window_start:
                count += 1
        return count
