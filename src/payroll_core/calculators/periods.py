"""Semi-monthly pay period resolution.

Two payout windows each month:
- 1st period: 1 - 15
- 2nd period: 16 - last day of the month (28/29/30/31)
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Union

from payroll_core.exceptions import InvalidPeriodInput

logger = logging.getLogger(__name__)

FIRST_HALF_START = 1
SECOND_HALF_START = 16
FIRST_HALF_END = 15

DateInput = Union[date, datetime, str]


def last_day_of_month(year: int, month: int) -> int:
    """Last calendar day of a month, leap-year aware."""
    return calendar.monthrange(year, month)[1]


def period_start(day: date) -> date:
    """Start of the period containing ``day``: the 1st or the 16th."""
    start_day = FIRST_HALF_START if day.day <= FIRST_HALF_END else SECOND_HALF_START
    return date(day.year, day.month, start_day)


def period_end(start: date) -> date:
    """End of the period beginning on ``start``.

    A period starting on the 1st ends on the 15th; one starting on the 16th
    ends on the last calendar day of the month.
    """
    if start.day == FIRST_HALF_START:
        return date(start.year, start.month, FIRST_HALF_END)
    return date(start.year, start.month, last_day_of_month(start.year, start.month))


def next_period(start: date) -> date:
    """Start of the period after the one beginning on ``start``."""
    if start.day == FIRST_HALF_START:
        return date(start.year, start.month, SECOND_HALF_START)
    if start.month == 12:
        return date(start.year + 1, 1, FIRST_HALF_START)
    return date(start.year, start.month + 1, FIRST_HALF_START)


def previous_period(start: date) -> date:
    """Start of the period before the one beginning on ``start``."""
    if start.day == SECOND_HALF_START:
        return date(start.year, start.month, FIRST_HALF_START)
    if start.month == 1:
        return date(start.year - 1, 12, SECOND_HALF_START)
    return date(start.year, start.month - 1, SECOND_HALF_START)


def period_days(start: date) -> list[date]:
    """Every calendar day of the period, weekends included."""
    end = period_end(start)
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def is_date_in_period(day: date, start: date, end: date) -> bool:
    return start <= day <= end


def format_period(start: date, end: date) -> str:
    """Render a period like ``Jan 1 - 15, 2026``."""
    return f"{start.strftime('%b')} {start.day} - {end.day}, {end.year}"


def coerce_date(value: DateInput | None) -> date:
    """Read a reference date from a date, datetime or ISO string.

    Raises:
        InvalidPeriodInput: If the value is missing or unparseable
    """
    if value is None:
        raise InvalidPeriodInput(value)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidPeriodInput(value) from exc
    raise InvalidPeriodInput(value)


@dataclass(frozen=True)
class PayPeriod:
    """A half-month payroll window."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start.day not in (FIRST_HALF_START, SECOND_HALF_START):
            raise InvalidPeriodInput(self.start)
        if self.end != period_end(self.start):
            raise InvalidPeriodInput(self.end)

    @classmethod
    def starting(cls, start: date) -> PayPeriod:
        return cls(start=start, end=period_end(start))

    @property
    def total_days(self) -> int:
        return (self.end - self.start).days + 1

    def days(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def contains(self, day: date) -> bool:
        return is_date_in_period(day, self.start, self.end)

    def next(self) -> PayPeriod:
        return PayPeriod.starting(next_period(self.start))

    def previous(self) -> PayPeriod:
        return PayPeriod.starting(previous_period(self.start))

    def label(self) -> str:
        return format_period(self.start, self.end)


def resolve_period(reference: DateInput | None) -> PayPeriod:
    """Resolve the pay period enclosing a reference date.

    Args:
        reference: A date, datetime or ``YYYY-MM-DD`` string

    Returns:
        The enclosing PayPeriod

    Raises:
        InvalidPeriodInput: If the reference is missing or unparseable
    """
    day = coerce_date(reference)
    period = PayPeriod.starting(period_start(day))
    logger.debug("Resolved %s to period %s..%s", day, period.start, period.end)
    return period
