"""Grouping of clock intervals into local civil days.

Clock timestamps are stored in UTC. The work day an interval belongs to is
the calendar date of its clock-in at the employee's fixed local offset
(UTC+8 by default); a clock-in at 23:30 local time stays on that day even
though the UTC timestamp is on the previous date.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import date, timedelta, timezone, tzinfo
from typing import Iterable

from payroll_core.calculators.types import ClockInterval, DailySummary
from payroll_core.exceptions import ConcurrentOpenInterval

logger = logging.getLogger(__name__)

DEFAULT_UTC_OFFSET_HOURS = 8


def fixed_offset(hours: float = DEFAULT_UTC_OFFSET_HOURS) -> tzinfo:
    return timezone(timedelta(hours=hours))


def closed_intervals(intervals: Iterable[ClockInterval]) -> list[ClockInterval]:
    """Drop intervals that are still open."""
    result: list[ClockInterval] = []
    skipped = 0
    for interval in intervals:
        if interval.is_closed:
            result.append(interval)
        else:
            skipped += 1
    if skipped:
        logger.debug("Ignored %d open clock interval(s)", skipped)
    return result


def worked_dates(
    intervals: Iterable[ClockInterval],
    tz: tzinfo | None = None,
) -> frozenset[date]:
    """Local civil dates that have at least one closed interval."""
    tz = tz or fixed_offset()
    return frozenset(interval.local_date(tz) for interval in closed_intervals(intervals))


def group_by_day(
    intervals: Iterable[ClockInterval],
    tz: tzinfo | None = None,
) -> dict[date, DailySummary]:
    """Sum the hours of closed intervals per local civil day.

    Returns summaries keyed and ordered by date.
    """
    tz = tz or fixed_offset()
    summaries: dict[date, DailySummary] = {}

    for interval in sorted(closed_intervals(intervals), key=lambda i: i.start):
        day = interval.local_date(tz)
        summary = summaries.get(day)
        if summary is None:
            summary = DailySummary(date=day)
            summaries[day] = summary

        summary.regular_hours += interval.regular_hours
        summary.overtime_hours += interval.overtime_hours
        summary.night_diff_hours += interval.night_diff_hours
        summary.total_hours += interval.total_hours
        summary.intervals.append(interval)

    return dict(sorted(summaries.items()))


def assert_single_open_interval(intervals: Iterable[ClockInterval]) -> None:
    """Check that no employee has more than one open interval.

    Intended for the clock-in boundary; the base-pay calculator assumes
    the invariant and never calls this.

    Raises:
        ConcurrentOpenInterval: For the first employee with several open intervals
    """
    open_counts = Counter(i.employee_ref for i in intervals if i.is_open)
    for employee_ref, count in open_counts.items():
        if count > 1:
            raise ConcurrentOpenInterval(employee_ref, count)
