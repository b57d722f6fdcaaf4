"""Base pay hours for a semi-monthly period.

- Base: 104 hours (13 days x 8 hours) per period, prorated for a hire or
  termination inside the period
- Deduct 8 hours for each scheduled work day with no closed clock interval
- Office-based employees rest on Saturday and Sunday
- Client-based employees rest on the dates their client schedule marks
- Holidays count toward the 13 days; a missed holiday is not an absence
"""

from __future__ import annotations

import logging
from datetime import date, tzinfo
from decimal import Decimal
from typing import Callable, Iterable, Mapping, Optional

from payroll_core.calculators.holidays import holiday_dates, is_weekend
from payroll_core.calculators.money import ZERO, round_hours
from payroll_core.calculators.periods import PayPeriod
from payroll_core.calculators.timekeeping import worked_dates
from payroll_core.calculators.types import BasePayResult, ClockInterval, Holiday

logger = logging.getLogger(__name__)

BASE_DAYS_PER_PERIOD = 13
HOURS_PER_DAY = Decimal("8")
BASE_HOURS_PER_PERIOD = BASE_DAYS_PER_PERIOD * HOURS_PER_DAY

RestDayPredicate = Callable[[date], bool]


def office_rest_days() -> RestDayPredicate:
    """Office-based schedule: Saturday and Sunday are always rest days."""
    return is_weekend


def client_rest_days(rest_days: Mapping[date, bool]) -> RestDayPredicate:
    """Client-based schedule: rest days come from an explicit per-date map."""
    frozen = dict(rest_days)

    def is_rest_day(day: date) -> bool:
        return frozen.get(day) is True

    return is_rest_day


def proration_factor(
    period: PayPeriod,
    hire_date: Optional[date] = None,
    termination_date: Optional[date] = None,
) -> Decimal:
    """Share of the period the employee was employed for.

    1 unless the hire date falls after the period start or the termination
    date falls before the period end.
    """
    hired_mid_period = hire_date is not None and hire_date > period.start
    terminated_mid_period = termination_date is not None and termination_date < period.end
    if not (hired_mid_period or terminated_mid_period):
        return Decimal("1")

    actual_start = max(hire_date, period.start) if hire_date else period.start
    actual_end = min(termination_date, period.end) if termination_date else period.end
    actual_days = max(0, (actual_end - actual_start).days + 1)

    return Decimal(actual_days) / Decimal(period.total_days)


def find_absences(
    period: PayPeriod,
    worked: Iterable[date],
    is_rest_day: RestDayPredicate,
    holidays: Iterable[date],
    hire_date: Optional[date] = None,
    termination_date: Optional[date] = None,
) -> list[date]:
    """Scheduled work days in the period with no worked date."""
    worked = frozenset(worked)
    holidays = frozenset(holidays)
    absences: list[date] = []

    for day in period.days():
        if hire_date and day < hire_date:
            continue
        if termination_date and day > termination_date:
            continue
        if is_rest_day(day):
            continue
        if day in holidays:
            continue
        if day not in worked:
            absences.append(day)

    return absences


def calculate_base_pay(
    period: PayPeriod,
    clock_intervals: Iterable[ClockInterval],
    holidays: Iterable[Holiday | date] = (),
    is_rest_day: Optional[RestDayPredicate] = None,
    hire_date: Optional[date] = None,
    termination_date: Optional[date] = None,
    tz: Optional[tzinfo] = None,
) -> BasePayResult:
    """Calculate base hours for a period after absences.

    Args:
        period: The pay period
        clock_intervals: The employee's clock intervals; open ones are ignored
        holidays: Holidays (or bare holiday dates) falling in the period
        is_rest_day: Rest-day predicate, office schedule when omitted
        hire_date: Hire date, for proration
        termination_date: Termination date, for proration
        tz: Fixed-offset zone for the employee's civil day, UTC+8 when omitted

    Returns:
        BasePayResult with base, absence and final hours
    """
    is_rest_day = is_rest_day or office_rest_days()

    factor = proration_factor(period, hire_date, termination_date)
    base_hours = round_hours(BASE_HOURS_PER_PERIOD * factor)

    absence_dates = find_absences(
        period,
        worked_dates(clock_intervals, tz),
        is_rest_day,
        holiday_dates(holidays),
        hire_date=hire_date,
        termination_date=termination_date,
    )

    absences = len(absence_dates)
    absence_hours = absences * HOURS_PER_DAY
    final_base_hours = max(ZERO, base_hours - absence_hours)

    logger.debug(
        "Base pay for %s: base=%s absences=%d final=%s",
        period.label(),
        base_hours,
        absences,
        final_base_hours,
    )

    return BasePayResult(
        base_hours=base_hours,
        absences=absences,
        absence_hours=absence_hours,
        final_base_hours=final_base_hours,
        absence_dates=tuple(absence_dates),
        proration_factor=factor,
    )
