"""Payroll calculator - orchestrates the computation core for one employee."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from payroll_core.calculators.base_pay import (
    RestDayPredicate,
    calculate_base_pay,
    client_rest_days,
    office_rest_days,
)
from payroll_core.calculators.contributions import (
    AllContributions,
    calculate_all_contributions,
    monthly_salary_from_daily_rate,
    validate_monthly_salary,
)
from payroll_core.calculators.holidays import determine_day_type
from payroll_core.calculators.money import Number
from payroll_core.calculators.multipliers import PeriodPay, calculate_period_pay
from payroll_core.calculators.periods import DateInput, PayPeriod, resolve_period
from payroll_core.calculators.timekeeping import group_by_day
from payroll_core.calculators.types import (
    AttendanceDay,
    BasePayResult,
    ClockInterval,
    Holiday,
)
from payroll_core.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeSchedule:
    """How an employee's rest days are decided.

    Office-based employees rest on weekends. Client-based employees rest
    on the dates their client schedule marks.
    """

    client_based: bool = False
    rest_days: Optional[Mapping[date, bool]] = None

    def rest_day_predicate(self) -> RestDayPredicate:
        if self.client_based:
            return client_rest_days(self.rest_days or {})
        return office_rest_days()


@dataclass(frozen=True)
class AttendanceResult:
    """Attendance surface output for one employee and period."""

    period: PayPeriod
    base_pay: BasePayResult
    days: tuple[AttendanceDay, ...]
    pay: PeriodPay


class PayrollCalculator:
    """Entry point for the period, attendance and contribution surfaces.

    Pipeline for an employee's period:
    1) Resolve the period from a reference date
    2) Bucket closed clock intervals into local civil days
    3) Compute base hours after proration and absences
    4) Classify each worked day and price it with the multiplier table
    5) Compute statutory contributions from the monthly salary
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def period(self, reference: DateInput | None) -> PayPeriod:
        return resolve_period(reference)

    def attendance_days(
        self,
        period: PayPeriod,
        clock_intervals: Iterable[ClockInterval],
        holidays: Iterable[Holiday] = (),
        schedule: EmployeeSchedule | None = None,
    ) -> list[AttendanceDay]:
        """Classified attendance days inside the period, in date order."""
        holidays = tuple(holidays)
        schedule = schedule or EmployeeSchedule()
        is_rest_day = schedule.rest_day_predicate() if schedule.client_based else None

        days: list[AttendanceDay] = []
        for day, summary in group_by_day(clock_intervals, self.settings.local_timezone).items():
            if not period.contains(day):
                continue
            days.append(
                AttendanceDay(
                    date=day,
                    day_type=determine_day_type(day, holidays, is_rest_day),
                    regular_hours=summary.regular_hours,
                    overtime_hours=summary.overtime_hours,
                    night_diff_hours=summary.night_diff_hours,
                )
            )
        return days

    def attendance(
        self,
        period: PayPeriod,
        clock_intervals: Iterable[ClockInterval],
        rate_per_hour: Number,
        holidays: Iterable[Holiday] = (),
        schedule: EmployeeSchedule | None = None,
        hire_date: Optional[date] = None,
        termination_date: Optional[date] = None,
    ) -> AttendanceResult:
        """Base hours and per-day pay for one employee's period."""
        intervals = tuple(clock_intervals)
        holidays = tuple(holidays)
        schedule = schedule or EmployeeSchedule()

        base_pay = calculate_base_pay(
            period,
            intervals,
            holidays=holidays,
            is_rest_day=schedule.rest_day_predicate(),
            hire_date=hire_date,
            termination_date=termination_date,
            tz=self.settings.local_timezone,
        )
        days = self.attendance_days(period, intervals, holidays, schedule)
        pay = calculate_period_pay(days, rate_per_hour, strict=self.settings.strict_day_types)

        logger.debug(
            "Attendance for %s: %d worked day(s), gross %s",
            period.label(),
            len(days),
            pay.total,
        )
        return AttendanceResult(period=period, base_pay=base_pay, days=tuple(days), pay=pay)

    def contributions(
        self,
        monthly_salary: Number | None = None,
        daily_rate: Number | None = None,
    ) -> AllContributions:
        """Statutory contributions from a monthly salary or a daily rate.

        Raises:
            ValueError: If neither figure is given
            NegativeOrInvalidSalary: If the salary is negative or not finite
        """
        if monthly_salary is None:
            if daily_rate is None:
                raise ValueError("Either monthly_salary or daily_rate is required")
            monthly_salary = monthly_salary_from_daily_rate(
                daily_rate, self.settings.working_days_per_month
            )
        salary: Decimal = validate_monthly_salary(monthly_salary)
        return calculate_all_contributions(salary)
