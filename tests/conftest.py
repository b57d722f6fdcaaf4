"""Pytest fixtures for payroll core tests."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Callable

import pytest

from payroll_core.calculators.periods import PayPeriod
from payroll_core.calculators.types import ClockInterval
from payroll_core.config import Settings

MANILA = timezone(timedelta(hours=8))


@pytest.fixture
def settings() -> Settings:
    """Explicit settings, independent of the environment."""
    return Settings(
        local_utc_offset_hours=8,
        working_days_per_month=22,
        strict_day_types=False,
    )


@pytest.fixture
def january_first_half() -> PayPeriod:
    """2026-01-01 .. 2026-01-15 (Jan 1 is a Thursday)."""
    return PayPeriod.starting(date(2026, 1, 1))


@pytest.fixture
def make_interval() -> Callable[..., ClockInterval]:
    """Build a closed interval from a local (UTC+8) clock-in, stored in UTC."""

    def _make(
        day: date,
        start: time = time(8, 0),
        hours: float = 9,
        regular_hours: str = "8",
        overtime_hours: str = "0",
        night_diff_hours: str = "0",
        employee_ref: str = "EMP-001",
        closed: bool = True,
    ) -> ClockInterval:
        local_start = datetime.combine(day, start, tzinfo=MANILA)
        utc_start = local_start.astimezone(timezone.utc)
        return ClockInterval(
            employee_ref=employee_ref,
            start=utc_start,
            end=utc_start + timedelta(hours=hours) if closed else None,
            regular_hours=Decimal(regular_hours),
            overtime_hours=Decimal(overtime_hours),
            night_diff_hours=Decimal(night_diff_hours),
        )

    return _make


@pytest.fixture
def weekday_intervals(make_interval, january_first_half) -> list[ClockInterval]:
    """One closed interval on every weekday of the January first half."""
    return [make_interval(day) for day in january_first_half.days() if day.weekday() < 5]
