"""Type definitions for the calculation core."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone, tzinfo
from decimal import Decimal
from enum import Enum
from typing import Optional

ZERO = Decimal("0")


class DayType(str, Enum):
    """Day classification that selects the pay multipliers."""

    REGULAR = "regular"
    SUNDAY_RESTDAY = "sunday-restday"
    NON_WORKING_HOLIDAY = "non-working-holiday"
    REGULAR_HOLIDAY = "regular-holiday"
    SUNDAY_SPECIAL_HOLIDAY = "sunday-special-holiday"
    SUNDAY_REGULAR_HOLIDAY = "sunday-regular-holiday"

    @classmethod
    def _missing_(cls, value: object) -> Optional[DayType]:
        # Older attendance records label rest days plain "sunday"
        if value == "sunday":
            return cls.SUNDAY_RESTDAY
        return None

    @property
    def label(self) -> str:
        return DAY_TYPE_LABELS[self]


DAY_TYPE_LABELS = {
    DayType.REGULAR: "Regular Day",
    DayType.SUNDAY_RESTDAY: "Sunday/Rest Day",
    DayType.NON_WORKING_HOLIDAY: "Non-Working Holiday",
    DayType.REGULAR_HOLIDAY: "Regular Holiday",
    DayType.SUNDAY_SPECIAL_HOLIDAY: "Sunday + Special Holiday",
    DayType.SUNDAY_REGULAR_HOLIDAY: "Sunday + Regular Holiday",
}


class HolidayKind(str, Enum):
    """Statutory holiday categories."""

    REGULAR = "regular"
    NON_WORKING = "non-working"


class PayLineCode(str, Enum):
    """Pay line item codes within a day's breakdown."""

    REGULAR = "REGULAR"
    OVERTIME = "OVERTIME"
    NIGHT_DIFF = "NIGHT_DIFF"


@dataclass(frozen=True)
class Holiday:
    """A dated statutory holiday."""

    date: date
    name: str
    kind: HolidayKind


@dataclass(frozen=True)
class AttendanceDay:
    """Hours worked on one calendar day, already classified."""

    date: date
    day_type: DayType | str
    regular_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    night_diff_hours: Decimal = ZERO
    scheduled_hours: Decimal = Decimal("8")


@dataclass(frozen=True)
class PayLineItem:
    """One monetary component of a day's pay."""

    code: PayLineCode
    description: str
    hours: Decimal
    rate: Decimal
    multiplier: Decimal
    amount: Decimal  # Rounded to cents


@dataclass(frozen=True)
class PayBreakdown:
    """Pay for a single day, rounded at output."""

    day_type: str
    description: str
    multiplier: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    night_diff_pay: Decimal
    total: Decimal
    line_items: tuple[PayLineItem, ...] = ()


@dataclass(frozen=True)
class ContributionResult:
    """Employee/employer split of a statutory contribution."""

    employee_share: Decimal
    employer_share: Decimal
    total: Decimal
    reference_bracket: Decimal | None = None  # Salary credit or contribution base


@dataclass(frozen=True)
class BasePayResult:
    """Base hours for a period after proration and absence deductions."""

    base_hours: Decimal
    absences: int
    absence_hours: Decimal
    final_base_hours: Decimal
    absence_dates: tuple[date, ...] = ()
    proration_factor: Decimal = Decimal("1")


@dataclass(frozen=True)
class ClockInterval:
    """A clock-in/clock-out pair owned by the attendance subsystem.

    Open while ``end`` is None. Naive timestamps are read as UTC.
    """

    employee_ref: str
    start: datetime
    end: datetime | None = None
    regular_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    night_diff_hours: Decimal = ZERO

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def is_closed(self) -> bool:
        return self.end is not None

    @property
    def total_hours(self) -> Decimal:
        if self.end is None:
            return ZERO
        seconds = Decimal(str((self.end - self.start).total_seconds()))
        return seconds / Decimal("3600")

    def local_date(self, tz: tzinfo) -> date:
        """Civil date of the clock-in in the given fixed-offset zone."""
        start = self.start
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        return start.astimezone(tz).date()


@dataclass
class DailySummary:
    """Clock hours grouped under one local civil day."""

    date: date
    regular_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    night_diff_hours: Decimal = ZERO
    total_hours: Decimal = ZERO
    intervals: list[ClockInterval] = field(default_factory=list)
