"""Day-type classification from the calendar and a holiday list."""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from payroll_core.calculators.types import DayType, Holiday, HolidayKind

SUNDAY = 6  # date.weekday()
SATURDAY = 5

# (is_rest_day, holiday kind) -> day type
_CLASSIFICATION: Mapping[tuple[bool, HolidayKind | None], DayType] = MappingProxyType({
    (True, HolidayKind.REGULAR): DayType.SUNDAY_REGULAR_HOLIDAY,
    (True, HolidayKind.NON_WORKING): DayType.SUNDAY_SPECIAL_HOLIDAY,
    (False, HolidayKind.REGULAR): DayType.REGULAR_HOLIDAY,
    (False, HolidayKind.NON_WORKING): DayType.NON_WORKING_HOLIDAY,
    (True, None): DayType.SUNDAY_RESTDAY,
    (False, None): DayType.REGULAR,
})


def is_sunday(day: date) -> bool:
    return day.weekday() == SUNDAY


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def holidays_by_date(holidays: Iterable[Holiday]) -> dict[date, Holiday]:
    """Index holidays by date. A regular holiday wins over a non-working one."""
    index: dict[date, Holiday] = {}
    for holiday in holidays:
        existing = index.get(holiday.date)
        if existing is None or holiday.kind == HolidayKind.REGULAR:
            index[holiday.date] = holiday
    return index


def holiday_dates(holidays: Iterable[Holiday | date]) -> frozenset[date]:
    return frozenset(h.date if isinstance(h, Holiday) else h for h in holidays)


def determine_day_type(
    day: date,
    holidays: Iterable[Holiday],
    is_rest_day: Optional[Callable[[date], bool]] = None,
) -> DayType:
    """Classify a calendar day.

    A rest day (Sunday unless a schedule predicate says otherwise) combines
    with a holiday into the Sunday holiday types; otherwise the holiday kind
    decides, then the rest day, then a regular day.
    """
    holiday = holidays_by_date(holidays).get(day)
    kind = holiday.kind if holiday else None
    resting = is_rest_day(day) if is_rest_day else is_sunday(day)
    return _CLASSIFICATION[(bool(resting), kind)]
