"""Tests for day-type classification."""

from datetime import date

import pytest

from payroll_core.calculators.holidays import (
    determine_day_type,
    holidays_by_date,
    is_sunday,
    is_weekend,
)
from payroll_core.calculators.types import DayType, Holiday, HolidayKind

# 2026-01-04 and 2026-01-11 are Sundays
HOLIDAYS = [
    Holiday(date(2026, 1, 1), "New Year's Day", HolidayKind.REGULAR),
    Holiday(date(2026, 1, 2), "Special Non-Working Day", HolidayKind.NON_WORKING),
    Holiday(date(2026, 1, 4), "Sunday Regular Holiday", HolidayKind.REGULAR),
    Holiday(date(2026, 1, 11), "Sunday Special Holiday", HolidayKind.NON_WORKING),
]


class TestDetermineDayType:
    """Test the holiday/Sunday combinations."""

    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2026, 1, 1), DayType.REGULAR_HOLIDAY),
            (date(2026, 1, 2), DayType.NON_WORKING_HOLIDAY),
            (date(2026, 1, 4), DayType.SUNDAY_REGULAR_HOLIDAY),
            (date(2026, 1, 11), DayType.SUNDAY_SPECIAL_HOLIDAY),
            (date(2026, 1, 18), DayType.SUNDAY_RESTDAY),
            (date(2026, 1, 5), DayType.REGULAR),
            (date(2026, 1, 3), DayType.REGULAR),  # Saturday is not a rest-day premium
        ],
    )
    def test_classification(self, day, expected):
        assert determine_day_type(day, HOLIDAYS) == expected

    def test_schedule_rest_day(self):
        """A client schedule can make a Wednesday the rest day."""
        wednesday = date(2026, 1, 7)
        rest = {wednesday}

        assert determine_day_type(wednesday, [], rest.__contains__) == DayType.SUNDAY_RESTDAY
        assert determine_day_type(date(2026, 1, 18), [], rest.__contains__) == DayType.REGULAR

    def test_regular_holiday_wins_on_duplicate_dates(self):
        holidays = [
            Holiday(date(2026, 4, 2), "Special", HolidayKind.NON_WORKING),
            Holiday(date(2026, 4, 2), "Maundy Thursday", HolidayKind.REGULAR),
        ]

        assert holidays_by_date(holidays)[date(2026, 4, 2)].name == "Maundy Thursday"
        assert determine_day_type(date(2026, 4, 2), holidays) == DayType.REGULAR_HOLIDAY


class TestCalendarHelpers:
    def test_sunday_and_weekend(self):
        assert is_sunday(date(2026, 1, 4))
        assert not is_sunday(date(2026, 1, 3))
        assert is_weekend(date(2026, 1, 3))
        assert not is_weekend(date(2026, 1, 5))

    def test_day_type_labels(self):
        assert DayType.SUNDAY_RESTDAY.label == "Sunday/Rest Day"
        assert DayType("sunday") is DayType.SUNDAY_RESTDAY
