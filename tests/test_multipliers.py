"""Tests for the day-type pay multiplier table."""

from datetime import date
from decimal import Decimal

import pytest

from payroll_core.calculators.multipliers import (
    DAY_RATES,
    RATE_TABLE,
    calculate_attendance_pay,
    calculate_daily_pay,
    calculate_period_pay,
    day_type_label,
    multiplier_for,
)
from payroll_core.calculators.types import AttendanceDay, DayType, PayLineCode
from payroll_core.exceptions import UnclassifiedDayType

RATE = Decimal("100")


class TestRateTable:
    """Test the declarative multiplier table."""

    @pytest.mark.parametrize(
        "day_type,regular,overtime",
        [
            (DayType.REGULAR, "1.0", "1.25"),
            (DayType.SUNDAY_RESTDAY, "1.3", "1.69"),
            (DayType.NON_WORKING_HOLIDAY, "1.3", "1.69"),
            (DayType.REGULAR_HOLIDAY, "2.0", "2.6"),
            (DayType.SUNDAY_SPECIAL_HOLIDAY, "1.5", "1.95"),
            (DayType.SUNDAY_REGULAR_HOLIDAY, "2.6", "3.38"),
        ],
    )
    def test_multipliers(self, day_type, regular, overtime):
        rate = RATE_TABLE[day_type]

        assert rate.regular_multiplier == Decimal(regular)
        assert rate.overtime_multiplier == Decimal(overtime)

    def test_every_day_type_has_a_rate(self):
        assert {rate.day_type for rate in DAY_RATES} == set(DayType)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            RATE_TABLE[DayType.REGULAR] = RATE_TABLE[DayType.REGULAR_HOLIDAY]

    def test_multiplier_for_and_label(self):
        assert multiplier_for("regular-holiday") == Decimal("2.0")
        assert day_type_label(DayType.SUNDAY_SPECIAL_HOLIDAY) == "Sunday + Special Holiday"
        assert multiplier_for("mystery") == Decimal("0")


class TestDailyPay:
    """Test a single day's breakdown per day type."""

    def test_regular_holiday_scenario(self):
        """8 regular + 2 OT hours at 100/hr on a regular holiday."""
        result = calculate_daily_pay("regular-holiday", 8, 2, 0, RATE)

        assert result.regular_pay == Decimal("1600.00")
        assert result.overtime_pay == Decimal("520.00")
        assert result.night_diff_pay == Decimal("0.00")
        assert result.total == Decimal("2120.00")
        assert result.multiplier == Decimal("2.0")
        assert result.description == "Regular Holiday"

    def test_regular_day(self):
        result = calculate_daily_pay(DayType.REGULAR, 8, 2, 1, RATE)

        assert result.regular_pay == Decimal("800.00")
        assert result.overtime_pay == Decimal("250.00")
        assert result.night_diff_pay == Decimal("10.00")
        assert result.total == Decimal("1060.00")

    def test_rest_day(self):
        result = calculate_daily_pay(DayType.SUNDAY_RESTDAY, 8, 2, 1, RATE)

        assert result.regular_pay == Decimal("1040.00")
        assert result.overtime_pay == Decimal("338.00")
        assert result.total == Decimal("1388.00")

    def test_legacy_sunday_label(self):
        """Plain 'sunday' is read as the rest-day type."""
        result = calculate_daily_pay("sunday", 8, 0, 0, RATE)

        assert result.day_type == "sunday-restday"
        assert result.regular_pay == Decimal("1040.00")

    def test_sunday_holidays(self):
        special = calculate_daily_pay(DayType.SUNDAY_SPECIAL_HOLIDAY, 8, 2, 0, RATE)
        regular = calculate_daily_pay(DayType.SUNDAY_REGULAR_HOLIDAY, 8, 2, 0, RATE)

        assert (special.regular_pay, special.overtime_pay) == (Decimal("1200.00"), Decimal("390.00"))
        assert (regular.regular_pay, regular.overtime_pay) == (Decimal("2080.00"), Decimal("676.00"))

    def test_night_diff_independent_of_day_type(self):
        """Night differential is 10% of the base rate on every day type."""
        for day_type in DayType:
            result = calculate_daily_pay(day_type, 0, 0, 3, RATE)
            assert result.night_diff_pay == Decimal("30.00")
            assert result.total == Decimal("30.00")

    def test_fractional_hours_round_at_output(self):
        result = calculate_daily_pay(DayType.REGULAR, Decimal("7.5"), 0, 0, Decimal("57.123"))

        assert result.regular_pay == Decimal("428.42")

    def test_half_cent_rounds_up(self):
        result = calculate_daily_pay(DayType.REGULAR, 0, 0, 3, Decimal("57.125"))

        # 3 x 57.125 x 0.1 = 17.1375
        assert result.night_diff_pay == Decimal("17.14")

    def test_line_items(self):
        result = calculate_daily_pay(DayType.REGULAR_HOLIDAY, 8, 2, 0, RATE)

        assert [item.code for item in result.line_items] == [
            PayLineCode.REGULAR,
            PayLineCode.OVERTIME,
        ]
        assert [item.amount for item in result.line_items] == [
            Decimal("1600.00"),
            Decimal("520.00"),
        ]
        assert result.line_items[1].multiplier == Decimal("2.6")

    def test_zero_hours(self):
        result = calculate_daily_pay(DayType.REGULAR, 0, 0, 0, RATE)

        assert result.total == Decimal("0.00")
        assert result.line_items == ()

    def test_negative_hours_rejected(self):
        with pytest.raises(ValueError):
            calculate_daily_pay(DayType.REGULAR, -1, 0, 0, RATE)

    def test_attendance_day_input(self):
        day = AttendanceDay(
            date=date(2026, 1, 1),
            day_type=DayType.REGULAR_HOLIDAY,
            regular_hours=Decimal("8"),
            overtime_hours=Decimal("2"),
        )

        assert calculate_attendance_pay(day, RATE).total == Decimal("2120.00")


class TestUnknownDayType:
    """Test behavior for a day type outside the table."""

    def test_unknown_pays_zero_except_night_diff(self):
        result = calculate_daily_pay("company-anniversary", 8, 2, 1, RATE)

        assert result.regular_pay == Decimal("0.00")
        assert result.overtime_pay == Decimal("0.00")
        assert result.night_diff_pay == Decimal("10.00")
        assert result.total == Decimal("10.00")
        assert result.day_type == "company-anniversary"
        assert result.multiplier == Decimal("0")

    def test_unknown_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="payroll_core.calculators.multipliers"):
            calculate_daily_pay("company-anniversary", 8, 0, 0, RATE)

        assert "company-anniversary" in caplog.text

    def test_strict_mode_raises(self):
        with pytest.raises(UnclassifiedDayType) as exc_info:
            calculate_daily_pay("company-anniversary", 8, 0, 0, RATE, strict=True)

        assert exc_info.value.day_type == "company-anniversary"


class TestPeriodPay:
    """Test accumulation across days."""

    def test_totals(self):
        days = [
            AttendanceDay(date(2026, 1, 1), DayType.REGULAR_HOLIDAY, Decimal("8"), Decimal("2")),
            AttendanceDay(date(2026, 1, 2), DayType.REGULAR, Decimal("8"), Decimal("0"), Decimal("1")),
        ]

        result = calculate_period_pay(days, RATE)

        assert len(result.breakdown) == 2
        assert result.regular_pay == Decimal("2400.00")
        assert result.overtime_pay == Decimal("520.00")
        assert result.night_diff_pay == Decimal("10.00")
        assert result.total == Decimal("2930.00")
        assert result.gross_pay == result.total

    def test_totals_round_once(self):
        """Two half-cent night differentials total one cent, not two."""
        days = [
            AttendanceDay(date(2026, 1, 5), DayType.REGULAR, night_diff_hours=Decimal("1")),
            AttendanceDay(date(2026, 1, 6), DayType.REGULAR, night_diff_hours=Decimal("1")),
        ]

        result = calculate_period_pay(days, Decimal("0.05"))

        assert [day.night_diff_pay for day in result.breakdown] == [Decimal("0.01"), Decimal("0.01")]
        assert result.night_diff_pay == Decimal("0.01")

    def test_empty(self):
        result = calculate_period_pay([], RATE)

        assert result.total == Decimal("0.00")
        assert result.breakdown == ()
