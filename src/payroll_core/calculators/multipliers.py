"""Day-type pay multipliers (Philippine Labor Code).

Formulas:
- Regular pay:  HRS x RATE/HR x DAY_MULTIPLIER
- Overtime pay: HRS x RATE/HR x OT_MULTIPLIER, where OT_MULTIPLIER is the
  day multiplier with the 30% overtime premium on top (1.25 on ordinary days)
- Night diff:   HRS x RATE/HR x 0.10, on every day type

Components are rounded to cents only when the breakdown is produced. Period
totals are summed from the unrounded components.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping

from payroll_core.calculators.money import ZERO, Number, round_money, to_decimal
from payroll_core.calculators.types import (
    AttendanceDay,
    DayType,
    PayBreakdown,
    PayLineCode,
    PayLineItem,
)
from payroll_core.exceptions import UnclassifiedDayType

logger = logging.getLogger(__name__)

OT_PREMIUM = Decimal("1.3")
REGULAR_OT_MULTIPLIER = Decimal("1.25")
NIGHT_DIFF_MULTIPLIER = Decimal("0.1")

UNCLASSIFIED_DESCRIPTION = "Unclassified Day"


@dataclass(frozen=True)
class DayRate:
    """Multipliers for one day type."""

    day_type: DayType
    regular_multiplier: Decimal
    overtime_multiplier: Decimal

    @property
    def description(self) -> str:
        return self.day_type.label


DAY_RATES: tuple[DayRate, ...] = (
    DayRate(DayType.REGULAR, Decimal("1.0"), REGULAR_OT_MULTIPLIER),
    DayRate(DayType.SUNDAY_RESTDAY, Decimal("1.3"), Decimal("1.3") * OT_PREMIUM),
    DayRate(DayType.NON_WORKING_HOLIDAY, Decimal("1.3"), Decimal("1.3") * OT_PREMIUM),
    DayRate(DayType.REGULAR_HOLIDAY, Decimal("2.0"), Decimal("2.0") * OT_PREMIUM),
    DayRate(DayType.SUNDAY_SPECIAL_HOLIDAY, Decimal("1.5"), Decimal("1.5") * OT_PREMIUM),
    DayRate(DayType.SUNDAY_REGULAR_HOLIDAY, Decimal("2.6"), Decimal("2.6") * OT_PREMIUM),
)

RATE_TABLE: Mapping[DayType, DayRate] = MappingProxyType(
    {rate.day_type: rate for rate in DAY_RATES}
)


def lookup_day_rate(day_type: DayType | str, strict: bool = False) -> DayRate | None:
    """Find the multipliers for a day type.

    Returns None for an unknown day type unless ``strict`` is set.

    Raises:
        UnclassifiedDayType: In strict mode, for an unknown day type
    """
    try:
        return RATE_TABLE[DayType(day_type)]
    except ValueError:
        if strict:
            raise UnclassifiedDayType(day_type) from None
        logger.warning("Unknown day type %r, regular and overtime pay set to zero", day_type)
        return None


def multiplier_for(day_type: DayType | str) -> Decimal:
    """Regular-hours multiplier for a day type (0 when unknown)."""
    rate = lookup_day_rate(day_type)
    return rate.regular_multiplier if rate else ZERO


def day_type_label(day_type: DayType | str) -> str:
    rate = lookup_day_rate(day_type)
    return rate.description if rate else UNCLASSIFIED_DESCRIPTION


@dataclass(frozen=True)
class _RawPay:
    """Unrounded components for one day."""

    rate: DayRate | None
    day_type: str
    regular_hours: Decimal
    overtime_hours: Decimal
    night_diff_hours: Decimal
    rate_per_hour: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    night_diff_pay: Decimal

    @property
    def total(self) -> Decimal:
        return self.regular_pay + self.overtime_pay + self.night_diff_pay


def _require_non_negative(**values: Decimal) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


def _compute(
    day_type: DayType | str,
    regular_hours: Number,
    overtime_hours: Number,
    night_diff_hours: Number,
    rate_per_hour: Number,
    strict: bool,
) -> _RawPay:
    regular_hours = to_decimal(regular_hours)
    overtime_hours = to_decimal(overtime_hours)
    night_diff_hours = to_decimal(night_diff_hours)
    rate_per_hour = to_decimal(rate_per_hour)
    _require_non_negative(
        regular_hours=regular_hours,
        overtime_hours=overtime_hours,
        night_diff_hours=night_diff_hours,
        rate_per_hour=rate_per_hour,
    )

    rate = lookup_day_rate(day_type, strict=strict)
    if rate is None:
        regular_pay = ZERO
        overtime_pay = ZERO
        label = str(day_type.value if isinstance(day_type, DayType) else day_type)
    else:
        regular_pay = regular_hours * rate_per_hour * rate.regular_multiplier
        overtime_pay = overtime_hours * rate_per_hour * rate.overtime_multiplier
        label = rate.day_type.value

    # Night differential is independent of the day type
    night_diff_pay = night_diff_hours * rate_per_hour * NIGHT_DIFF_MULTIPLIER

    return _RawPay(
        rate=rate,
        day_type=label,
        regular_hours=regular_hours,
        overtime_hours=overtime_hours,
        night_diff_hours=night_diff_hours,
        rate_per_hour=rate_per_hour,
        regular_pay=regular_pay,
        overtime_pay=overtime_pay,
        night_diff_pay=night_diff_pay,
    )


def _line_items(raw: _RawPay) -> tuple[PayLineItem, ...]:
    items: list[PayLineItem] = []
    if raw.rate is not None and raw.regular_hours > 0:
        items.append(
            PayLineItem(
                code=PayLineCode.REGULAR,
                description=f"{raw.rate.description} hours",
                hours=raw.regular_hours,
                rate=raw.rate_per_hour,
                multiplier=raw.rate.regular_multiplier,
                amount=round_money(raw.regular_pay),
            )
        )
    if raw.rate is not None and raw.overtime_hours > 0:
        items.append(
            PayLineItem(
                code=PayLineCode.OVERTIME,
                description=f"{raw.rate.description} overtime",
                hours=raw.overtime_hours,
                rate=raw.rate_per_hour,
                multiplier=raw.rate.overtime_multiplier,
                amount=round_money(raw.overtime_pay),
            )
        )
    if raw.night_diff_hours > 0:
        items.append(
            PayLineItem(
                code=PayLineCode.NIGHT_DIFF,
                description="Night differential",
                hours=raw.night_diff_hours,
                rate=raw.rate_per_hour,
                multiplier=NIGHT_DIFF_MULTIPLIER,
                amount=round_money(raw.night_diff_pay),
            )
        )
    return tuple(items)


def _to_breakdown(raw: _RawPay) -> PayBreakdown:
    return PayBreakdown(
        day_type=raw.day_type,
        description=raw.rate.description if raw.rate else UNCLASSIFIED_DESCRIPTION,
        multiplier=raw.rate.regular_multiplier if raw.rate else ZERO,
        regular_pay=round_money(raw.regular_pay),
        overtime_pay=round_money(raw.overtime_pay),
        night_diff_pay=round_money(raw.night_diff_pay),
        total=round_money(raw.total),
        line_items=_line_items(raw),
    )


def calculate_daily_pay(
    day_type: DayType | str,
    regular_hours: Number,
    overtime_hours: Number,
    night_diff_hours: Number,
    rate_per_hour: Number,
    strict: bool = False,
) -> PayBreakdown:
    """Calculate pay for a single day based on its day type.

    Args:
        day_type: Day classification (DayType or its string value)
        regular_hours: Hours within the schedule
        overtime_hours: Approved hours beyond the schedule
        night_diff_hours: Hours inside the night window
        rate_per_hour: Hourly rate
        strict: Raise on an unknown day type instead of paying zero

    Returns:
        PayBreakdown with every amount rounded to cents

    Raises:
        ValueError: If any hour figure or the rate is negative
        UnclassifiedDayType: In strict mode, for an unknown day type
    """
    raw = _compute(day_type, regular_hours, overtime_hours, night_diff_hours, rate_per_hour, strict)
    return _to_breakdown(raw)


def calculate_attendance_pay(
    day: AttendanceDay, rate_per_hour: Number, strict: bool = False
) -> PayBreakdown:
    return calculate_daily_pay(
        day.day_type,
        day.regular_hours,
        day.overtime_hours,
        day.night_diff_hours,
        rate_per_hour,
        strict=strict,
    )


@dataclass(frozen=True)
class PeriodPay:
    """Per-day breakdowns and period totals."""

    breakdown: tuple[PayBreakdown, ...]
    regular_pay: Decimal
    overtime_pay: Decimal
    night_diff_pay: Decimal
    total: Decimal

    @property
    def gross_pay(self) -> Decimal:
        return self.total


def calculate_period_pay(
    days: Iterable[AttendanceDay],
    rate_per_hour: Number,
    strict: bool = False,
) -> PeriodPay:
    """Calculate pay across many attendance days.

    Totals are accumulated from unrounded components and rounded once, so
    they can differ by a cent from the sum of the per-day figures.
    """
    raws = [
        _compute(
            day.day_type,
            day.regular_hours,
            day.overtime_hours,
            day.night_diff_hours,
            rate_per_hour,
            strict,
        )
        for day in days
    ]

    regular = sum((raw.regular_pay for raw in raws), ZERO)
    overtime = sum((raw.overtime_pay for raw in raws), ZERO)
    night_diff = sum((raw.night_diff_pay for raw in raws), ZERO)

    return PeriodPay(
        breakdown=tuple(_to_breakdown(raw) for raw in raws),
        regular_pay=round_money(regular),
        overtime_pay=round_money(overtime),
        night_diff_pay=round_money(night_diff),
        total=round_money(regular + overtime + night_diff),
    )
