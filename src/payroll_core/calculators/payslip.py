"""Net pay assembly for a payslip.

NET = GROSS - sum(positive deductions) - negative adjustment + allowance

A negative ``adjustment`` is an addition to pay; any other non-positive
deduction is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

from payroll_core.calculators.money import ZERO, Number, round_money, to_decimal

ADJUSTMENT = "adjustment"


@dataclass(frozen=True)
class NetPay:
    net_pay: Decimal
    total_deductions: Decimal
    breakdown: Mapping[str, Decimal] = field(default_factory=dict)


def calculate_net_pay(
    gross_pay: Number,
    deductions: Mapping[str, Number | None],
    allowance: Number = ZERO,
) -> NetPay:
    """Calculate net pay after deductions.

    Args:
        gross_pay: Gross pay for the period
        deductions: Deduction amounts by key; missing or zero entries are skipped
        allowance: Non-taxable allowance added after deductions

    Returns:
        NetPay with the positive deductions itemized
    """
    breakdown: dict[str, Decimal] = {}
    total = ZERO

    for key, value in deductions.items():
        if value is None:
            continue
        amount = to_decimal(value)
        if amount > 0:
            breakdown[key] = round_money(amount)
            total += amount

    adjustment = deductions.get(ADJUSTMENT)
    if adjustment is not None and to_decimal(adjustment) < 0:
        total += to_decimal(adjustment)

    net = to_decimal(gross_pay) - total + to_decimal(allowance)

    return NetPay(
        net_pay=round_money(net),
        total_deductions=round_money(total),
        breakdown=breakdown,
    )
