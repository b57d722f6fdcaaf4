"""BIR withholding tax on compensation, monthly table (effective 2023-01-01).

Applied to monthly taxable income: gross pay minus the mandatory SSS,
PhilHealth and Pag-IBIG employee shares. The full monthly tax is usually
withheld on the second cutoff of the month.

| Monthly compensation | Prescribed withholding tax       |
|----------------------|----------------------------------|
| 20,833 and below     | 0.00                             |
| 20,833 - 33,332      | 0.00 + 15% over 20,833           |
| 33,333 - 66,666      | 1,875.00 + 20% over 33,333       |
| 66,667 - 166,666     | 8,541.80 + 25% over 66,667       |
| 166,667 - 666,666    | 33,541.80 + 30% over 166,667     |
| 666,667 and above    | 183,541.80 + 35% over 666,667    |
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from payroll_core.calculators.money import ZERO, Number, round_money, to_decimal


@dataclass(frozen=True)
class WithholdingBracket:
    """One row of the monthly table."""

    max_compensation: Decimal | None  # Inclusive; None = no upper limit
    prescribed_tax: Decimal
    rate: Decimal
    excess_over: Decimal


BIR_MONTHLY_TABLE: tuple[WithholdingBracket, ...] = (
    WithholdingBracket(Decimal("20833"), Decimal("0"), Decimal("0"), Decimal("0")),
    WithholdingBracket(Decimal("33332"), Decimal("0"), Decimal("0.15"), Decimal("20833")),
    WithholdingBracket(Decimal("66666"), Decimal("1875.00"), Decimal("0.20"), Decimal("33333")),
    WithholdingBracket(Decimal("166666"), Decimal("8541.80"), Decimal("0.25"), Decimal("66667")),
    WithholdingBracket(Decimal("666666"), Decimal("33541.80"), Decimal("0.30"), Decimal("166667")),
    WithholdingBracket(None, Decimal("183541.80"), Decimal("0.35"), Decimal("666667")),
)


@dataclass(frozen=True)
class WithholdingTaxBreakdown:
    """Withholding tax with the table row that produced it."""

    taxable_income: Decimal
    range_index: int  # 1-based row of the table
    range_label: str
    prescribed_tax: Decimal
    rate_percent: Decimal
    excess_over: Decimal
    excess_amount: Decimal
    tax_on_excess: Decimal
    withholding_tax: Decimal


def _range_label(index: int, bracket: WithholdingBracket) -> str:
    if index == 0:
        return f"PHP {bracket.max_compensation:,} and below"
    if bracket.max_compensation is None:
        return f"Over PHP {bracket.excess_over:,}"
    return f"PHP {bracket.excess_over:,} - PHP {bracket.max_compensation:,}"


def find_withholding_bracket(monthly_taxable_income: Decimal) -> tuple[int, WithholdingBracket]:
    for index, bracket in enumerate(BIR_MONTHLY_TABLE):
        if bracket.max_compensation is None or monthly_taxable_income <= bracket.max_compensation:
            return index, bracket
    return len(BIR_MONTHLY_TABLE) - 1, BIR_MONTHLY_TABLE[-1]


def withholding_tax_breakdown(monthly_taxable_income: Number) -> WithholdingTaxBreakdown:
    """Compute monthly withholding tax with its table breakdown.

    Negative taxable income is treated as zero.
    """
    income = max(to_decimal(monthly_taxable_income), ZERO)
    index, bracket = find_withholding_bracket(income)

    excess = max(ZERO, income - bracket.excess_over)
    tax_on_excess = excess * bracket.rate

    return WithholdingTaxBreakdown(
        taxable_income=income,
        range_index=index + 1,
        range_label=_range_label(index, bracket),
        prescribed_tax=bracket.prescribed_tax,
        rate_percent=bracket.rate * 100,
        excess_over=bracket.excess_over,
        excess_amount=round_money(excess),
        tax_on_excess=round_money(tax_on_excess),
        withholding_tax=round_money(bracket.prescribed_tax + tax_on_excess),
    )


def calculate_withholding_tax(monthly_taxable_income: Number) -> Decimal:
    """Monthly withholding tax amount."""
    return withholding_tax_breakdown(monthly_taxable_income).withholding_tax
