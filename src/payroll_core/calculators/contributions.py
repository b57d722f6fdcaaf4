"""Philippine statutory contributions: SSS, Pag-IBIG and PhilHealth.

All three are computed from a monthly salary figure, usually the daily rate
times the working days per month. Results are rounded to cents at output.

These functions do not validate their input. Callers reject negative or
non-finite salaries first, for example with ``validate_monthly_salary``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from payroll_core.calculators.money import ZERO, Number, round_money, to_decimal
from payroll_core.calculators.types import ContributionResult
from payroll_core.exceptions import NegativeOrInvalidSalary

DEFAULT_WORKING_DAYS_PER_MONTH = 22


@dataclass(frozen=True)
class SalaryBracket:
    """Band mapping a salary range to a monthly salary credit.

    ``max_amount`` is exclusive; None means no upper limit.
    """

    min_amount: Decimal
    max_amount: Decimal | None
    credit: Decimal

    def contains(self, salary: Decimal) -> bool:
        if salary < self.min_amount:
            return False
        return self.max_amount is None or salary < self.max_amount


def _build_sss_brackets() -> tuple[SalaryBracket, ...]:
    # Credits step by 500 from 5,000 to 35,000; each band starts 250 below
    # its credit. Below 5,250 uses the 5,000 credit.
    brackets = [SalaryBracket(Decimal("0"), Decimal("5250"), Decimal("5000"))]
    for credit in range(5500, 35000, 500):
        brackets.append(
            SalaryBracket(Decimal(credit - 250), Decimal(credit + 250), Decimal(credit))
        )
    brackets.append(SalaryBracket(Decimal("34750"), None, Decimal("35000")))
    return tuple(brackets)


SSS_BRACKETS: tuple[SalaryBracket, ...] = _build_sss_brackets()

SSS_EMPLOYEE_RATE = Decimal("0.11")
SSS_EMPLOYER_RATE = Decimal("0.085")
SSS_TOTAL_RATE = SSS_EMPLOYEE_RATE + SSS_EMPLOYER_RATE  # 0.195

# Credit above this threshold goes to the Workers' Investment and Savings Program
SSS_WISP_THRESHOLD = Decimal("20000")

PAGIBIG_THRESHOLD = Decimal("1500")
PAGIBIG_EMPLOYEE_RATE_HIGH = Decimal("0.02")
PAGIBIG_EMPLOYER_RATE_HIGH = Decimal("0.02")
PAGIBIG_EMPLOYEE_RATE_LOW = Decimal("0.01")
PAGIBIG_EMPLOYER_RATE_LOW = Decimal("0.02")

PHILHEALTH_RATE = Decimal("0.04")
PHILHEALTH_FLOOR = Decimal("400")
PHILHEALTH_CEILING = Decimal("3200")

HALF = Decimal("2")


def monthly_salary_from_daily_rate(
    daily_rate: Number, working_days_per_month: int = DEFAULT_WORKING_DAYS_PER_MONTH
) -> Decimal:
    return to_decimal(daily_rate) * working_days_per_month


def validate_monthly_salary(monthly_salary: Any) -> Decimal:
    """Caller-side check before computing contributions.

    Raises:
        NegativeOrInvalidSalary: If the salary is missing, non-numeric,
            NaN, infinite or negative
    """
    if monthly_salary is None or isinstance(monthly_salary, bool):
        raise NegativeOrInvalidSalary(monthly_salary)
    try:
        salary = to_decimal(monthly_salary)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise NegativeOrInvalidSalary(monthly_salary) from exc
    if not salary.is_finite() or salary < 0:
        raise NegativeOrInvalidSalary(monthly_salary)
    return salary


def find_salary_bracket(
    monthly_salary: Number, brackets: tuple[SalaryBracket, ...] = SSS_BRACKETS
) -> SalaryBracket:
    """Band containing the salary, clamped to the lowest and highest bands."""
    salary = to_decimal(monthly_salary)
    if salary < brackets[0].min_amount:
        return brackets[0]
    for bracket in brackets:
        if bracket.contains(salary):
            return bracket
    return brackets[-1]


@dataclass(frozen=True)
class SSSContribution(ContributionResult):
    """SSS result with the regular/WISP split of the salary credit."""

    regular_credit: Decimal = ZERO
    wisp_credit: Decimal = ZERO


def calculate_sss(monthly_salary: Number) -> SSSContribution:
    """Bracketed SSS contribution.

    Employee 11%, employer 8.5%, total 19.5% of the monthly salary credit.
    """
    credit = find_salary_bracket(monthly_salary).credit
    regular_credit = min(credit, SSS_WISP_THRESHOLD)

    return SSSContribution(
        employee_share=round_money(credit * SSS_EMPLOYEE_RATE),
        employer_share=round_money(credit * SSS_EMPLOYER_RATE),
        total=round_money(credit * SSS_TOTAL_RATE),
        reference_bracket=credit,
        regular_credit=regular_credit,
        wisp_credit=credit - regular_credit,
    )


def _pagibig_rates(salary: Decimal) -> tuple[Decimal, Decimal]:
    """(employee, employer) rates for a monthly salary."""
    if salary >= PAGIBIG_THRESHOLD:
        return PAGIBIG_EMPLOYEE_RATE_HIGH, PAGIBIG_EMPLOYER_RATE_HIGH
    return PAGIBIG_EMPLOYEE_RATE_LOW, PAGIBIG_EMPLOYER_RATE_LOW


def calculate_pagibig(monthly_salary: Number) -> ContributionResult:
    """Threshold-split Pag-IBIG contribution.

    At or above 1,500: 2% employee + 2% employer. Below: 1% + 2%.
    """
    salary = to_decimal(monthly_salary)
    employee_rate, employer_rate = _pagibig_rates(salary)

    employee = salary * employee_rate
    employer = salary * employer_rate
    return ContributionResult(
        employee_share=round_money(employee),
        employer_share=round_money(employer),
        total=round_money(employee + employer),
        reference_bracket=salary,
    )


def _philhealth_premium(salary: Decimal) -> Decimal:
    return min(max(salary * PHILHEALTH_RATE, PHILHEALTH_FLOOR), PHILHEALTH_CEILING)


def calculate_philhealth(monthly_salary: Number) -> ContributionResult:
    """PhilHealth premium: 4% of salary clamped to [400, 3200], split 50/50."""
    salary = to_decimal(monthly_salary)
    total = _philhealth_premium(salary)
    share = total / HALF

    return ContributionResult(
        employee_share=round_money(share),
        employer_share=round_money(share),
        total=round_money(total),
        reference_bracket=salary,
    )


@dataclass(frozen=True)
class BiMonthlyContributions:
    """Per-cutoff figures: half of each monthly amount."""

    sss: Decimal
    pagibig: Decimal
    philhealth: Decimal
    sss_employee: Decimal
    pagibig_employee: Decimal
    philhealth_employee: Decimal

    @property
    def employee_total(self) -> Decimal:
        return self.sss_employee + self.pagibig_employee + self.philhealth_employee


@dataclass(frozen=True)
class AllContributions:
    monthly_salary: Decimal
    sss: SSSContribution
    pagibig: ContributionResult
    philhealth: ContributionResult
    bi_monthly: BiMonthlyContributions

    @property
    def employee_total(self) -> Decimal:
        return self.sss.employee_share + self.pagibig.employee_share + self.philhealth.employee_share


def _half(amount: Decimal) -> Decimal:
    return round_money(amount / HALF)


def calculate_all_contributions(monthly_salary: Number) -> AllContributions:
    """Compute SSS, Pag-IBIG and PhilHealth for a monthly salary.

    Bi-monthly figures halve the unrounded monthly amounts, so they are
    rounded once.
    """
    salary = to_decimal(monthly_salary)
    sss = calculate_sss(salary)
    pagibig = calculate_pagibig(salary)
    philhealth = calculate_philhealth(salary)

    credit = sss.reference_bracket
    pagibig_employee_rate, pagibig_employer_rate = _pagibig_rates(salary)
    philhealth_total = _philhealth_premium(salary)

    bi_monthly = BiMonthlyContributions(
        sss=_half(credit * SSS_TOTAL_RATE),
        pagibig=_half(salary * (pagibig_employee_rate + pagibig_employer_rate)),
        philhealth=_half(philhealth_total),
        sss_employee=_half(credit * SSS_EMPLOYEE_RATE),
        pagibig_employee=_half(salary * pagibig_employee_rate),
        philhealth_employee=_half(philhealth_total / HALF),
    )

    return AllContributions(
        monthly_salary=salary,
        sss=sss,
        pagibig=pagibig,
        philhealth=philhealth,
        bi_monthly=bi_monthly,
    )
