"""Payroll computation core."""

from payroll_core.calculators.base_pay import calculate_base_pay
from payroll_core.calculators.contributions import (
    calculate_all_contributions,
    calculate_pagibig,
    calculate_philhealth,
    calculate_sss,
)
from payroll_core.calculators.engine import EmployeeSchedule, PayrollCalculator
from payroll_core.calculators.multipliers import calculate_daily_pay, calculate_period_pay
from payroll_core.calculators.payslip import calculate_net_pay
from payroll_core.calculators.periods import (
    PayPeriod,
    next_period,
    period_end,
    period_start,
    previous_period,
    resolve_period,
)
from payroll_core.calculators.withholding import calculate_withholding_tax

__all__ = [
    "EmployeeSchedule",
    "PayPeriod",
    "PayrollCalculator",
    "calculate_all_contributions",
    "calculate_base_pay",
    "calculate_daily_pay",
    "calculate_net_pay",
    "calculate_pagibig",
    "calculate_period_pay",
    "calculate_philhealth",
    "calculate_sss",
    "calculate_withholding_tax",
    "next_period",
    "period_end",
    "period_start",
    "previous_period",
    "resolve_period",
]
