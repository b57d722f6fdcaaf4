"""Errors surfaced by the payroll core."""

from __future__ import annotations

from typing import Any


class PayrollCoreError(Exception):
    """Base class for payroll core errors."""


class InvalidPeriodInput(PayrollCoreError):
    """Raised when a reference date is missing or cannot be parsed."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot resolve a pay period from {value!r}")


class UnclassifiedDayType(PayrollCoreError):
    """Raised in strict mode when a day type is outside the known set."""

    def __init__(self, day_type: Any):
        self.day_type = day_type
        super().__init__(f"Unknown day type {day_type!r}")


class NegativeOrInvalidSalary(PayrollCoreError):
    """Raised by caller-side validation of a monthly salary figure."""

    def __init__(self, monthly_salary: Any):
        self.monthly_salary = monthly_salary
        super().__init__(
            f"Monthly salary must be a finite, non-negative amount, got {monthly_salary!r}"
        )


class ConcurrentOpenInterval(PayrollCoreError):
    """Raised when an employee has more than one open clock interval."""

    def __init__(self, employee_ref: str, open_count: int):
        self.employee_ref = employee_ref
        self.open_count = open_count
        super().__init__(
            f"Employee {employee_ref} has {open_count} open clock intervals, expected at most 1"
        )
