"""Semi-monthly payroll computation core.

Pure functions that turn attendance data and a reference date into pay
periods, per-day pay breakdowns, base-hours figures and statutory
contributions. Nothing in this package performs I/O.
"""

__version__ = "0.1.0"
