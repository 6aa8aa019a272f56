"""
Financial Year - Fiscal Year Periods and Business Weeks

Computes the structure of a financial year that does not have to line up with
the calendar year, and maps dates back to the period or week containing them.

Key Features:
- Calendar type years with 12 month-aligned periods
- Business type years with 12 four-week periods and optional 53rd week
- Date to period/week lookups with range checking
- Day-by-day iteration over any period or week

Domain Packages:
- core: Date value type, errors, configuration
- periods: Year configuration, validation and the calculator
- cli: Command-line interface

Example Usage:
    from financial_year import FinancialYear, YearType

    fy = FinancialYear(YearType.CALENDAR, "2023-01-01")
    fy.period_for_date("2023-07-04")  # 7
"""

__version__ = "1.0.0"
__author__ = "Financial Year Contributors"

from .core.config import Environment, get_config
from .core.dates import DateRange, FinancialDate
from .core.exceptions import (
    ConfigError,
    DateRangeError,
    FinancialYearError,
    InvalidDateError,
    LogicError,
)
from .periods import FinancialYear, FinancialYearConfig, YearType

__all__ = [
    # Calculator
    "FinancialYear",
    "FinancialYearConfig",
    "YearType",
    # Dates
    "DateRange",
    "FinancialDate",
    # Errors
    "ConfigError",
    "DateRangeError",
    "FinancialYearError",
    "InvalidDateError",
    "LogicError",
    # Configuration
    "get_config",
    "Environment",
]
