"""
Financial Year Periods Package

Year configuration, validation and the calculator that derives period and
business week boundaries.
"""

from .financial_year import FinancialYear
from .models import FinancialYearConfig, YearType
from .validation import (
    validate_period_id,
    validate_start_date,
    validate_week_count,
    validate_week_id,
    validate_year_type,
)

__all__ = [
    "FinancialYear",
    "FinancialYearConfig",
    "YearType",
    "validate_period_id",
    "validate_start_date",
    "validate_week_count",
    "validate_week_id",
    "validate_year_type",
]
