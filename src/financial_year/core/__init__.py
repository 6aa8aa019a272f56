"""
Core Utilities Package

Shared primitives used by the financial year calculator.

This package provides:
- FinancialDate, the immutable day-precision date value, and DateRange
- The error hierarchy raised by validation and lookups
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .dates import DateInput, DateRange, FinancialDate
from .exceptions import (
    ConfigError,
    DateRangeError,
    FinancialYearError,
    InvalidDateError,
    LogicError,
)

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
    # Dates
    "DateInput",
    "DateRange",
    "FinancialDate",
    # Errors
    "ConfigError",
    "DateRangeError",
    "FinancialYearError",
    "InvalidDateError",
    "LogicError",
]
