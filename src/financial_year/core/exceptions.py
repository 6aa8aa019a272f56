#!/usr/bin/env python3
"""
Financial Year Error Types

Caller-facing errors share the FinancialYearError base so they can be caught
together. LogicError is kept outside that hierarchy: it signals a defect in the
boundary arithmetic, not a bad configuration or query.
"""


class FinancialYearError(Exception):
    """Base class for configuration and input errors."""


class ConfigError(FinancialYearError):
    """Invalid year type, week count, start date or period/week id."""


class InvalidDateError(FinancialYearError, ValueError):
    """Date input could not be turned into a FinancialDate."""


class DateRangeError(FinancialYearError):
    """Lookup date lies outside the financial year."""


class LogicError(RuntimeError):
    """Internal invariant violation in boundary computation."""
