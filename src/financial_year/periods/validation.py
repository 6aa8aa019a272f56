#!/usr/bin/env python3
"""
Financial Year Configuration Validation

Pure checks run before any boundary arithmetic. Each raises ConfigError on
failure and has no other side effects.
"""

from ..core.dates import FinancialDate
from ..core.exceptions import ConfigError
from .models import ALLOWED_WEEK_COUNTS, DISALLOWED_CALENDAR_START_DAYS, PERIOD_COUNT, YearType


def validate_year_type(value: YearType | str) -> YearType:
    """
    Validate a year type and return it as a YearType.

    Args:
        value: YearType member or its string value ("calendar"/"business")

    Returns:
        The matching YearType

    Raises:
        ConfigError: If the value names no supported year type
    """
    if isinstance(value, YearType):
        return value
    if isinstance(value, str):
        try:
            return YearType(value.strip().lower())
        except ValueError:
            pass
    supported = ", ".join(t.value for t in YearType)
    raise ConfigError(f"Invalid financial year type: {value!r}. Supported types: {supported}")


def validate_week_count(count: int) -> int:
    """Validate the number of business weeks in the year (52 or 53)."""
    if isinstance(count, bool) or count not in ALLOWED_WEEK_COUNTS:
        raise ConfigError(f"Invalid week count: {count!r}. A financial year has 52 or 53 weeks")
    return count


def validate_start_date(year_type: YearType, start_date: FinancialDate) -> None:
    """
    Reject calendar type start dates on the 29th, 30th or 31st.

    Month lengths vary, so month-by-month period boundaries from such a day
    would not be well defined.
    """
    if year_type is YearType.CALENDAR and start_date.day in DISALLOWED_CALENDAR_START_DAYS:
        raise ConfigError(
            f"Start date {start_date} not supported: calendar type financial years "
            "cannot start on the 29th, 30th or 31st of a month"
        )


def _validate_id(kind: str, value: int, upper: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{kind} id must be an integer, got {value!r}")
    if value < 1 or value > upper:
        raise ConfigError(f"{kind} id {value} is out of range, must be between 1 and {upper}")
    return value


def validate_period_id(period_id: int, period_count: int = PERIOD_COUNT) -> int:
    """Validate a period id against the number of periods (1..12)."""
    return _validate_id("Period", period_id, period_count)


def validate_week_id(week_id: int, week_count: int) -> int:
    """Validate a business week id; week 53 only exists in 53-week years."""
    return _validate_id("Business week", week_id, week_count)
