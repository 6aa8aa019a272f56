#!/usr/bin/env python3
"""
Financial Year Configuration Models

Year type enumeration and the validated, immutable configuration value shared
by the calculator.
"""

from dataclasses import dataclass, replace
from enum import Enum

PERIOD_COUNT = 12
WEEKS_PER_BUSINESS_PERIOD = 4
ALLOWED_WEEK_COUNTS = (52, 53)
DISALLOWED_CALENDAR_START_DAYS = (29, 30, 31)


class YearType(Enum):
    """How a financial year is partitioned into periods."""

    CALENDAR = "calendar"  # 12 month-aligned periods
    BUSINESS = "business"  # 12 periods of 4 weeks, last one absorbs week 53


@dataclass(frozen=True)
class FinancialYearConfig:
    """
    Validated financial year settings.

    Use create() rather than the constructor so values pass validation.
    """

    year_type: YearType
    week_count: int = 52
    period_count: int = PERIOD_COUNT

    @classmethod
    def create(cls, year_type: YearType | str, fifty_three_weeks: bool = False) -> "FinancialYearConfig":
        from .validation import validate_year_type

        return cls(year_type=validate_year_type(year_type), week_count=53 if fifty_three_weeks else 52)

    def with_year_type(self, year_type: YearType | str) -> "FinancialYearConfig":
        from .validation import validate_year_type

        return replace(self, year_type=validate_year_type(year_type))

    def with_week_count(self, week_count: int) -> "FinancialYearConfig":
        from .validation import validate_week_count

        return replace(self, week_count=validate_week_count(week_count))

    @property
    def is_calendar_type(self) -> bool:
        return self.year_type is YearType.CALENDAR

    @property
    def is_business_type(self) -> bool:
        return self.year_type is YearType.BUSINESS

    @property
    def has_fifty_three_weeks(self) -> bool:
        return self.week_count == 53
