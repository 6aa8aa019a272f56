#!/usr/bin/env python3
"""
Financial Year Calculator

Owns a financial year's start and end date and answers boundary and lookup
queries for its 12 periods and 52/53 business weeks.

Periods and weeks are never stored. They are derived on demand from the start
date, with two fixed rules: id 1 always starts on the start date and the last
id always ends on the end date, so leftover days (short months, leap years,
the 53rd week) are absorbed by the final period or week.

Instances are mutable and not synchronized. Callers sharing one across threads
must serialize the setters themselves; queries have no side effects.

Example Usage:
    >>> fy = FinancialYear(YearType.BUSINESS, "2023-01-01")
    >>> str(fy.end_date)
    '2023-12-30'
    >>> str(fy.first_date_of_period(2)), str(fy.last_date_of_period(2))
    ('2023-01-29', '2023-02-25')
"""

import logging
from typing import Any

from ..core.dates import DateInput, DateRange, FinancialDate
from ..core.exceptions import ConfigError, DateRangeError, LogicError
from .models import WEEKS_PER_BUSINESS_PERIOD, FinancialYearConfig, YearType
from .validation import validate_period_id, validate_start_date, validate_week_id

logger = logging.getLogger(__name__)


class FinancialYear:
    """
    A financial year of either calendar or business type.

    Args:
        year_type: YearType or its string value
        start_date: First day of the year (YYYY-MM-DD string, date, datetime or FinancialDate)
        fifty_three_weeks: Whether the year has 53 business weeks instead of 52

    Raises:
        ConfigError: If the type or start date is not supported
        InvalidDateError: If the start date cannot be parsed
    """

    def __init__(self, year_type: YearType | str, start_date: DateInput, fifty_three_weeks: bool = False):
        self._config = FinancialYearConfig.create(year_type, fifty_three_weeks)
        self._start_date: FinancialDate | None = None
        self._end_date: FinancialDate | None = None

        self.set_start_date(start_date)
        self._update_end_date()

    # Configuration

    @property
    def config(self) -> FinancialYearConfig:
        return self._config

    @property
    def year_type(self) -> YearType:
        return self._config.year_type

    @property
    def week_count(self) -> int:
        return self._config.week_count

    @property
    def period_count(self) -> int:
        return self._config.period_count

    @property
    def is_calendar_type(self) -> bool:
        return self._config.is_calendar_type

    @property
    def is_business_type(self) -> bool:
        return self._config.is_business_type

    @property
    def start_date(self) -> FinancialDate:
        return self._require_start_date()

    @property
    def end_date(self) -> FinancialDate:
        self._require_start_date()
        assert self._end_date is not None
        return self._end_date

    def set_start_date(self, date: DateInput) -> None:
        """
        Set the first day of the financial year and recompute the end date.

        The end date is recomputed even if the new start date equals the old one.
        """
        start = FinancialDate.from_value(date).start_of_day()
        validate_start_date(self.year_type, start)

        original = self._start_date
        self._start_date = start

        # During construction the end date is computed right after this call
        if original is not None:
            self._update_end_date()

    def set_year_type(self, year_type: YearType | str) -> None:
        """Change the year type, recomputing the end date if it changed."""
        new_config = self._config.with_year_type(year_type)
        if new_config == self._config:
            return

        # A calendar year cannot keep a start date that was legal for business type
        if self._start_date is not None:
            validate_start_date(new_config.year_type, self._start_date)

        logger.debug(f"Year type changed from {self.year_type.value} to {new_config.year_type.value}")
        self._config = new_config
        self._update_end_date()

    def set_week_count(self, week_count: int) -> None:
        """Change the number of business weeks (52 or 53), recomputing the end date if it changed."""
        new_config = self._config.with_week_count(week_count)
        if new_config == self._config:
            return

        logger.debug(f"Week count changed from {self.week_count} to {new_config.week_count}")
        self._config = new_config
        self._update_end_date()

    def set_fifty_three_weeks(self, fifty_three_weeks: bool = False) -> None:
        self.set_week_count(53 if fifty_three_weeks else 52)

    # Year boundaries

    def next_year_start_date(self) -> FinancialDate:
        """
        First day of the following financial year.

        Calendar type years last exactly one year; business type years last
        the configured number of weeks.
        """
        start = self._require_start_date()
        if self.is_calendar_type:
            return start.add_years(1)
        return start.add_weeks(self.week_count)

    def contains(self, date: DateInput) -> bool:
        """Check whether a date falls within this financial year."""
        return FinancialDate.from_value(date).start_of_day().between(self.start_date, self.end_date)

    # Periods

    def first_date_of_period(self, period_id: int) -> FinancialDate:
        start = self._require_start_date()
        validate_period_id(period_id, self.period_count)

        if period_id == 1:
            return start
        if self.is_calendar_type:
            return start.add_months(period_id - 1)
        return start.add_weeks((period_id - 1) * WEEKS_PER_BUSINESS_PERIOD)

    def last_date_of_period(self, period_id: int) -> FinancialDate:
        start = self._require_start_date()
        validate_period_id(period_id, self.period_count)

        if period_id == self.period_count:
            return self.end_date
        if self.is_calendar_type:
            return start.add_months(period_id).sub_days(1)
        return start.add_weeks(period_id * WEEKS_PER_BUSINESS_PERIOD).sub_days(1)

    def period(self, period_id: int) -> DateRange:
        """All days of a period as an inclusive range."""
        return DateRange(self.first_date_of_period(period_id), self.last_date_of_period(period_id))

    def periods(self) -> list[tuple[int, DateRange]]:
        return [(period_id, self.period(period_id)) for period_id in range(1, self.period_count + 1)]

    def period_for_date(self, date: DateInput) -> int:
        """
        Find the id of the period containing a date.

        Raises:
            DateRangeError: If the date is outside the financial year
            LogicError: If no period matches a date inside the year
        """
        target = self._date_in_year(date)

        for period_id in range(1, self.period_count + 1):
            if target.between(self.first_date_of_period(period_id), self.last_date_of_period(period_id)):
                return period_id

        raise LogicError(f"A period could not be found for {target} in financial year {self}")

    # Business weeks

    def first_date_of_week(self, week_id: int) -> FinancialDate:
        start = self._require_start_date()
        validate_week_id(week_id, self.week_count)

        if week_id == 1:
            return start
        return start.add_weeks(week_id - 1)

    def last_date_of_week(self, week_id: int) -> FinancialDate:
        start = self._require_start_date()
        validate_week_id(week_id, self.week_count)

        if week_id == self.week_count:
            return self.end_date
        return start.add_weeks(week_id).sub_days(1)

    def business_week(self, week_id: int) -> DateRange:
        """All days of a business week as an inclusive range."""
        return DateRange(self.first_date_of_week(week_id), self.last_date_of_week(week_id))

    def business_weeks(self) -> list[tuple[int, DateRange]]:
        return [(week_id, self.business_week(week_id)) for week_id in range(1, self.week_count + 1)]

    def week_for_date(self, date: DateInput) -> int:
        """
        Find the id of the business week containing a date.

        Raises:
            DateRangeError: If the date is outside the financial year
            LogicError: If no week matches a date inside the year
        """
        target = self._date_in_year(date)

        for week_id in range(1, self.week_count + 1):
            if target.between(self.first_date_of_week(week_id), self.last_date_of_week(week_id)):
                return week_id

        raise LogicError(f"A business week could not be found for {target} in financial year {self}")

    def nth_week_of_period(self, period_id: int, n: int) -> DateRange:
        """
        The n-th (1-4) business week counted from the start of a period.

        Weeks are numbered globally as (period_id - 1) * 4 + n, for both year types.
        """
        validate_period_id(period_id, self.period_count)
        if isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= WEEKS_PER_BUSINESS_PERIOD:
            raise ConfigError(f"Week of period must be between 1 and {WEEKS_PER_BUSINESS_PERIOD}, got {n!r}")
        return self.business_week((period_id - 1) * WEEKS_PER_BUSINESS_PERIOD + n)

    def first_week_of_period(self, period_id: int) -> DateRange:
        return self.nth_week_of_period(period_id, 1)

    def second_week_of_period(self, period_id: int) -> DateRange:
        return self.nth_week_of_period(period_id, 2)

    def third_week_of_period(self, period_id: int) -> DateRange:
        return self.nth_week_of_period(period_id, 3)

    def fourth_week_of_period(self, period_id: int) -> DateRange:
        return self.nth_week_of_period(period_id, 4)

    def final_extra_week(self) -> DateRange:
        """The 53rd business week; only exists in 53-week years."""
        if self.week_count != 53:
            raise ConfigError("The financial year has 52 weeks, there is no 53rd business week")
        return self.business_week(53)

    def to_dict(self) -> dict[str, Any]:
        """Summarize the year for display or JSON serialization."""
        return {
            "type": self.year_type.value,
            "start_date": self.start_date.to_iso_string(),
            "end_date": self.end_date.to_iso_string(),
            "days": len(DateRange(self.start_date, self.end_date)),
            "periods": self.period_count,
            "weeks": self.week_count,
        }

    def __repr__(self) -> str:
        if self._start_date is None:
            return f"FinancialYear(type={self.year_type.value}, unconfigured)"
        return (
            f"FinancialYear(type={self.year_type.value}, start={self._start_date}, "
            f"end={self._end_date}, weeks={self.week_count})"
        )

    def __str__(self) -> str:
        return f"{self._start_date} - {self._end_date}"

    # Internal helpers

    def _require_start_date(self) -> FinancialDate:
        if self._start_date is None:
            raise ConfigError("The financial year start date has not been set")
        return self._start_date

    def _date_in_year(self, date: DateInput) -> FinancialDate:
        target = FinancialDate.from_value(date).start_of_day()
        # Checked up front so out of range dates skip the id scan
        if not target.between(self.start_date, self.end_date):
            raise DateRangeError(
                f"The requested date {target} is out of range of the current financial year "
                f"({self.start_date} - {self.end_date})"
            )
        return target

    def _update_end_date(self) -> None:
        self._end_date = self.next_year_start_date().sub_days(1)
        logger.debug(f"Financial year end date set to {self._end_date}")
