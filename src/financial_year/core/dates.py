#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable, day-precision date value used for all financial year arithmetic.
Time of day is never carried: datetimes are truncated to the start of the day
on the way in.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Union

from dateutil.relativedelta import relativedelta

from .exceptions import InvalidDateError

ISO_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    def __post_init__(self) -> None:
        # datetime is a date subclass; keep only the calendar day
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", self.date.date())
        elif not isinstance(self.date, date):
            raise InvalidDateError(f"Expected a date, got {type(self.date).__name__}")

    @classmethod
    def from_string(cls, date_str: str) -> "FinancialDate":
        """
        Parse a canonical calendar date string.

        Args:
            date_str: Date string in YYYY-MM-DD format

        Returns:
            FinancialDate object

        Raises:
            InvalidDateError: If the string is not a valid YYYY-MM-DD date
        """
        try:
            return cls(date=datetime.strptime(date_str, ISO_FORMAT).date())
        except (TypeError, ValueError) as e:
            raise InvalidDateError(f"Invalid date format: {date_str!r}. Use YYYY-MM-DD") from e

    @classmethod
    def from_value(cls, value: "DateInput") -> "FinancialDate":
        """
        Coerce any accepted date input to a FinancialDate.

        Accepts a YYYY-MM-DD string, a date, a datetime (truncated to its day)
        or an existing FinancialDate.
        """
        if isinstance(value, FinancialDate):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, date):
            return cls(date=value)
        raise InvalidDateError(
            f"Invalid date input of type {type(value).__name__}. "
            "Needs to be a YYYY-MM-DD string, date, datetime or FinancialDate"
        )

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    @property
    def day(self) -> int:
        """Day of the month (1-31)."""
        return self.date.day

    def start_of_day(self) -> "FinancialDate":
        """Values already have day precision, so this is the identity."""
        return self

    def add_days(self, days: int) -> "FinancialDate":
        return FinancialDate(date=self.date + timedelta(days=days))

    def sub_days(self, days: int) -> "FinancialDate":
        return self.add_days(-days)

    def add_weeks(self, weeks: int) -> "FinancialDate":
        return FinancialDate(date=self.date + timedelta(weeks=weeks))

    def sub_weeks(self, weeks: int) -> "FinancialDate":
        return self.add_weeks(-weeks)

    def add_months(self, months: int) -> "FinancialDate":
        """
        Add calendar months.

        The day of month is clamped to the length of the target month
        (Jan 31 + 1 month is Feb 28/29).
        """
        return FinancialDate(date=self.date + relativedelta(months=months))

    def sub_months(self, months: int) -> "FinancialDate":
        return self.add_months(-months)

    def add_years(self, years: int) -> "FinancialDate":
        return FinancialDate(date=self.date + relativedelta(years=years))

    def sub_years(self, years: int) -> "FinancialDate":
        return self.add_years(-years)

    def between(self, start: "FinancialDate", end: "FinancialDate") -> bool:
        """Check whether this date lies in [start, end], both ends inclusive."""
        return start.date <= self.date <= end.date

    def days_until(self, other: "FinancialDate") -> int:
        """Number of days from this date to another (negative if earlier)."""
        return (other.date - self.date).days

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, FinancialDate):
            return NotImplemented
        return self.date == other.date

    def __hash__(self) -> int:
        return hash(self.date)

    def __lt__(self, other: "FinancialDate") -> bool:
        """Less than comparison."""
        return self.date < other.date

    def __le__(self, other: "FinancialDate") -> bool:
        """Less than or equal comparison."""
        return self.date <= other.date

    def __gt__(self, other: "FinancialDate") -> bool:
        """Greater than comparison."""
        return self.date > other.date

    def __ge__(self, other: "FinancialDate") -> bool:
        """Greater than or equal comparison."""
        return self.date >= other.date

    def __repr__(self) -> str:
        """Repr format."""
        return f"FinancialDate(date={self.date!r})"


DateInput = Union[str, date, FinancialDate]


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive range of days.

    Iterating yields one FinancialDate per day from start to end. Each call to
    iter() starts over, so a range can be walked any number of times.

    Examples:
        >>> r = DateRange(FinancialDate.from_string("2023-01-01"),
        ...               FinancialDate.from_string("2023-01-07"))
        >>> len(r)
        7
        >>> FinancialDate.from_string("2023-01-03") in r
        True
    """

    start: FinancialDate
    end: FinancialDate

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} is before start {self.start}")

    def __iter__(self) -> Iterator[FinancialDate]:
        current = self.start
        while current <= self.end:
            yield current
            current = current.add_days(1)

    def __len__(self) -> int:
        return self.start.days_until(self.end) + 1

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, FinancialDate):
            return False
        return item.between(self.start, self.end)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display or JSON serialization."""
        return {
            "start": self.start.to_iso_string(),
            "end": self.end.to_iso_string(),
            "days": len(self),
        }

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"
