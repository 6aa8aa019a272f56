"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest

from financial_year.core import config as config_module
from financial_year.periods import FinancialYear, YearType


@pytest.fixture
def calendar_year() -> FinancialYear:
    """Calendar type year aligned with 2023."""
    return FinancialYear(YearType.CALENDAR, "2023-01-01")


@pytest.fixture
def business_year() -> FinancialYear:
    """52-week business type year starting 2023-01-01."""
    return FinancialYear(YearType.BUSINESS, "2023-01-01")


@pytest.fixture
def business_year_53() -> FinancialYear:
    """53-week business type year starting 2023-01-01."""
    return FinancialYear(YearType.BUSINESS, "2023-01-01", fifty_three_weeks=True)


# (type, start date, fifty_three_weeks) combinations covering leap years,
# mid-month starts and both week counts
YEAR_CONFIGURATIONS = [
    ("calendar", "2023-01-01", False),
    ("calendar", "2023-04-06", False),
    ("calendar", "2024-01-01", True),
    ("calendar", "2023-03-28", False),
    ("calendar", "2024-02-28", True),
    ("business", "2023-01-01", False),
    ("business", "2023-01-01", True),
    ("business", "2023-07-31", False),
    ("business", "2024-02-29", True),
]


@pytest.fixture(params=YEAR_CONFIGURATIONS, ids=lambda c: f"{c[0]}-{c[1]}-{53 if c[2] else 52}")
def any_year(request) -> FinancialYear:
    """Financial years of every supported shape."""
    year_type, start, fifty_three_weeks = request.param
    return FinancialYear(year_type, start, fifty_three_weeks)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("FINANCIAL_YEAR_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    # Values from a developer's .env must not leak into tests
    for name in ("FINANCIAL_YEAR_TYPE", "FINANCIAL_YEAR_START", "FINANCIAL_YEAR_53_WEEKS", "DEBUG"):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "cli: Tests for the command line interface")
