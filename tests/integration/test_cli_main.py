#!/usr/bin/env python3
"""
Integration tests for the financial-year command line interface.

Runs the click commands in-process with CliRunner.
"""

import json

import pytest
from click.testing import CliRunner

from financial_year import __version__
from financial_year.cli.main import main

BUSINESS_2023 = ["--type", "business", "--start", "2023-01-01"]


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.integration
@pytest.mark.cli
class TestUtilityCommands:
    """Test version and config commands."""

    def test_version(self, runner):
        result = runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert f"Financial Year v{__version__}" in result.output

    def test_config(self, runner):
        result = runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output
        assert "Default Year Type: calendar" in result.output

    def test_invalid_environment_config(self, runner, monkeypatch):
        monkeypatch.setenv("FINANCIAL_YEAR_TYPE", "lunar")

        result = runner.invoke(main, ["config"])

        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestYearCommands:
    """Test commands that build a financial year."""

    def test_summary(self, runner):
        result = runner.invoke(main, BUSINESS_2023 + ["summary"])

        assert result.exit_code == 0
        assert "Financial Year (business)" in result.output
        assert "Start: 2023-01-01" in result.output
        assert "End: 2023-12-30" in result.output
        assert "Business Weeks: 52" in result.output

    def test_summary_json(self, runner):
        result = runner.invoke(main, BUSINESS_2023 + ["--fifty-three-weeks", "summary", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "type": "business",
            "start_date": "2023-01-01",
            "end_date": "2024-01-06",
            "days": 371,
            "periods": 12,
            "weeks": 53,
        }

    def test_summary_uses_configured_defaults(self, runner, monkeypatch):
        monkeypatch.setenv("FINANCIAL_YEAR_TYPE", "business")
        monkeypatch.setenv("FINANCIAL_YEAR_START", "2023-01-01")
        monkeypatch.setenv("FINANCIAL_YEAR_53_WEEKS", "true")

        result = runner.invoke(main, ["summary"])

        assert result.exit_code == 0
        assert "End: 2024-01-06" in result.output

    def test_periods(self, runner):
        result = runner.invoke(main, ["--type", "calendar", "--start", "2023-01-01", "periods"])

        assert result.exit_code == 0
        assert "     2  2023-02-01  2023-02-28    28" in result.output
        assert "    12  2023-12-01  2023-12-31    31" in result.output

    def test_weeks_with_53rd_week(self, runner):
        result = runner.invoke(main, BUSINESS_2023 + ["--fifty-three-weeks", "weeks"])

        assert result.exit_code == 0
        assert "    53  2023-12-31  2024-01-06     7" in result.output

    def test_period_of(self, runner):
        result = runner.invoke(main, BUSINESS_2023 + ["period-of", "2023-02-01"])

        assert result.exit_code == 0
        assert "Period 2: 2023-01-29 - 2023-02-25" in result.output

    def test_week_of(self, runner):
        result = runner.invoke(main, BUSINESS_2023 + ["week-of", "2023-03-06"])

        assert result.exit_code == 0
        assert "Week 10: 2023-03-05 - 2023-03-11" in result.output

    def test_date_out_of_range(self, runner):
        result = runner.invoke(main, BUSINESS_2023 + ["period-of", "2023-12-31"])

        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_malformed_date(self, runner):
        result = runner.invoke(main, BUSINESS_2023 + ["week-of", "31/12/2023"])

        assert result.exit_code == 1
        assert "Invalid date format" in result.output

    def test_illegal_calendar_start_day(self, runner):
        result = runner.invoke(main, ["--type", "calendar", "--start", "2023-01-30", "summary"])

        assert result.exit_code == 1
        assert "29th, 30th or 31st" in result.output

    def test_unknown_type_is_rejected_by_click(self, runner):
        result = runner.invoke(main, ["--type", "lunar", "summary"])

        assert result.exit_code == 2
