#!/usr/bin/env python3
"""
Main CLI Entry Point for Financial Year

Command-line interface for inspecting a financial year's periods and business
weeks and for resolving dates to period/week ids.
"""

import json
import logging
import os
from datetime import date

import click

from ..core.config import get_config
from ..core.exceptions import FinancialYearError
from ..periods.financial_year import FinancialYear
from ..periods.models import YearType


def _build_year(ctx: click.Context) -> FinancialYear:
    """Create the FinancialYear described by the global options and config defaults."""
    obj = ctx.obj
    if "year" in obj:
        return obj["year"]

    defaults = obj["config"].defaults
    year_type = obj["year_type"] or defaults.year_type
    start = obj["start"] or defaults.start_date or date(date.today().year, 1, 1)
    fifty_three_weeks = obj["fifty_three_weeks"]
    if fifty_three_weeks is None:
        fifty_three_weeks = defaults.fifty_three_weeks

    try:
        obj["year"] = FinancialYear(year_type, start, fifty_three_weeks)
    except FinancialYearError as e:
        raise click.ClickException(str(e))
    return obj["year"]


@click.group()
@click.option(
    "--type",
    "year_type",
    type=click.Choice([t.value for t in YearType], case_sensitive=False),
    help="Financial year type (default from FINANCIAL_YEAR_TYPE)",
)
@click.option("--start", help="Financial year start date (YYYY-MM-DD)")
@click.option(
    "--fifty-three-weeks/--fifty-two-weeks",
    "fifty_three_weeks",
    default=None,
    help="Number of business weeks in the year",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    year_type: str | None,
    start: str | None,
    fifty_three_weeks: bool | None,
    verbose: bool,
    debug: bool,
) -> None:
    """
    Financial Year - fiscal periods and business weeks

    Splits a financial year into 12 periods and 52 or 53 business weeks and
    looks up the period or week a date belongs to.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("financial_year").setLevel(logging.DEBUG)

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["year_type"] = year_type
    ctx.obj["start"] = start
    ctx.obj["fifty_three_weeks"] = fifty_three_weeks

    if verbose:
        click.echo(f"Environment: {config.environment.value}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from financial_year import __author__, __version__

    click.echo(f"Financial Year v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Default Year Type: {config_obj.defaults.year_type}")
    click.echo(f"  Default Start Date: {config_obj.defaults.start_date or 'January 1 of current year'}")
    click.echo(f"  Default 53 Weeks: {config_obj.defaults.fifty_three_weeks}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
def summary(ctx: click.Context, as_json: bool) -> None:
    """Show the financial year's type, boundaries and size."""
    year = _build_year(ctx)
    info = year.to_dict()

    if as_json:
        click.echo(json.dumps(info, indent=2))
        return

    click.echo(f"Financial Year ({info['type']})")
    click.echo(f"  Start: {info['start_date']}")
    click.echo(f"  End: {info['end_date']}")
    click.echo(f"  Days: {info['days']}")
    click.echo(f"  Periods: {info['periods']}")
    click.echo(f"  Business Weeks: {info['weeks']}")


@main.command()
@click.pass_context
def periods(ctx: click.Context) -> None:
    """List every period with its first and last day."""
    year = _build_year(ctx)

    click.echo(f"{'Period':>6}  {'First':<10}  {'Last':<10}  {'Days':>4}")
    click.echo("-" * 36)
    for period_id, days in year.periods():
        click.echo(f"{period_id:>6}  {days.start}  {days.end}  {len(days):>4}")


@main.command()
@click.pass_context
def weeks(ctx: click.Context) -> None:
    """List every business week with its first and last day."""
    year = _build_year(ctx)

    click.echo(f"{'Week':>6}  {'First':<10}  {'Last':<10}  {'Days':>4}")
    click.echo("-" * 36)
    for week_id, days in year.business_weeks():
        click.echo(f"{week_id:>6}  {days.start}  {days.end}  {len(days):>4}")


@main.command("period-of")
@click.argument("date_str", metavar="DATE")
@click.pass_context
def period_of(ctx: click.Context, date_str: str) -> None:
    """
    Show the period containing DATE (YYYY-MM-DD).

    Example:
      financial-year --type business --start 2023-01-01 period-of 2023-02-01
    """
    year = _build_year(ctx)
    try:
        period_id = year.period_for_date(date_str)
    except FinancialYearError as e:
        raise click.ClickException(str(e))

    days = year.period(period_id)
    click.echo(f"Period {period_id}: {days.start} - {days.end}")


@main.command("week-of")
@click.argument("date_str", metavar="DATE")
@click.pass_context
def week_of(ctx: click.Context, date_str: str) -> None:
    """
    Show the business week containing DATE (YYYY-MM-DD).

    Example:
      financial-year --start 2023-04-01 week-of 2023-12-25
    """
    year = _build_year(ctx)
    try:
        week_id = year.week_for_date(date_str)
    except FinancialYearError as e:
        raise click.ClickException(str(e))

    days = year.business_week(week_id)
    click.echo(f"Week {week_id}: {days.start} - {days.end}")


if __name__ == "__main__":
    main()
