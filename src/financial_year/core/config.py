#!/usr/bin/env python3
"""
Configuration Management for Financial Year

Handles environment-based configuration with validated defaults. Supports
multiple environments (development, test, production) and supplies the default
year type, start date and week count used by the command line interface.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class DefaultsConfig:
    """Default financial year settings used when none are given explicitly."""

    year_type: str = "calendar"
    start_date: str | None = None  # YYYY-MM-DD; None means Jan 1 of the current year
    fifty_three_weeks: bool = False


@dataclass
class Config:
    """
    Main configuration class for the financial year application.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment
    defaults: DefaultsConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("FINANCIAL_YEAR_ENV", "development"))

        defaults = DefaultsConfig(
            year_type=os.getenv("FINANCIAL_YEAR_TYPE", "calendar").lower(),
            start_date=os.getenv("FINANCIAL_YEAR_START") or None,
            fifty_three_weeks=_parse_bool(os.getenv("FINANCIAL_YEAR_53_WEEKS", "false")),
        )

        return cls(
            environment=env,
            defaults=defaults,
            debug=_parse_bool(os.getenv("DEBUG", "false")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        from ..periods.validation import validate_start_date, validate_year_type
        from .dates import FinancialDate
        from .exceptions import FinancialYearError

        errors = []

        year_type = None
        try:
            year_type = validate_year_type(self.defaults.year_type)
        except FinancialYearError as e:
            errors.append(f"FINANCIAL_YEAR_TYPE: {e}")

        if self.defaults.start_date:
            try:
                start = FinancialDate.from_string(self.defaults.start_date)
                if year_type is not None:
                    validate_start_date(year_type, start)
            except FinancialYearError as e:
                errors.append(f"FINANCIAL_YEAR_START: {e}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                # Nested dataclass
                result[field_name] = dict(field_value.__dict__)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


def _parse_bool(value: str) -> bool:
    """Parse a boolean environment value."""
    return value.strip().lower() in ("1", "true", "yes", "on")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        # Validate configuration
        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
