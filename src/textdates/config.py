"""Configuration management for textdates."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from textdates.models import ParseOptions

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """textdates configuration loaded from environment variables.

    All settings can be overridden via environment variables with
    the TEXTDATES_ prefix. For example:
        TEXTDATES_PARSE_SINGLE_YEARS=true
        TEXTDATES_LOG_FORMAT=text

    The parse defaults apply whenever a caller leaves the matching
    option of ``textdates.parse`` unset.
    """

    # Parse defaults
    unique: bool = Field(
        default=False,
        description="Return each resolved date only once",
    )
    parse_single_years: bool = Field(
        default=False,
        description="Parse bare integers as January 1st of that year",
    )
    parse_ambiguous_dates: bool = Field(
        default=True,
        description="Parse ordinal days such as '1st' as dates",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )

    model_config = {
        "env_prefix": "TEXTDATES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Upper-case the level and reject names logging does not know."""
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level

    def default_options(self) -> ParseOptions:
        """Build the ParseOptions these settings describe."""
        return ParseOptions(
            unique=self.unique,
            parse_single_years=self.parse_single_years,
            parse_ambiguous_dates=self.parse_ambiguous_dates,
        )


# Global settings instance
settings = Settings()
