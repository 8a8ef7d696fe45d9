"""textdates: find the calendar dates mentioned in English text.

Recognizes month and weekday names, ordinal days, relative words like
"tomorrow" and numeric dates in American, international and ISO layouts,
and resolves them to ``datetime.date`` values, optionally relative to the
date the text was written.

Quick Start:
    from datetime import date

    from textdates import parse

    parse("Dinner on Sunday or maybe June 5th", reference_date=date(2016, 7, 15))
    # [datetime.date(2016, 6, 5), datetime.date(2016, 7, 17)]

Options:
    - unique: return each date once
    - nil_date: fallback result when nothing is found
    - parse_single_years: read bare integers ("2000") as years
    - parse_ambiguous_dates: read ordinal days ("1st") as dates
"""

__version__ = "0.1.0"

# Configuration
from .config import Settings, settings

# Exceptions
from .exceptions import InvalidArgumentError, TextDatesError

# Logging
from .logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

# Models
from .models import DateMatch, MatchKind, ParseOptions

# Parsing
from .parser import DateParser, find_dates, parse

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Exceptions
    "TextDatesError",
    "InvalidArgumentError",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "unbind_context",
    # Models
    "DateMatch",
    "MatchKind",
    "ParseOptions",
    # Parsing
    "DateParser",
    "parse",
    "find_dates",
]
