"""Calendar arithmetic used while resolving phrases.

An impossible date such as June 31 means the phrase is not a date, so
``make_date``, ``add_days``, ``shift_months`` and ``to_int`` return None
instead of raising.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta

logger = logging.getLogger(__name__)

# Two-digit years below this pivot belong to the 2000s, the rest to the 1900s
_CENTURY_PIVOT = 69


def make_date(year: int, month: int, day: int) -> date | None:
    """Build a date, or return None if the components are not a real day."""
    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as e:
        logger.debug("Rejected date %s-%s-%s: %s", year, month, day, e)
        return None


def add_days(value: date, days: int) -> date | None:
    """Move a date by whole days, or return None past the supported range."""
    try:
        return value + timedelta(days=days)
    except OverflowError:
        logger.debug("Rejected day shift of %s by %d days", value, days)
        return None


def shift_months(value: date, months: int) -> date | None:
    """Move a date by whole months, clamping the day to the target month's length.

    January 31 shifted by one month is February 28 (or 29). Returns None if
    the result falls outside the supported year range.
    """
    if months == 0:
        return value
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    if not date.min.year <= year <= date.max.year:
        logger.debug("Rejected month shift of %s by %d months", value, months)
        return None
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def shift_years(value: date, years: int) -> date | None:
    """Move a date by whole years (Feb 29 clamps to Feb 28)."""
    return shift_months(value, 12 * years)


def weeks_between(later: date, earlier: date) -> int:
    """Whole weeks from ``earlier`` to ``later``, truncated toward zero."""
    days = (later - earlier).days
    if days >= 0:
        return days // 7
    return -(-days // 7)


def next_weekday(start: date, weekday: int) -> date:
    """First date on or after ``start`` falling on ``weekday`` (Monday is 0)."""
    return start + timedelta(days=(weekday - start.weekday()) % 7)


def to_int(token: str) -> int | None:
    """Integer value of a digit token, or None if Python refuses to convert it.

    Tokens longer than the interpreter's integer string limit (4300 digits by
    default) are rejected this way.
    """
    try:
        return int(token)
    except ValueError:
        logger.debug("Rejected integer token of %d characters", len(token))
        return None


def complete_year(component: str) -> int | None:
    """Year number for a numeric year component.

    Exactly two digits are read as a year in 1969-2068 ("15" is 2015,
    "99" is 1999). Anything else is taken literally. Returns None if the
    component cannot be converted.
    """
    year = to_int(component)
    if year is not None and len(component) == 2 and component.isdigit():
        year += 2000 if year < _CENTURY_PIVOT else 1900
    return year
