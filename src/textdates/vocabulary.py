"""Fixed English vocabularies recognized by the engine.

All tables are built once at import and never mutated. Keys are the
normalized (lowercase, punctuation-stripped) token forms.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Weekday name -> date.weekday() number (Monday is 0)
WEEKDAYS: Mapping[str, int] = MappingProxyType(
    {
        "monday": 0,
        "mon": 0,
        "tuesday": 1,
        "tue": 1,
        "tues": 1,
        "wednesday": 2,
        "wed": 2,
        "thursday": 3,
        "thu": 3,
        "thur": 3,
        "thurs": 3,
        "friday": 4,
        "fri": 4,
        "saturday": 5,
        "sat": 5,
        "sunday": 6,
        "sun": 6,
    }
)

# Relative keyword -> offset in days from the base date
RELATIVE_DAYS: Mapping[str, int] = MappingProxyType(
    {
        "today": 0,
        "tonight": 0,
        "tomorrow": 1,
        "yesterday": -1,
    }
)

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# Month name or abbreviation -> month number
MONTHS: Mapping[str, int] = MappingProxyType(
    {
        **{name: number for number, name in enumerate(MONTH_NAMES, start=1)},
        **{name[:3]: number for number, name in enumerate(MONTH_NAMES, start=1)},
        "sept": 9,
    }
)


def ordinal(day: int) -> str:
    """Return the English ordinal form of a day number ("1st", "12th", "22nd")."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


# "1".."31" -> day number
NUMERIC_DAYS: Mapping[str, int] = MappingProxyType({str(day): day for day in range(1, 32)})

# "1st".."31st" -> day number
ORDINAL_DAYS: Mapping[str, int] = MappingProxyType({ordinal(day): day for day in range(1, 32)})


def month_number(token: str) -> int | None:
    """Month number for a month name or abbreviation, else None."""
    return MONTHS.get(token)


def weak_day(token: str) -> int | None:
    """Day number for a bare ("21") or ordinal ("21st") day token, else None."""
    day = NUMERIC_DAYS.get(token)
    if day is None:
        day = ORDINAL_DAYS.get(token)
    return day
