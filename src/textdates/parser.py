"""Public entry point: find the dates mentioned in a piece of text.

Example:
    ```python
    from datetime import date

    from textdates import parse

    parse("Lunch on Sunday, then the 7/24/2015 review", date(2016, 7, 15))
    # [datetime.date(2016, 7, 17), datetime.date(2015, 7, 24)]

    parse("No dates here", nil_date=date(2016, 7, 17))
    # [datetime.date(2016, 7, 17)]
    ```
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from textdates.config import settings
from textdates.engine import interpret_matches
from textdates.exceptions import InvalidArgumentError
from textdates.models import DateMatch, ParseOptions
from textdates.normalize import tokenize

logger = logging.getLogger(__name__)


def coerce_date(value: object, field: str) -> date | None:
    """Validate a calendar-date argument.

    Args:
        value: None, a date, or a datetime (its date part is used).
        field: Argument name, for the error message.

    Returns:
        The date, or None if value is None.

    Raises:
        InvalidArgumentError: If value is any other type, including numbers,
            strings and ``datetime.time``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidArgumentError(
        field, f"expected a date or datetime, got {type(value).__name__}"
    )


def _unique(matches: list[DateMatch]) -> list[DateMatch]:
    """Keep the first match for each date."""
    seen: set[date] = set()
    kept: list[DateMatch] = []
    for match in matches:
        if match.value not in seen:
            seen.add(match.value)
            kept.append(match)
    return kept


class DateParser:
    """Reusable date parser with fixed options.

    Example:
        ```python
        parser = DateParser(ParseOptions(unique=True, parse_single_years=True))
        parser.parse("12 20 32 402 20")
        # [date(12, 1, 1), date(20, 1, 1), date(32, 1, 1), date(402, 1, 1)]
        ```

    Attributes:
        options: Options applied to every call.
        nil_date: Date returned (as a one-element list) when nothing is found.
    """

    def __init__(
        self,
        options: ParseOptions | None = None,
        nil_date: date | datetime | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            options: Parse options. Defaults to the configured settings.
            nil_date: Fallback result when no date is found.

        Raises:
            InvalidArgumentError: If nil_date is not a date.
        """
        self.options = options if options is not None else settings.default_options()
        self.nil_date = coerce_date(nil_date, "nil_date")

    def find(
        self,
        text: str,
        reference_date: date | datetime | None = None,
        now: date | datetime | None = None,
    ) -> list[DateMatch]:
        """Find the date phrases in text.

        Args:
            text: Free-form English text.
            reference_date: When the text was written.
            now: The current date. Defaults to today.

        Returns:
            Matches in discovery order, de-duplicated by date when the
            ``unique`` option is set. ``nil_date`` is not applied.

        Raises:
            InvalidArgumentError: If reference_date or now is not a date.
        """
        reference = coerce_date(reference_date, "reference_date")
        today = coerce_date(now, "now") or date.today()

        tokens = tokenize(text)
        matches = interpret_matches(
            tokens,
            reference,
            self.options.parse_single_years,
            self.options.parse_ambiguous_dates,
            now=today,
        )
        if self.options.unique:
            matches = _unique(matches)

        logger.debug(
            "Parsed text for dates",
            extra={
                "tokens": len(tokens),
                "matches": len(matches),
                "reference_date": reference.isoformat() if reference else None,
            },
        )
        return matches

    def parse(
        self,
        text: str,
        reference_date: date | datetime | None = None,
        now: date | datetime | None = None,
    ) -> list[date]:
        """Resolve the dates mentioned in text.

        Returns:
            Dates in discovery order, or ``[nil_date]`` if none were found
            and a nil_date is configured.
        """
        dates = [match.value for match in self.find(text, reference_date, now)]
        if not dates and self.nil_date is not None:
            return [self.nil_date]
        return dates


def _build_parser(
    unique: bool | None,
    nil_date: date | datetime | None,
    parse_single_years: bool | None,
    parse_ambiguous_dates: bool | None,
) -> DateParser:
    """Create a DateParser, filling unset options from settings."""
    overrides = {
        "unique": unique,
        "parse_single_years": parse_single_years,
        "parse_ambiguous_dates": parse_ambiguous_dates,
    }
    options = settings.default_options().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    return DateParser(options, nil_date=nil_date)


def parse(
    text: str,
    reference_date: date | datetime | None = None,
    *,
    unique: bool | None = None,
    nil_date: date | datetime | None = None,
    parse_single_years: bool | None = None,
    parse_ambiguous_dates: bool | None = None,
    now: date | datetime | None = None,
) -> list[date]:
    """Resolve the dates mentioned in text.

    Args:
        text: Free-form English text.
        reference_date: When the text was written. Partial and relative
            phrases ("sunday", "june 5th", "tomorrow") are placed relative
            to it.
        unique: Return each date once, keeping first-occurrence order.
            Defaults to False.
        nil_date: Returned as ``[nil_date]`` when no date is found.
        parse_single_years: Parse bare integers as January 1st of that year.
            Defaults to False.
        parse_ambiguous_dates: Parse ordinal days such as "1st". Defaults
            to True.
        now: The current date. Defaults to today; pass it for repeatable
            results.

    Returns:
        Dates in discovery order.

    Raises:
        InvalidArgumentError: If reference_date, nil_date or now is not a
            date or datetime. Checked before any parsing.
    """
    parser = _build_parser(unique, nil_date, parse_single_years, parse_ambiguous_dates)
    return parser.parse(text, reference_date, now)


def find_dates(
    text: str,
    reference_date: date | datetime | None = None,
    *,
    unique: bool | None = None,
    parse_single_years: bool | None = None,
    parse_ambiguous_dates: bool | None = None,
    now: date | datetime | None = None,
) -> list[DateMatch]:
    """Like ``parse``, but return the matched phrases along with their dates.

    Example:
        ```python
        find_dates("Call me January 1st, 2013")
        # [DateMatch(value=date(2013, 1, 1), text="january 1st 2013",
        #            kind="month_day_year", width=3)]
        ```
    """
    parser = _build_parser(unique, None, parse_single_years, parse_ambiguous_dates)
    return parser.find(text, reference_date, now)
