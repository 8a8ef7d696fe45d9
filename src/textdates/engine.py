"""Phrase matching and date resolution.

The engine scans a token list three times with shrinking windows: three
words ("january 1st 2013"), then two ("june 5th", "5th june"), then one
("sunday", "tomorrow", "7/24/2015"). Every recognized phrase is removed from
the working list before scanning continues, so "January 1st, 2013" yields a
single date rather than three.

Phrases that leave out part of a date are resolved against ``now`` and then
moved next to the reference date, the date the text was written, when one is
given. ``now`` is always passed in explicitly; only the public entry point
reads the clock.

Example:
    ```python
    from datetime import date

    from textdates.engine import interpret

    interpret(["meet", "sunday"], date(2016, 7, 15), now=date(2024, 3, 1))
    # [datetime.date(2016, 7, 17)]
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date, timedelta

from .dates import (
    add_days,
    complete_year,
    make_date,
    next_weekday,
    shift_months,
    shift_years,
    to_int,
    weeks_between,
)
from .models import DateMatch, MatchKind
from .normalize import is_integer
from .vocabulary import ORDINAL_DAYS, RELATIVE_DAYS, WEEKDAYS, month_number, weak_day

logger = logging.getLogger(__name__)

_ONE_WEEK = timedelta(days=7)


class PhraseResolver:
    """Resolve candidate phrase windows to dates.

    Holds the per-call context (reference date, ``now`` and options) so each
    window check only receives the tokens. Every ``match_*`` method returns
    a DateMatch or None; None covers both "not a date phrase" and "looks like
    a date but is impossible", such as "june 31 2016".

    Attributes:
        reference_date: When the text was written, if known.
        now: Stand-in for the current date.
        parse_single_years: Accept bare integers as years.
        parse_ambiguous_dates: Accept ordinal days such as "1st".
    """

    def __init__(
        self,
        reference_date: date | None,
        now: date,
        parse_single_years: bool = False,
        parse_ambiguous_dates: bool = True,
    ) -> None:
        self.reference_date = reference_date
        self.now = now
        self.parse_single_years = parse_single_years
        self.parse_ambiguous_dates = parse_ambiguous_dates

    def match_three_words(self, words: Sequence[str]) -> DateMatch | None:
        """Match MONTH DAY YEAR, e.g. "jan 1st 2013".

        A two-digit year is completed the same way as in numeric dates, so
        "jan 5 15" is 2015.
        """
        month = month_number(words[0])
        day = weak_day(words[1])
        if month is None or day is None or not is_integer(words[2]):
            return None
        year = complete_year(words[2])
        if year is None:
            return None
        return self._match(make_date(year, month, day), words, "month_day_year")

    def match_two_words(self, words: Sequence[str]) -> DateMatch | None:
        """Match MONTH DAY or DAY MONTH, e.g. "june 5th" or "5th june".

        The phrase is read in the current year, then moved to the reference
        date's year.
        """
        month = month_number(words[0])
        day = weak_day(words[1])
        if month is None or day is None:
            month = month_number(words[1])
            day = weak_day(words[0])
        if month is None or day is None:
            return None
        value = make_date(self.now.year, month, day)
        return self._match(self._in_reference_year(value), words, "month_day")

    def match_one_word(self, words: Sequence[str]) -> DateMatch | None:
        """Match a single token. The first category the token belongs to decides."""
        word = words[0]

        if word in WEEKDAYS:
            return self._match(self._weekday(WEEKDAYS[word]), words, "weekday")

        if word in RELATIVE_DAYS:
            base = self.reference_date or self.now
            return self._match(add_days(base, RELATIVE_DAYS[word]), words, "relative")

        if self.parse_ambiguous_dates and word in ORDINAL_DAYS:
            return self._match(self._ordinal_day(ORDINAL_DAYS[word]), words, "ordinal_day")

        month = month_number(word)
        if month is not None:
            year = (self.reference_date or self.now).year
            return self._match(make_date(year, month, 1), words, "month")

        if self.parse_single_years and is_integer(word):
            year = to_int(word)
            if year is None:
                return None
            return self._match(make_date(year, 1, 1), words, "year")

        numeric = _numeric_components(word)
        if numeric is not None:
            return self._match(_numeric_date(numeric), words, "numeric_date")

        return self._match(self._slash_date(word), words, "slash_date")

    def _match(
        self,
        value: date | None,
        words: Sequence[str],
        kind: MatchKind,
    ) -> DateMatch | None:
        if value is None:
            return None
        text = " ".join(words)
        logger.debug("Matched %s phrase %r as %s", kind, text, value.isoformat())
        return DateMatch(value=value, text=text, kind=kind, width=len(words))

    def _in_reference_year(self, value: date | None) -> date | None:
        """Move a date read in the current year into the reference date's year."""
        if value is None or self.reference_date is None:
            return value
        return shift_years(value, self.reference_date.year - self.now.year)

    def _weekday(self, weekday: int) -> date | None:
        """Resolve a weekday name.

        Without a reference date this is the next such day on or after
        ``now``. With one, the result is moved back by the whole weeks
        between ``now`` and the reference date and then nudged by a week so
        it falls in the seven days starting at the reference date.
        """
        proposed = next_weekday(self.now, weekday)
        if self.reference_date is None:
            return proposed

        reference = self.reference_date
        try:
            proposed -= weeks_between(self.now, reference) * _ONE_WEEK
            if proposed - reference >= _ONE_WEEK:
                proposed -= _ONE_WEEK
            elif proposed < reference:
                proposed += _ONE_WEEK
        except OverflowError:
            logger.debug("Weekday %d out of range near %s", weekday, reference)
            return None
        return proposed

    def _ordinal_day(self, day: int) -> date | None:
        """Resolve "21st" as that day of the current month, moved to the reference month."""
        value = make_date(self.now.year, self.now.month, day)
        if value is None or self.reference_date is None:
            return value
        reference = self.reference_date
        months = (reference.year * 12 + reference.month) - (self.now.year * 12 + self.now.month)
        return shift_months(value, months)

    def _slash_date(self, word: str) -> date | None:
        """Resolve MM/DD in the current year, moved to the reference date's year."""
        parts = word.split("/")
        if len(parts) != 2 or not all(is_integer(part) for part in parts):
            return None
        month, day = (to_int(part) for part in parts)
        if month is None or day is None or not (0 < month <= 12 and 0 < day <= 31):
            return None
        return self._in_reference_year(make_date(self.now.year, month, day))


def _numeric_components(word: str) -> list[str] | None:
    """Split a fully numeric date into its three parts.

    The separator must be "-" or "/" and used throughout ("2012-02-12",
    "7/24/2015"); mixed separators do not match.
    """
    for separator in ("-", "/"):
        if separator in word:
            parts = word.split(separator)
            if len(parts) == 3 and all(is_integer(part) for part in parts):
                return parts
            return None
    return None


def _numeric_date(parts: list[str]) -> date | None:
    """Resolve the three parts of a numeric date.

    A first part above 31 can only be a year (YYYY-MM-DD). Otherwise a
    second part above 12 can only be a day, so the layout is American
    (MM-DD-YYYY); if it is 12 or below the layout is international
    (DD-MM-YYYY). "7-24-2015" and "24-07-2015" are both July 24th.
    """
    first, second, third = (to_int(part) for part in parts)
    if first is None or second is None or third is None:
        return None
    if abs(first) > 31:
        year, month, day = complete_year(parts[0]), second, third
    elif second > 12:
        year, month, day = complete_year(parts[2]), first, second
    else:
        year, month, day = complete_year(parts[2]), second, first
    if year is None:
        return None
    return make_date(year, month, day)


def _scan(
    words: list[str],
    width: int,
    match: Callable[[Sequence[str]], DateMatch | None],
    matches: list[DateMatch],
) -> None:
    """Slide a window of ``width`` tokens over ``words``, consuming every match.

    A matched span is deleted and the index stays put, so the token that
    moves into that position is examined next.
    """
    i = 0
    while i <= len(words) - width:
        found = match(words[i : i + width])
        if found is None:
            i += 1
            continue
        matches.append(found)
        del words[i : i + width]


def interpret_matches(
    tokens: Sequence[str],
    reference_date: date | None = None,
    parse_single_years: bool = False,
    parse_ambiguous_dates: bool = True,
    *,
    now: date,
) -> list[DateMatch]:
    """Find every date phrase in a token sequence.

    Args:
        tokens: Normalized tokens (see ``textdates.normalize.tokenize``).
            The sequence is copied, never modified.
        reference_date: Date the text was written, used to place partial
            and relative phrases.
        parse_single_years: Treat bare integers as years.
        parse_ambiguous_dates: Treat ordinal days such as "1st" as dates.
        now: The current date.

    Returns:
        Matches in discovery order: three-word phrases left to right, then
        two-word phrases, then single words.
    """
    resolver = PhraseResolver(
        reference_date,
        now,
        parse_single_years=parse_single_years,
        parse_ambiguous_dates=parse_ambiguous_dates,
    )
    words = list(tokens)
    matches: list[DateMatch] = []

    _scan(words, 3, resolver.match_three_words, matches)
    _scan(words, 2, resolver.match_two_words, matches)
    _scan(words, 1, resolver.match_one_word, matches)

    return matches


def interpret(
    tokens: Sequence[str],
    reference_date: date | None = None,
    parse_single_years: bool = False,
    parse_ambiguous_dates: bool = True,
    *,
    now: date,
) -> list[date]:
    """Resolve every date phrase in a token sequence to a date.

    Same arguments as ``interpret_matches``; returns only the dates.
    """
    matches = interpret_matches(
        tokens,
        reference_date,
        parse_single_years,
        parse_ambiguous_dates,
        now=now,
    )
    return [match.value for match in matches]
