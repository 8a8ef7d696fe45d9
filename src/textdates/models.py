"""Data models for recognized date phrases and parse options."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# How a phrase was recognized
MatchKind = Literal[
    "month_day_year",  # "january 1st 2013"
    "month_day",  # "june 5th", "5th june"
    "weekday",  # "sunday", "tues"
    "relative",  # "today", "tonight", "tomorrow", "yesterday"
    "ordinal_day",  # "21st"
    "month",  # "march"
    "year",  # "2000"
    "numeric_date",  # "2012-02-12", "7/24/2015", "24-07-2015"
    "slash_date",  # "7/24"
]


class DateMatch(BaseModel):
    """A phrase recognized in the text and the date it resolved to.

    Attributes:
        value: The resolved calendar date.
        text: The matched tokens, joined by a single space.
        kind: Which rule recognized the phrase.
        width: Number of tokens consumed (1, 2 or 3).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: date = Field(description="Resolved calendar date")
    text: str = Field(description="Normalized tokens that produced the date")
    kind: MatchKind = Field(description="Rule that recognized the phrase")
    width: int = Field(ge=1, le=3, description="Number of tokens consumed")


class ParseOptions(BaseModel):
    """Options controlling which phrases count as dates.

    Attributes:
        unique: Drop repeated dates, keeping the first occurrence.
        parse_single_years: Treat bare integers like "2000" as January 1st
            of that year.
        parse_ambiguous_dates: Treat ordinal days like "1st" as dates. They
            often are not ("He came 1st").
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    unique: bool = Field(default=False, description="De-duplicate resolved dates")
    parse_single_years: bool = Field(
        default=False,
        description="Parse bare integers as January 1st of that year",
    )
    parse_ambiguous_dates: bool = Field(
        default=True,
        description="Parse ordinal days such as '1st' as dates",
    )
