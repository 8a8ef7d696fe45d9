"""Text normalization for date phrase matching.

Turns raw text into the lowercase word tokens the engine scans. Punctuation
is only removed from the edges of each word, so "7/24/2015" and "2012-02-12"
survive intact while "Sunday," becomes "sunday".
"""

from __future__ import annotations

import re

# A word without its leading and trailing punctuation
_WORD_CORE = re.compile(r"[^\W_](?:.*[^\W_])?")

_INTEGER = re.compile(r"[+-]?[0-9]+")


def clean_text(text: str) -> str:
    """Lowercase text, strip punctuation around each word and collapse whitespace.

    Args:
        text: Raw input text.

    Returns:
        Space-separated normalized words. Words made only of punctuation
        are dropped.
    """
    cores = (_WORD_CORE.search(word) for word in text.lower().split())
    return " ".join(core.group() for core in cores if core is not None)


def tokenize(text: str) -> list[str]:
    """Split text into normalized tokens."""
    return clean_text(text).split()


def is_integer(token: str) -> bool:
    """Return True if token is an optionally signed run of decimal digits."""
    return _INTEGER.fullmatch(token) is not None
