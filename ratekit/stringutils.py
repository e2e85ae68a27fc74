"""String helpers: splitting, joining, trimming and day-month-year dates."""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterable

__all__ = [
    "split",
    "join",
    "ltrim",
    "rtrim",
    "trim",
    "compress_whitespace",
    "parse_date",
    "format_date",
    "uppercase",
]

_WHITESPACE = " \t\n\v\f\r"
_WS_RUN = re.compile(r"([ \t\n\v\f\r])[ \t\n\v\f\r]+")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_DATE = re.compile(r"\s*([+-]?\d+)-([^\s-]{1,3})-([+-]?\d+)")


def split(s: str, sep: str) -> list[str]:
    """Split s on every occurrence of sep; an empty string gives an empty list."""
    if not sep:
        raise ValueError("separator must not be empty")
    if not s:
        return []
    return s.split(sep)


def join(items: Iterable[str], sep: str) -> str:
    """Join items with sep, adding a separator only once the result is non-empty."""
    result = ""
    for item in items:
        if result:
            result += sep
        result += item
    return result


def ltrim(s: str) -> str:
    """Remove leading whitespace."""
    return s.lstrip(_WHITESPACE)


def rtrim(s: str) -> str:
    """Remove trailing whitespace."""
    return s.rstrip(_WHITESPACE)


def trim(s: str) -> str:
    """Remove leading and trailing whitespace."""
    return ltrim(rtrim(s))


def compress_whitespace(s: str) -> str:
    """Replace each run of whitespace with its first character."""
    return _WS_RUN.sub(r"\1", s)


def parse_date(text: str) -> datetime.date:
    """Parse a date written as day-Mon-year, e.g. '15-Jan-2020'; the month is case-insensitive."""
    match = _DATE.match(text)
    if match is None:
        raise ValueError(f"not a day-month-year date: {text!r}")
    day, month_name, year = match.groups()
    lowered = month_name.lower()
    for number, name in enumerate(_MONTHS, start=1):
        if name.lower() == lowered:
            return datetime.date(int(year), number, int(day))
    raise ValueError(f"unknown month: {month_name!r}")


def format_date(value: datetime.date) -> str:
    """Format a date as day-Mon-year without zero padding."""
    return f"{value.day}-{_MONTHS[value.month - 1]}-{value.year}"


def uppercase(s: str) -> str:
    """Return s in upper case."""
    return s.upper()