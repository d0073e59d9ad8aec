"""Parsing of the whitespace-separated date and time lines typed by users."""
from __future__ import annotations

import re
import typing as t

from .models import Date, Time

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_ints(text: str, count: int) -> t.Optional[tuple[int, ...]]:
    """Read ``count`` leading whitespace-separated integers from ``text``.

    Anything after the last integer is ignored, so ``"18 15x"`` reads as
    two integers while ``"18x 15"`` does not.

    :param text: Raw input line, e.g. ``"15 3 2024"``.
    :param count: Number of integers expected at the start of the line.
    :return: The parsed integers, or None if fewer than ``count`` lead the line.
    """
    values = []
    position = 0
    for _ in range(count):
        match = _LEADING_INT.match(text, position)
        if match is None:
            return None
        values.append(int(match.group(1)))
        position = match.end()
    return tuple(values)


def parse_date(text: str) -> t.Optional[Date]:
    """Parse a ``DD MM YYYY`` line into a Date without range checks."""
    parts = parse_ints(text, 3)
    if parts is None:
        return None
    day, month, year = parts
    return Date(day, month, year)


def parse_time(text: str) -> t.Optional[Time]:
    """Parse an ``HH MM`` line into a Time without range checks."""
    parts = parse_ints(text, 2)
    if parts is None:
        return None
    hour, minute = parts
    return Time(hour, minute)
