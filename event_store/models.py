"""
Data models for the event reminder store.

This module contains the dataclasses used to represent dates, times, events
and the structured results returned by store operations.
"""
from __future__ import annotations

import functools
import typing as t
from dataclasses import asdict, dataclass, field


# Soft ranges accepted for user-entered values
DAY_RANGE = (1, 31)
MONTH_RANGE = (1, 12)
YEAR_RANGE = (1900, 2100)
HOUR_RANGE = (0, 23)
MINUTE_RANGE = (0, 59)


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= value <= high


@functools.total_ordering
@dataclass(frozen=True)
class Date:
    """A calendar date ordered by year, then month, then day.

    No calendar validity is checked, so 30/2/2024 is a legal value.
    """
    day: int = 1
    month: int = 1
    year: int = 2000

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self.year, self.month, self.day) < (other.year, other.month, other.day)

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    def is_valid(self) -> bool:
        """Return True if every field lies inside its accepted range."""
        return (
            _in_range(self.day, DAY_RANGE)
            and _in_range(self.month, MONTH_RANGE)
            and _in_range(self.year, YEAR_RANGE)
        )


@dataclass(frozen=True, order=True)
class Time:
    """A wall-clock time of day in 24-hour format."""
    hour: int = 0
    minute: int = 0

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def is_valid(self) -> bool:
        """Return True if hour and minute lie inside their accepted ranges."""
        return _in_range(self.hour, HOUR_RANGE) and _in_range(self.minute, MINUTE_RANGE)


@dataclass(eq=False)
class Event:
    """A named calendar entry.

    Events sort by (date, time); name and description take no part in the
    ordering. Two events are only equal if they are the same record.
    """
    name: str
    date: Date = field(default_factory=Date)
    time: Time = field(default_factory=Time)
    description: str = ""

    @property
    def sort_key(self) -> tuple[Date, Time]:
        return (self.date, self.time)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def matches(self, query: str) -> bool:
        """Case-sensitive substring match against name, description and date."""
        return (
            query in self.name
            or query in self.description
            or query in str(self.date)
        )

    def to_dict(self) -> dict[str, t.Any]:
        return {
            "name": self.name,
            "date": str(self.date),
            "time": str(self.time),
            "description": self.description,
        }


@dataclass
class AddResult:
    """Outcome of adding an event; warnings list every defaulted field."""
    event: Event
    warnings: list[str] = field(default_factory=list)
    message: str = ""

    def to_dict(self) -> dict[str, t.Any]:
        return {
            "event": self.event.to_dict(),
            "warnings": list(self.warnings),
            "message": self.message,
        }


@dataclass
class QueryResult:
    """Events returned by list, search and reminder operations."""
    events: list[Event] = field(default_factory=list)
    message: str = ""

    @property
    def found(self) -> bool:
        return bool(self.events)

    def to_dict(self) -> dict[str, t.Any]:
        return {
            "events": [event.to_dict() for event in self.events],
            "message": self.message,
        }


@dataclass
class EditResult:
    """Outcome of an edit.

    ``index`` is the store position of the edited event, or None when no
    event carried the target name.
    """
    found: bool
    event: t.Optional[Event] = None
    index: t.Optional[int] = None
    warnings: list[str] = field(default_factory=list)
    message: str = ""

    def to_dict(self) -> dict[str, t.Any]:
        return {
            "found": self.found,
            "event": self.event.to_dict() if self.event else None,
            "index": self.index,
            "warnings": list(self.warnings),
            "message": self.message,
        }


@dataclass
class DeleteResult:
    """Outcome of a delete: how many events were removed."""
    removed: int = 0
    message: str = ""

    @property
    def found(self) -> bool:
        return self.removed > 0

    def to_dict(self) -> dict[str, t.Any]:
        return asdict(self)
