# -*- coding: utf-8 -*-
"""
In-memory storage for events.

The store owns every event for the lifetime of the process. Operations take
structured inputs and return result objects; they never prompt or print, so
any front end (the interactive menu, the MCP tool server, tests) can drive them.
"""
from __future__ import annotations

import logging
import typing as t

from .models import AddResult, Date, DeleteResult, EditResult, Event, QueryResult, Time
from .parsing import parse_date, parse_time

logger = logging.getLogger(__name__)

INVALID_DATE_DEFAULT = "Invalid date. Using default (1/1/2000)."
INVALID_TIME_DEFAULT = "Invalid time. Using default (00:00)."


class EventStore:
    """Ordered, in-memory collection of events."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> list[Event]:
        """A snapshot of the events in current store order."""
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()

    def add(
            self,
            name: str,
            day: int,
            month: int,
            year: int,
            hour: int,
            minute: int,
            description: str = "",
    ) -> AddResult:
        """Appends a new event.

        Out-of-range date or time values are replaced with the defaults
        (1/1/2000 and 00:00) and reported as warnings; adding never fails.

        :param name: Event name, may be empty.
        :param day: Day of month (1-31).
        :param month: Month (1-12).
        :param year: Year (1900-2100).
        :param hour: Hour (0-23).
        :param minute: Minute (0-59).
        :param description: Free-text description.
        :return: An AddResult holding the stored event.
        """
        return self._append(name, Date(day, month, year), Time(hour, minute), description)

    def add_from_text(
            self,
            name: str,
            date_text: str,
            time_text: str,
            description: str = "",
    ) -> AddResult:
        """Appends a new event from raw ``DD MM YYYY`` and ``HH MM`` lines.

        A line that does not hold the expected number of integers is treated
        the same as an out-of-range value.
        """
        return self._append(name, parse_date(date_text), parse_time(time_text), description)

    def _append(
            self,
            name: str,
            date: t.Optional[Date],
            time: t.Optional[Time],
            description: str,
    ) -> AddResult:
        warnings = []
        if date is None or not date.is_valid():
            logger.info("Rejected date %s for event '%s'", date, name)
            warnings.append(INVALID_DATE_DEFAULT)
            date = Date()
        if time is None or not time.is_valid():
            logger.info("Rejected time %s for event '%s'", time, name)
            warnings.append(INVALID_TIME_DEFAULT)
            time = Time()

        event = Event(name=name, date=date, time=time, description=description)
        self._events.append(event)
        logger.info("Added event '%s' (%d in store)", name, len(self._events))
        return AddResult(
            event=event,
            warnings=warnings,
            message=f"Event '{name}' added successfully!",
        )

    def _sort(self) -> None:
        self._events.sort(key=lambda event: event.sort_key)

    def list_sorted(self) -> QueryResult:
        """Sorts the store in place by (date, time) and returns every event."""
        if not self._events:
            return QueryResult(message="No events to display.")
        self._sort()
        return QueryResult(events=list(self._events), message="All Events")

    def upcoming(self) -> QueryResult:
        """Lists every event in chronological order as upcoming reminders.

        This does not compare against the current clock; every stored event
        is returned.
        """
        if not self._events:
            return QueryResult(message="No events to check for reminders.")
        self._sort()
        return QueryResult(events=list(self._events), message="Upcoming Events (Sorted)")

    def search(self, query: str) -> QueryResult:
        """Finds events whose name, description or date string contains ``query``.

        Matches are returned in current store order.
        """
        if not self._events:
            return QueryResult(message="No events to search.")
        matches = [event for event in self._events if event.matches(query)]
        logger.info("Search for '%s' matched %d event(s)", query, len(matches))
        if not matches:
            return QueryResult(message=f"No events found matching '{query}'.")
        return QueryResult(events=matches, message=f"Events matching '{query}'")

    def find_index(self, name: str) -> t.Optional[int]:
        """Returns the position of the first event named exactly ``name``."""
        for index, event in enumerate(self._events):
            if event.name == name:
                return index
        return None

    def edit(
            self,
            target: str,
            name: t.Optional[str] = None,
            date_text: t.Optional[str] = None,
            time_text: t.Optional[str] = None,
            description: t.Optional[str] = None,
    ) -> EditResult:
        """Updates the first event named ``target`` field by field.

        A field given as None or an empty string keeps its current value.
        Date and time lines must hold exactly three and two integers inside
        the accepted ranges; otherwise that field is left alone and a warning
        is returned while the other fields are still applied.
        """
        if not self._events:
            return EditResult(found=False, message="No events to edit.")

        index = self.find_index(target)
        if index is None:
            return EditResult(found=False, message=f"Event with name '{target}' not found.")

        event = self._events[index]
        warnings = []

        if name:
            event.name = name

        if date_text:
            date = parse_date(date_text)
            if date is None:
                warnings.append("Invalid date format. Date not updated.")
            elif not date.is_valid():
                warnings.append("Invalid date format or range. Date not updated.")
            else:
                event.date = date

        if time_text:
            time = parse_time(time_text)
            if time is None:
                warnings.append("Invalid time format. Time not updated.")
            elif not time.is_valid():
                warnings.append("Invalid time format or range. Time not updated.")
            else:
                event.time = time

        if description:
            event.description = description

        for warning in warnings:
            logger.info("Edit of '%s': %s", target, warning)
        logger.info("Edited event at position %d (now '%s')", index, event.name)
        return EditResult(
            found=True,
            event=event,
            index=index,
            warnings=warnings,
            message=f"Event '{event.name}' updated successfully!",
        )

    def delete(self, name: str) -> DeleteResult:
        """Removes every event named exactly ``name``."""
        if not self._events:
            return DeleteResult(message="No events to delete.")

        original_size = len(self._events)
        self._events = [event for event in self._events if event.name != name]
        removed = original_size - len(self._events)
        logger.info("Deleted %d event(s) named '%s'", removed, name)

        if removed:
            return DeleteResult(removed=removed, message=f"Event '{name}' deleted successfully!")
        return DeleteResult(message=f"Event with name '{name}' not found.")
