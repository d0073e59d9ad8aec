# -*- coding: utf-8 -*-
"""
MCP server exposing the event store as tools.

The raw ``_`` functions hold the logic and are what tests call; the
decorated tools are thin wrappers registered with FastMCP. One store lives
for the lifetime of the server process.
"""
from __future__ import annotations

import typing as t

from fastmcp import FastMCP

from event_store import EventStore
from event_store.formatting import format_events

mcp = FastMCP("EventReminder")

# In-memory storage for events, discarded when the server exits
store = EventStore()


def _add_event(
        name: str,
        day: int,
        month: int,
        year: int,
        hour: int,
        minute: int,
        description: str = "",
) -> dict[str, t.Any]:
    return store.add(name, day, month, year, hour, minute, description).to_dict()


def _list_events() -> dict[str, t.Any]:
    return store.list_sorted().to_dict()


def _search_events(query: str) -> dict[str, t.Any]:
    return store.search(query).to_dict()


def _edit_event(
        target: str,
        name: str = "",
        date: str = "",
        time: str = "",
        description: str = "",
) -> dict[str, t.Any]:
    return store.edit(
        target,
        name=name,
        date_text=date,
        time_text=time,
        description=description,
    ).to_dict()


def _delete_event(name: str) -> dict[str, t.Any]:
    return store.delete(name).to_dict()


def _upcoming_events() -> dict[str, t.Any]:
    return store.upcoming().to_dict()


def _show_events() -> str:
    result = store.list_sorted()
    if not result.found:
        return result.message
    return format_events(result.events, title=result.message)


@mcp.tool()
def add_event(
        name: str,
        day: int,
        month: int,
        year: int,
        hour: int,
        minute: int,
        description: str = "",
) -> dict[str, t.Any]:
    """Adds an event to the store.

    Out-of-range dates fall back to 1/1/2000 and out-of-range times to 00:00;
    the returned warnings say which fields were replaced.

    :param name: Name of the event.
    :param day: Day of month (1-31).
    :param month: Month (1-12).
    :param year: Year (1900-2100).
    :param hour: Hour in 24-hour format (0-23).
    :param minute: Minute (0-59).
    :param description: Description of the event (optional).
    :return: The stored event, any warnings and a status message.
    """
    return _add_event(name, day, month, year, hour, minute, description)


@mcp.tool()
def list_events() -> dict[str, t.Any]:
    """Lists all events sorted by date and time.

    :return: The events in chronological order and a status message.
    """
    return _list_events()


@mcp.tool()
def search_events(query: str) -> dict[str, t.Any]:
    """Searches events by name, description or date (D/M/YYYY).

    The match is a case-sensitive substring match.

    :param query: Text to look for.
    :return: Matching events in store order and a status message.
    """
    return _search_events(query)


@mcp.tool()
def edit_event(
        target: str,
        name: str = "",
        date: str = "",
        time: str = "",
        description: str = "",
) -> dict[str, t.Any]:
    """Edits the first event whose name equals ``target``.

    Empty fields keep their current value. Invalid date or time lines are
    skipped with a warning while the other fields are still updated.

    :param target: Exact name of the event to edit.
    :param name: New name (optional).
    :param date: New date as "DD MM YYYY" (optional).
    :param time: New time as "HH MM" (optional).
    :param description: New description (optional).
    :return: Whether the event was found, the edited event and warnings.
    """
    return _edit_event(target, name, date, time, description)


@mcp.tool()
def delete_event(name: str) -> dict[str, t.Any]:
    """Deletes every event whose name equals ``name``.

    :param name: Exact name of the events to delete.
    :return: The number of events removed and a status message.
    """
    return _delete_event(name)


@mcp.tool()
def upcoming_events() -> dict[str, t.Any]:
    """Lists every event in chronological order as upcoming reminders.

    :return: All events sorted by date and time and a status message.
    """
    return _upcoming_events()


@mcp.tool()
def show_events() -> str:
    """Displays all events as labeled text blocks, sorted by date and time.

    :return: Formatted events, or a message if there are none.
    """
    return _show_events()


def run() -> None:
    """Runs the server on the stdio transport."""
    mcp.run()


if __name__ == "__main__":
    run()
