# -*- coding: utf-8 -*-
"""Plain-text rendering of events."""
from __future__ import annotations

import typing as t

from .models import Event

SEPARATOR = "-" * 38


def format_event(event: Event) -> str:
    """Formats a single event as a labeled block framed by separator lines.

    :param event: The event to render.
    :return: Multi-line string with Name, Date, Time and Description rows.
    """
    return "\n".join([
        SEPARATOR,
        f"Event Name:  {event.name}",
        f"Date:        {event.date}",
        f"Time:        {event.time}",
        f"Description: {event.description}",
        SEPARATOR,
    ])


def format_events(events: t.Iterable[Event], title: str = "") -> str:
    """Formats events one block after another, optionally under a title."""
    lines = []
    if title:
        lines.append(f"--- {title} ---")
    lines.extend(format_event(event) for event in events)
    return "\n".join(lines)
