# -*- coding: utf-8 -*-
"""Tests for the Date, Time and Event value types and their text forms."""
from event_store.formatting import SEPARATOR, format_event, format_events
from event_store.models import Date, Event, Time
from event_store.parsing import parse_date, parse_ints, parse_time


def test_date_defaults_and_rendering() -> None:
    """Test the default date and the unpadded D/M/YYYY form."""
    assert Date() == Date(1, 1, 2000)
    assert str(Date(5, 3, 2024)) == "5/3/2024"
    assert str(Date(15, 12, 1999)) == "15/12/1999"


def test_date_orders_by_year_then_month_then_day() -> None:
    """Test that year outranks month and month outranks day."""
    assert Date(31, 12, 2023) < Date(1, 1, 2024)
    assert Date(31, 1, 2024) < Date(1, 2, 2024)
    assert Date(1, 2, 2024) < Date(2, 2, 2024)
    assert Date(2, 2, 2024) > Date(1, 2, 2024)
    assert Date(2, 2, 2024) <= Date(2, 2, 2024)
    assert not Date(2, 2, 2024) < Date(2, 2, 2024)


def test_date_equality_is_exact_field_match() -> None:
    """Test equality without any calendar validation."""
    assert Date(30, 2, 2024) == Date(30, 2, 2024)
    assert Date(30, 2, 2024) != Date(1, 3, 2024)
    assert Date(30, 2, 2024).is_valid()


def test_date_is_valid_bounds() -> None:
    """Test the accepted ranges of each date field."""
    assert Date(1, 1, 1900).is_valid()
    assert Date(31, 12, 2100).is_valid()
    assert not Date(0, 1, 2000).is_valid()
    assert not Date(32, 1, 2000).is_valid()
    assert not Date(1, 13, 2000).is_valid()
    assert not Date(1, 1, 1899).is_valid()
    assert not Date(1, 1, 2101).is_valid()


def test_time_defaults_rendering_and_order() -> None:
    """Test the zero-padded HH:MM form and hour-then-minute ordering."""
    assert Time() == Time(0, 0)
    assert str(Time()) == "00:00"
    assert str(Time(9, 5)) == "09:05"
    assert str(Time(17, 30)) == "17:30"
    assert Time(9, 59) < Time(10, 0)
    assert Time(10, 1) > Time(10, 0)


def test_time_is_valid_bounds() -> None:
    """Test the accepted hour and minute ranges."""
    assert Time(23, 59).is_valid()
    assert not Time(24, 0).is_valid()
    assert not Time(-1, 0).is_valid()
    assert not Time(12, 60).is_valid()


def test_event_orders_by_date_then_time_only() -> None:
    """Test that name and description do not affect ordering."""
    early = Event("Zulu", Date(1, 1, 2024), Time(8, 0), "zzz")
    later_same_day = Event("Alpha", Date(1, 1, 2024), Time(9, 0), "aaa")
    next_day = Event("Alpha", Date(2, 1, 2024), Time(0, 0), "aaa")

    assert early < later_same_day < next_day
    assert sorted([next_day, later_same_day, early]) == [early, later_same_day, next_day]


def test_event_supports_all_ordering_operators() -> None:
    """Test <=, > and >= alongside <, including events sharing a slot."""
    morning = Event("Run", Date(1, 1, 2024), Time(7, 0), "")
    evening = Event("Dinner", Date(1, 1, 2024), Time(19, 0), "")
    also_morning = Event("Coffee", Date(1, 1, 2024), Time(7, 0), "")

    assert morning <= evening
    assert evening > morning
    assert evening >= morning
    assert morning <= also_morning
    assert morning >= also_morning
    assert not morning > also_morning
    assert not morning < also_morning


def test_events_with_identical_fields_are_distinct_records() -> None:
    """Test that two identical-looking events are still separate entries."""
    first = Event("Standup", Date(1, 1, 2024), Time(9, 0), "sync")
    second = Event("Standup", Date(1, 1, 2024), Time(9, 0), "sync")

    assert first != second
    assert first == first


def test_event_matches_name_description_and_date_string() -> None:
    """Test the case-sensitive substring match over the three fields."""
    event = Event("Release", Date(1, 1, 2024), Time(17, 0), "ship v1")

    assert event.matches("Rel")
    assert event.matches("ship")
    assert event.matches("1/1/2024")
    assert event.matches("/2024")
    assert not event.matches("release")
    assert not event.matches("01/01/2024")
    assert not event.matches("17:00")


def test_parse_ints_reads_leading_integers() -> None:
    """Test that the leading integers are read and trailing text is ignored."""
    assert parse_ints("15 3 2024", 3) == (15, 3, 2024)
    assert parse_ints("  09   30 ", 2) == (9, 30)
    assert parse_ints("15 3 2024 7", 3) == (15, 3, 2024)
    assert parse_ints("15 3 2024 extra", 3) == (15, 3, 2024)
    assert parse_ints("18 15x", 2) == (18, 15)
    assert parse_ints("-1 +5", 2) == (-1, 5)


def test_parse_ints_refuses_short_or_non_numeric_lines() -> None:
    """Test lines that do not start with enough integers."""
    assert parse_ints("15 3", 3) is None
    assert parse_ints("15 March 2024", 3) is None
    assert parse_ints("18x 15", 2) is None
    assert parse_ints("", 2) is None


def test_parse_date_and_time_skip_range_checks() -> None:
    """Test that parsing builds values even when they are out of range."""
    assert parse_date("32 1 2024") == Date(32, 1, 2024)
    assert parse_time("25 61") == Time(25, 61)
    assert parse_date("1/1/2024") is None
    assert parse_time("9:30") is None


def test_format_event_block() -> None:
    """Test the labeled block layout used for display."""
    event = Event("Standup", Date(15, 3, 2024), Time(9, 30), "daily sync")

    assert format_event(event).splitlines() == [
        SEPARATOR,
        "Event Name:  Standup",
        "Date:        15/3/2024",
        "Time:        09:30",
        "Description: daily sync",
        SEPARATOR,
    ]


def test_format_events_with_title() -> None:
    """Test that a title line precedes the event blocks."""
    events = [
        Event("A", Date(1, 1, 2024), Time(), ""),
        Event("B", Date(2, 1, 2024), Time(), ""),
    ]

    text = format_events(events, title="All Events")

    assert text.startswith("--- All Events ---\n")
    assert text.count(SEPARATOR) == 4
    assert text.index("Event Name:  A") < text.index("Event Name:  B")
