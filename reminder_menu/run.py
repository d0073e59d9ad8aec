# -*- coding: utf-8 -*-
"""Interactive text menu over the event store."""
import typing as t

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from event_store import Event, EventStore, QueryResult
from event_store.formatting import format_event
from event_store.parsing import parse_ints
from prompts import load_prompt
from reminder_menu.config import LOG_LEVEL, PAUSE_AFTER_ACTION, setup_logging

console = Console()

MENU_TEXT = load_prompt("main_menu")
EXIT_CHOICE = 7


def read_line(prompt: str) -> str:
    """Read one line of input; raises EOFError when input is exhausted."""
    return console.input(prompt)


def print_message(message: str, style: str = "") -> None:
    """Print a status message that may contain user-entered text."""
    text = escape(message)
    console.print(f"[{style}]{text}[/{style}]" if style else text, soft_wrap=True)


def print_warnings(warnings: t.Iterable[str]) -> None:
    for warning in warnings:
        print_message(warning, style="yellow")


def create_events_table(events: list[Event], title: str) -> Table:
    """Create a table with one row per event."""
    table = Table(title=escape(title), show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", width=3)
    table.add_column("Name", style="white")
    table.add_column("Date", style="yellow")
    table.add_column("Time", style="yellow")
    table.add_column("Description")

    for idx, event in enumerate(events, 1):
        table.add_row(
            str(idx),
            escape(event.name),
            str(event.date),
            str(event.time),
            escape(event.description),
        )
    return table


def show_events(result: QueryResult, as_table: bool = False) -> None:
    """Render the events of a query result, or its message when it has none."""
    if not result.found:
        print_message(result.message)
        return

    if as_table:
        console.print(create_events_table(result.events, result.message))
        return

    print_message(f"\n--- {result.message} ---")
    for event in result.events:
        console.print(format_event(event), markup=False, highlight=False, soft_wrap=True)


def add_event(store: EventStore) -> None:
    console.print("\n--- Add New Event ---")
    name = read_line("Enter Event Name: ")
    date_text = read_line("Enter Date (DD MM YYYY): ")
    time_text = read_line("Enter Time (HH MM - 24hr format): ")
    description = read_line("Enter Description: ")

    result = store.add_from_text(name, date_text, time_text, description)
    print_warnings(result.warnings)
    print_message(result.message, style="green")


def search_events(store: EventStore, as_table: bool = False) -> None:
    console.print("\n--- Search Event ---")
    query = read_line("Enter keyword (event name, description, or date D/M/YYYY): ")
    show_events(store.search(query), as_table)


def edit_event(store: EventStore) -> None:
    console.print("\n--- Edit Event ---")
    target = read_line("Enter the NAME of the event to edit: ")

    index = store.find_index(target)
    if index is None:
        print_message(store.edit(target).message)
        return

    event = store.events[index]
    console.print("Event found! Enter new details (leave blank to keep current):")

    print_message(f"Current Name: {event.name}")
    name = read_line("New Event Name: ")
    print_message(f"Current Date: {event.date}")
    date_text = read_line("New Date (DD MM YYYY): ")
    print_message(f"Current Time: {event.time}")
    time_text = read_line("New Time (HH MM): ")
    print_message(f"Current Description: {event.description}")
    description = read_line("New Description: ")

    result = store.edit(
        target,
        name=name,
        date_text=date_text,
        time_text=time_text,
        description=description,
    )
    print_warnings(result.warnings)
    print_message(result.message, style="green")


def delete_event(store: EventStore) -> None:
    console.print("\n--- Delete Event ---")
    name = read_line("Enter the NAME of the event to delete: ")
    result = store.delete(name)
    print_message(result.message, style="green" if result.found else "")


def read_choice() -> int:
    """Prompt until a line starts with an integer; trailing text is ignored."""
    parts = parse_ints(read_line("Enter your choice: "), 1)
    while parts is None:
        parts = parse_ints(read_line("Invalid input. Please enter a number: "), 1)
    return parts[0]


def run_menu(store: EventStore, as_table: bool = False, pause: bool = True) -> None:
    """Run the menu loop until the user exits or input runs out."""
    actions: dict[int, t.Callable[[], None]] = {
        1: lambda: add_event(store),
        2: lambda: show_events(store.list_sorted(), as_table),
        3: lambda: search_events(store, as_table),
        4: lambda: edit_event(store),
        5: lambda: delete_event(store),
        6: lambda: show_events(store.upcoming(), as_table),
    }

    try:
        while True:
            console.print(f"\n{MENU_TEXT}", markup=False, highlight=False)
            choice = read_choice()
            if choice == EXIT_CHOICE:
                break

            action = actions.get(choice)
            if action is None:
                print_message("Invalid choice. Please try again.", style="red")
            else:
                action()

            if pause:
                read_line("\nPress Enter to continue...")
    except EOFError:
        console.print()

    console.print("Exiting Event Reminder. Goodbye!")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--table", "as_table", is_flag=True, help="Show events as a table instead of text blocks.")
@click.option(
    "--pause/--no-pause",
    default=PAUSE_AFTER_ACTION,
    show_default=True,
    help="Wait for Enter after each action.",
)
@click.option("--log-level", default=LOG_LEVEL, show_default=True, help="Logging level written to stderr.")
def main(as_table: bool, pause: bool, log_level: str) -> None:
    """Manage an in-memory list of events from a text menu.

    Events are kept only while the program runs.
    """
    setup_logging(log_level)
    run_menu(EventStore(), as_table=as_table, pause=pause)


if __name__ == "__main__":
    main()
