"""In-memory event store with date/time ordering."""
from .models import AddResult, Date, DeleteResult, EditResult, Event, QueryResult, Time
from .store import EventStore

__all__ = [
    "AddResult",
    "Date",
    "DeleteResult",
    "EditResult",
    "Event",
    "EventStore",
    "QueryResult",
    "Time",
]
