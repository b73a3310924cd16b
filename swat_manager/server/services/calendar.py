"""
Calendar helpers.

Event starts arrive as a local ``YYYY-MM-DD`` date plus an ``HH:MM`` time and
are stored as UTC datetimes. Listings are windowed by day, by a
Sunday-to-Saturday week, or by calendar month.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from swat_manager.core.database.entities.events import Event
from swat_manager.core.models.domain.enums import CalendarView

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_date(value: str) -> date:
    """Parse ``YYYY-MM-DD``; raises ``ValueError`` when malformed."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_event_start(day: str, time: Optional[str] = "00:00") -> datetime:
    """Combine a date and a time into a UTC datetime.

    Raises:
        ValueError: If either part is malformed
    """
    parsed_time = datetime.strptime(time or "00:00", TIME_FORMAT).time()
    return datetime.combine(parse_date(day), parsed_time, tzinfo=timezone.utc)


def calendar_window(view: CalendarView | str, anchor: date) -> Tuple[datetime, datetime]:
    """Return the half-open [start, end) interval shown by a calendar view."""
    view = CalendarView(view)
    if view is CalendarView.day:
        start = anchor
        end = anchor + timedelta(days=1)
    elif view is CalendarView.week:
        # date.weekday() is 0 for Monday; shift so Sunday starts the week.
        start = anchor - timedelta(days=(anchor.weekday() + 1) % 7)
        end = start + timedelta(days=7)
    else:
        start = anchor.replace(day=1)
        end = start.replace(year=start.year + 1, month=1) if start.month == 12 else start.replace(month=start.month + 1)
    midnight = datetime.min.time()
    return (
        datetime.combine(start, midnight, tzinfo=timezone.utc),
        datetime.combine(end, midnight, tzinfo=timezone.utc),
    )


def filter_events(
    events: Iterable[Event],
    event_types: Sequence[str] = (),
    priorities: Sequence[str] = (),
    statuses: Sequence[str] = (),
) -> List[Event]:
    """Keep events matching every non-empty filter."""
    return [
        event
        for event in events
        if (not event_types or event.event_type in event_types)
        and (not priorities or event.priority in priorities)
        and (not statuses or event.status in statuses)
    ]
