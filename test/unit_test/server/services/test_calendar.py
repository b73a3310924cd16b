"""
Unit tests for the calendar helpers.
"""

from datetime import date, datetime, timezone

import pytest

from swat_manager.core.database.entities.events import Event
from swat_manager.server.services.calendar import calendar_window, filter_events, parse_date, parse_event_start

UTC = timezone.utc


class TestParsing:
    def test_parse_date(self):
        assert parse_date("2026-10-19") == date(2026, 10, 19)

    @pytest.mark.parametrize("value", ["2026-13-01", "2026-02-30", "19/10/2026", ""])
    def test_parse_date_invalid(self, value):
        with pytest.raises(ValueError):
            parse_date(value)

    def test_parse_event_start(self):
        assert parse_event_start("2026-10-19", "14:30") == datetime(2026, 10, 19, 14, 30, tzinfo=UTC)

    def test_parse_event_start_defaults_to_midnight(self):
        assert parse_event_start("2026-10-19", None) == datetime(2026, 10, 19, tzinfo=UTC)

    def test_parse_event_start_invalid_time(self):
        with pytest.raises(ValueError):
            parse_event_start("2026-10-19", "25:00")


class TestCalendarWindow:
    def test_day(self):
        start, end = calendar_window("day", date(2026, 10, 19))

        assert (start, end) == (datetime(2026, 10, 19, tzinfo=UTC), datetime(2026, 10, 20, tzinfo=UTC))

    @pytest.mark.parametrize(
        "anchor",
        [date(2026, 10, 18), date(2026, 10, 21), date(2026, 10, 24)],
        ids=["sunday", "wednesday", "saturday"],
    )
    def test_week_starts_on_sunday(self, anchor):
        start, end = calendar_window("week", anchor)

        assert start == datetime(2026, 10, 18, tzinfo=UTC)
        assert end == datetime(2026, 10, 25, tzinfo=UTC)

    def test_week_across_month_end(self):
        start, end = calendar_window("week", date(2026, 11, 2))

        assert (start, end) == (datetime(2026, 11, 1, tzinfo=UTC), datetime(2026, 11, 8, tzinfo=UTC))

    def test_month(self):
        start, end = calendar_window("month", date(2026, 2, 14))

        assert (start, end) == (datetime(2026, 2, 1, tzinfo=UTC), datetime(2026, 3, 1, tzinfo=UTC))

    def test_december_rolls_into_next_year(self):
        start, end = calendar_window("month", date(2026, 12, 31))

        assert (start, end) == (datetime(2026, 12, 1, tzinfo=UTC), datetime(2027, 1, 1, tzinfo=UTC))

    def test_unknown_view(self):
        with pytest.raises(ValueError):
            calendar_window("year", date(2026, 1, 1))


class TestFilterEvents:
    @pytest.fixture
    def events(self):
        return [
            Event(id="e1", title="Drill", user_id="u", start_date=datetime(2026, 10, 19), event_type="training",
                  priority="high", status="scheduled"),
            Event(id="e2", title="Inspection", user_id="u", start_date=datetime(2026, 10, 20),
                  event_type="maintenance", priority="low", status="completed"),
            Event(id="e3", title="Briefing", user_id="u", start_date=datetime(2026, 10, 21), event_type="meeting",
                  priority="high", status="cancelled"),
        ]

    def test_no_filters(self, events):
        assert filter_events(events) == events

    def test_by_type(self, events):
        assert [e.id for e in filter_events(events, event_types=["training", "meeting"])] == ["e1", "e3"]

    def test_filters_combine(self, events):
        result = filter_events(events, priorities=["high"], statuses=["cancelled"])

        assert [e.id for e in result] == ["e3"]

    def test_no_match(self, events):
        assert filter_events(events, event_types=["deployment"]) == []
