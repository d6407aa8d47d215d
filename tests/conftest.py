"""Shared fixtures for building feed documents and events."""

from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from socs.calendar.models import AllDay, CalendarEvent, Specific


def _record(
    event_id: str,
    start_date: str = "10/12/2025",
    end_date: str | None = None,
    start_time: str = "08:30",
    end_time: str | None = "09:30",
    title: str = "Assembly",
    description: str | None = None,
    location: str = "Main Hall",
    category: str = "Whole School",
) -> str:
    parts = [
        f"<EventID>{event_id}</EventID>",
        f"<StartDate>{start_date}</StartDate>",
        f"<EndDate>{end_date or start_date}</EndDate>",
        f"<StartTime>{start_time}</StartTime>",
    ]
    if end_time is not None:
        parts.append(f"<EndTime>{end_time}</EndTime>")
    parts.append(f"<Title>{title}</Title>")
    if description is not None:
        parts.append(f"<Description>{description}</Description>")
    parts.append(f"<Location>{location}</Location>")
    parts.append(f"<Category>{category}</Category>")
    return "<CalendarEvent>" + "".join(parts) + "</CalendarEvent>"


@pytest.fixture
def make_record():
    """Factory for one ``<CalendarEvent>`` element as XML text."""
    return _record


@pytest.fixture
def make_document():
    """Factory wrapping records into a full feed document."""

    def _document(*records: str) -> str:
        body = "".join(records)
        return f'<?xml version="1.0" encoding="utf-8"?><SOCSCalendar>{body}</SOCSCalendar>'

    return _document


@pytest.fixture
def make_event():
    """Factory for decoded events on a given day."""

    def _event(
        event_id: str,
        day: date,
        at: time | None = None,
        title: str | None = None,
    ) -> CalendarEvent:
        start = AllDay(date=day) if at is None else Specific(date=day, time=at)
        end = AllDay(date=day) if at is None else Specific(date=day, time=at)
        return CalendarEvent(
            event_id=event_id,
            title=title or f"Event {event_id}",
            start=start,
            end=end,
        )

    return _event


@pytest.fixture
def days_between():
    """Every date in an inclusive range."""

    def _days(start: date, end: date) -> list[date]:
        return [start + timedelta(days=i) for i in range((end - start).days + 1)]

    return _days
