"""SOCS calendar endpoint definition and adapter.

The feed answers one GET per date range with an XML document of the form::

    <SOCSCalendar>
      <CalendarEvent>
        <EventID>1234</EventID>
        <StartDate>10/12/2025</StartDate>
        <EndDate>10/12/2025</EndDate>
        <StartTime>08:30</StartTime>
        <EndTime>09:30</EndTime>
        <Title>Assembly</Title>
        <Description/>
        <Location>Main Hall</Location>
        <Category>Whole School, Staff</Category>
      </CalendarEvent>
      ...
    </SOCSCalendar>
"""

from __future__ import annotations

import datetime as dt
from typing import Any
from xml.etree.ElementTree import Element
from xml.etree.ElementTree import ParseError as XMLSyntaxError

from defusedxml import DefusedXmlException, ElementTree
from pydantic import ValidationError

from socs.calendar.core.exceptions import ParseError
from socs.calendar.models import AllDay, CalendarEvent, DateRange, EventTime, Specific
from socs.calendar.runtime.rest import ResponseAdapter, RestEndpointSpec

from ...config import (
    ALL_DAY_MARKER,
    API_MONTH_NAMES,
    CATEGORY_SEPARATOR,
    DEFAULT_EVENT_DURATION,
    END_DATE_PARAM,
    STANDARD_INCLUSION,
    START_DATE_PARAM,
    XML_CONTENT_TYPE,
    XML_DATE_FORMAT,
    XML_TIME_FORMAT,
)

EVENT_TAG = "CalendarEvent"


def format_api_date(value: dt.date) -> str:
    """Format a date for the feed's query string, e.g. ``10 Dec 25``."""
    # Not strftime: %b follows LC_TIME
    return f"{value.day:02d} {API_MONTH_NAMES[value.month - 1]} {value.year % 100:02d}"


def _build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for one date range."""
    date_range: DateRange = params["date_range"]
    return {
        START_DATE_PARAM: format_api_date(date_range.start),
        END_DATE_PARAM: format_api_date(date_range.end),
        **STANDARD_INCLUSION.to_query(),
    }


def _build_headers(params: dict[str, Any]) -> dict[str, str]:
    return {"Accept": XML_CONTENT_TYPE}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="calendar",
    build_query=_build_query,
    build_headers=_build_headers,
)


def _find_text(record: Element, tag: str) -> str | None:
    """Text of a child element, ``""`` if empty, ``None`` if absent."""
    element = record.find(tag)
    if element is None:
        return None
    return element.text or ""


def _required_text(record: Element, tag: str, event_id: str | None = None) -> str:
    text = _find_text(record, tag)
    if text is None:
        raise ParseError(f"Missing required field {tag}", event_id=event_id)
    return text


def parse_date(text: str, event_id: str | None = None) -> dt.date:
    """Parse a feed date in ``DD/MM/YYYY`` format."""
    try:
        return dt.datetime.strptime(text.strip(), XML_DATE_FORMAT).date()
    except ValueError as e:
        raise ParseError(f"Invalid date format: {text!r}", event_id=event_id) from e


def parse_event_time(date: dt.date, text: str, event_id: str | None = None) -> EventTime:
    """Parse a feed time, either ``All Day`` (or blank) or ``HH:MM``."""
    text = text.strip()
    if not text or text.lower() == ALL_DAY_MARKER:
        return AllDay(date=date)
    try:
        time = dt.datetime.strptime(text, XML_TIME_FORMAT).time()
    except ValueError as e:
        raise ParseError(f"Failed to parse time: {text!r}", event_id=event_id) from e
    return Specific(date=date, time=time)


def _parse_end(
    start: EventTime, end_date: dt.date, end_text: str | None, event_id: str
) -> EventTime:
    if end_text is not None and end_text.strip():
        return parse_event_time(end_date, end_text, event_id)
    if isinstance(start, AllDay):
        return AllDay(date=end_date)
    if end_text is None:
        # No end time element at all
        return start
    end_time = (dt.datetime.combine(dt.date.min, start.time) + DEFAULT_EVENT_DURATION).time()
    return Specific(date=end_date, time=end_time)


def parse_categories(text: str) -> list[str]:
    return [part.strip() for part in text.split(CATEGORY_SEPARATOR) if part.strip()]


def parse_event(record: Element) -> CalendarEvent:
    """Map one ``CalendarEvent`` element to a CalendarEvent."""
    event_id = _required_text(record, "EventID").strip()
    if not event_id:
        raise ParseError("Empty EventID")

    start_date = parse_date(_required_text(record, "StartDate", event_id), event_id)
    end_date = parse_date(_required_text(record, "EndDate", event_id), event_id)
    start = parse_event_time(start_date, _required_text(record, "StartTime", event_id), event_id)
    end = _parse_end(start, end_date, _find_text(record, "EndTime"), event_id)

    description = _find_text(record, "Description")
    try:
        return CalendarEvent(
            event_id=event_id,
            title=_required_text(record, "Title", event_id),
            description=description if description and description.strip() else None,
            location=_required_text(record, "Location", event_id),
            categories=parse_categories(_required_text(record, "Category", event_id)),
            start=start,
            end=end,
        )
    except ValidationError as e:
        raise ParseError(f"Invalid event: {e}", event_id=event_id) from e


def decode_calendar(document: str | bytes) -> list[CalendarEvent]:
    """Decode a whole feed document, in document order.

    Raises:
        ParseError: If the document or any event in it is malformed
    """
    try:
        root = ElementTree.fromstring(document)
    except (XMLSyntaxError, DefusedXmlException) as e:
        raise ParseError(f"Failed to parse XML calendar data: {e}") from e

    return [parse_event(record) for record in root.findall(EVENT_TAG)]


class Adapter(ResponseAdapter):
    """Adapter for parsing the SOCS XML feed into CalendarEvents."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[CalendarEvent]:
        """Parse a SOCS calendar response.

        Args:
            response: Raw XML body
            params: Request parameters (unused; the document is self-describing)

        Returns:
            Events in document order
        """
        return decode_calendar(response)
