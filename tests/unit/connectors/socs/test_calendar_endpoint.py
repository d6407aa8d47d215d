"""Unit tests for the SOCS calendar endpoint spec and XML adapter."""

from __future__ import annotations

import locale
from datetime import date, time

import pytest

from socs.calendar.connectors.socs.config import STANDARD_INCLUSION, InclusionFlags
from socs.calendar.connectors.socs.rest.endpoints import (
    CalendarAdapter,
    CalendarSpec,
    decode_calendar,
    format_api_date,
)
from socs.calendar.core import ParseError
from socs.calendar.models import AllDay, DateRange, Specific


class TestCalendarQuery:
    """Test query construction for the feed."""

    def test_format_api_date(self):
        assert format_api_date(date(2025, 12, 10)) == "10 Dec 25"
        assert format_api_date(date(2026, 1, 5)) == "05 Jan 26"

    def test_format_api_date_every_month(self):
        months = [format_api_date(date(2025, m, 1))[3:6] for m in range(1, 13)]
        assert months == [
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ]

    def test_format_api_date_ignores_locale(self):
        """Month names stay English under a non-English LC_TIME."""
        saved = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            assert format_api_date(date(2025, 12, 10)) == "10 Dec 25"
        finally:
            locale.setlocale(locale.LC_TIME, saved)

    def test_build_headers_accepts_xml(self):
        assert CalendarSpec.build_headers({}) == {"Accept": "text/xml"}

    def test_build_query(self):
        params = {"date_range": DateRange(date(2025, 12, 10), date(2026, 1, 5))}
        query = CalendarSpec.build_query(params)
        assert query == {
            "startdate": "10 Dec 25",
            "enddate": "05 Jan 26",
            "Sport": "0",
            "CoCurricular": "0",
            "IncludeInternal": "1",
            "IncludeUnpublished": "1",
        }

    def test_inclusion_flags_to_query(self):
        flags = InclusionFlags(sports=True, co_curricular=True, internal=False, unpublished=False)
        assert flags.to_query() == {
            "Sport": "1",
            "CoCurricular": "1",
            "IncludeInternal": "0",
            "IncludeUnpublished": "0",
        }
        assert STANDARD_INCLUSION == InclusionFlags()


class TestDecodeCalendar:
    """Test XML decoding into CalendarEvents."""

    def test_specific_event(self, make_record, make_document):
        """Date and time fields yield Specific start and end."""
        doc = make_document(
            make_record(
                "1234",
                description="Whole-school assembly",
                category="Whole School, Staff , ",
            )
        )

        [event] = decode_calendar(doc)

        assert event.event_id == "1234"
        assert event.title == "Assembly"
        assert event.description == "Whole-school assembly"
        assert event.location == "Main Hall"
        assert event.categories == ["Whole School", "Staff"]
        assert event.start == Specific(date=date(2025, 12, 10), time=time(8, 30))
        assert event.end == Specific(date=date(2025, 12, 10), time=time(9, 30))

    def test_all_day_event(self, make_record, make_document):
        """An event without a time component is all-day."""
        doc = make_document(
            make_record("1", start_time="All Day", end_date="12/12/2025", end_time=None)
        )

        [event] = decode_calendar(doc)

        assert event.start == AllDay(date=date(2025, 12, 10))
        assert event.end == AllDay(date=date(2025, 12, 12))

    @pytest.mark.parametrize("marker", ["", "   ", "ALL DAY", "all day"])
    def test_all_day_markers(self, make_record, make_document, marker):
        [event] = decode_calendar(make_document(make_record("1", start_time=marker, end_time=None)))
        assert isinstance(event.start, AllDay)
        assert isinstance(event.end, AllDay)

    def test_blank_end_time_defaults_to_one_hour(self, make_record, make_document):
        [event] = decode_calendar(make_document(make_record("1", start_time="23:30", end_time="")))
        assert event.end == Specific(date=date(2025, 12, 10), time=time(0, 30))

    def test_missing_end_time_matches_start(self, make_record, make_document):
        [event] = decode_calendar(make_document(make_record("1", end_time=None)))
        assert event.end == event.start

    def test_blank_description_is_none(self, make_record, make_document):
        doc = make_document(make_record("1", description="  "), make_record("2"))
        first, second = decode_calendar(doc)
        assert first.description is None
        assert second.description is None

    def test_empty_location_and_categories(self, make_record, make_document):
        [event] = decode_calendar(make_document(make_record("1", location="", category="")))
        assert event.location == ""
        assert event.categories == []

    def test_document_order_is_kept(self, make_record, make_document):
        doc = make_document(
            make_record("b", start_date="02/01/2025"),
            make_record("a", start_date="01/01/2025"),
        )
        assert [e.event_id for e in decode_calendar(doc)] == ["b", "a"]

    def test_empty_document(self, make_document):
        assert decode_calendar(make_document()) == []

    def test_accepts_bytes(self, make_record, make_document):
        doc = make_document(make_record("1")).encode("utf-8")
        assert len(decode_calendar(doc)) == 1

    def test_declared_latin1_encoding(self, make_record):
        """Bytes are decoded using the encoding named in the XML prolog."""
        record = make_record("1", title="Caf\u00e9 evening", location="Salle \u00e0 manger")
        doc = (
            '<?xml version="1.0" encoding="iso-8859-1"?>'
            f"<SOCSCalendar>{record}</SOCSCalendar>"
        ).encode("latin-1")

        [event] = decode_calendar(doc)

        assert event.title == "Caf\u00e9 evening"
        assert event.location == "Salle \u00e0 manger"

    def test_text_fields_kept_as_published(self, make_record, make_document):
        doc = make_document(
            make_record(" 42 ", title=" Sports day ", description=" Bring kit ", location=" Field ")
        )

        [event] = decode_calendar(doc)

        assert event.event_id == "42"
        assert event.title == " Sports day "
        assert event.description == " Bring kit "
        assert event.location == " Field "

    def test_adapter_parse(self, make_record, make_document):
        events = CalendarAdapter().parse(make_document(make_record("1")), {})
        assert [e.event_id for e in events] == ["1"]


class TestDecodeErrors:
    """Test that malformed documents raise ParseError."""

    def test_unparsable_date(self, make_record, make_document):
        doc = make_document(make_record("9", start_date="31/02/2025"))
        with pytest.raises(ParseError, match="Invalid date format") as exc_info:
            decode_calendar(doc)
        assert exc_info.value.event_id == "9"

    def test_unparsable_time(self, make_record, make_document):
        with pytest.raises(ParseError, match="Failed to parse time"):
            decode_calendar(make_document(make_record("1", start_time="half eight")))

    def test_unparsable_end_time(self, make_record, make_document):
        with pytest.raises(ParseError, match="Failed to parse time"):
            decode_calendar(make_document(make_record("1", end_time="25:99")))

    def test_missing_required_field(self, make_document):
        record = (
            "<CalendarEvent><EventID>5</EventID><StartDate>10/12/2025</StartDate>"
            "<EndDate>10/12/2025</EndDate><StartTime>08:30</StartTime>"
            "<Location/><Category/></CalendarEvent>"
        )
        with pytest.raises(ParseError, match="Missing required field Title"):
            decode_calendar(make_document(record))

    def test_empty_event_id(self, make_record, make_document):
        with pytest.raises(ParseError, match="Empty EventID"):
            decode_calendar(make_document(make_record("  ")))

    def test_not_xml(self):
        with pytest.raises(ParseError, match="Failed to parse XML"):
            decode_calendar("<html><body>Service unavailable")

    def test_entity_expansion_rejected(self):
        doc = (
            '<?xml version="1.0"?>'
            '<!DOCTYPE lolz [<!ENTITY lol "lol"><!ENTITY lol2 "&lol;&lol;">]>'
            "<SOCSCalendar>&lol2;</SOCSCalendar>"
        )
        with pytest.raises(ParseError):
            decode_calendar(doc)

    def test_bad_record_is_not_skipped(self, make_record, make_document):
        """One malformed event fails the whole document."""
        doc = make_document(make_record("1"), make_record("2", end_date="not a date"))
        with pytest.raises(ParseError):
            decode_calendar(doc)
