"""Shared SOCS calendar feed constants.

This module centralizes date formats, field names and the fixed inclusion
flags so the endpoint definition and connector can stay small and focused.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

# Query dialect
# - startdate/enddate: "DD Mon YY", e.g. "10 Dec 25", English month names
#   whatever the process locale
API_MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
START_DATE_PARAM = "startdate"
END_DATE_PARAM = "enddate"

# Response dialect
XML_DATE_FORMAT = "%d/%m/%Y"
XML_TIME_FORMAT = "%H:%M"
XML_CONTENT_TYPE = "text/xml"
ALL_DAY_MARKER = "all day"
CATEGORY_SEPARATOR = ","

# Applied when an event has a start time but a blank end time
DEFAULT_EVENT_DURATION = timedelta(hours=1)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class InclusionFlags:
    """The feed's own filtering knobs, sent with every request.

    Attributes:
        sports: Include sports fixtures
        co_curricular: Include co-curricular activities
        internal: Include events marked internal
        unpublished: Include events not yet published to the public calendar
    """

    sports: bool = False
    co_curricular: bool = False
    internal: bool = True
    # Exposes unpublished events to whoever holds the endpoint key
    unpublished: bool = True

    def to_query(self) -> dict[str, str]:
        return {
            "Sport": "1" if self.sports else "0",
            "CoCurricular": "1" if self.co_curricular else "0",
            "IncludeInternal": "1" if self.internal else "0",
            "IncludeUnpublished": "1" if self.unpublished else "0",
        }


STANDARD_INCLUSION = InclusionFlags()
