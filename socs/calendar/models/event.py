"""Calendar event data model."""

from pydantic import BaseModel, ConfigDict, Field

from .event_time import EventTime


class CalendarEvent(BaseModel):
    """One event published by the calendar feed.

    Identity is ``event_id``: two events with the same id are the same event
    even if other fields differ between fetches. Text fields are kept exactly
    as published.
    """

    event_id: str = Field(..., min_length=1, pattern=r"\S")
    title: str
    description: str | None = None
    location: str = ""
    categories: list[str] = Field(default_factory=list)
    start: EventTime
    end: EventTime

    model_config = ConfigDict(frozen=True)

    @property
    def is_all_day(self) -> bool:
        return self.start.is_all_day
