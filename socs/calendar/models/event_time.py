"""Event start/end time data model."""

import datetime as dt
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class AllDay(BaseModel):
    """All-day marker for a single calendar date."""

    kind: Literal["all_day"] = "all_day"
    date: dt.date

    model_config = ConfigDict(frozen=True)

    @property
    def is_all_day(self) -> bool:
        return True

    def sort_key(self) -> tuple[dt.date, int, dt.time]:
        """Chronological key; all-day events lead their date."""
        return (self.date, 0, dt.time.min)

    def __str__(self) -> str:
        return f"{self.date.strftime('%d %b %Y')} (All Day)"


class Specific(BaseModel):
    """A specific institution-local moment (no timezone)."""

    kind: Literal["specific"] = "specific"
    date: dt.date
    time: dt.time

    model_config = ConfigDict(frozen=True)

    @property
    def is_all_day(self) -> bool:
        return False

    def sort_key(self) -> tuple[dt.date, int, dt.time]:
        """Chronological key ordered by date, then time of day."""
        return (self.date, 1, self.time)

    def __str__(self) -> str:
        return f"{self.date.strftime('%d %b %Y')} at {self.time.strftime('%H:%M')}"


EventTime = Annotated[Union[AllDay, Specific], Field(discriminator="kind")]
