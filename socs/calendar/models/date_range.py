"""Inclusive date range value type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days.

    Attributes:
        start: First day of the range (inclusive)
        end: Last day of the range (inclusive)
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        """Validate range bounds."""
        if self.start > self.end:
            raise ValueError(f"start ({self.start}) must not be after end ({self.end})")

    @property
    def days(self) -> int:
        """Number of days covered, counting both ends."""
        return (self.end - self.start).days + 1

    @property
    def is_single_day(self) -> bool:
        return self.start == self.end

    @property
    def midpoint(self) -> date:
        """Last day of the lower half when the range is bisected."""
        return self.start + timedelta(days=(self.days - 1) // 2)

    def split(self) -> tuple[DateRange, DateRange]:
        """Bisect into two adjacent, non-overlapping ranges.

        Returns:
            ``([start, mid], [mid + 1, end])``

        Raises:
            ValueError: If the range covers a single day
        """
        if self.is_single_day:
            raise ValueError(f"Cannot split single-day range {self}")
        mid = self.midpoint
        return DateRange(self.start, mid), DateRange(mid + timedelta(days=1), self.end)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"
