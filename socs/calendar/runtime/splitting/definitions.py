"""Range splitting policy and result structures.

This module defines the data structures used to describe how a date range
is split when the calendar feed silently truncates a response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ...models import CalendarEvent, DateRange

# The feed never publishes its cap; a response of this many events is
# treated as truncated.
DEFAULT_EVENT_CAP = 100


class DedupStrategy(str, Enum):
    """Which copy to keep when the same ``event_id`` is fetched twice."""

    FIRST_SEEN = "first_seen"
    LAST_SEEN = "last_seen"


@dataclass(frozen=True)
class SplitPolicy:
    """Splitting policy for a calendar fetch.

    Attributes:
        max_events: Response size at or above which truncation is assumed
        dedup: Tie-break for duplicate event ids across sub-ranges
        concurrent: Fetch the two halves of a split concurrently
    """

    max_events: int = DEFAULT_EVENT_CAP
    dedup: DedupStrategy = DedupStrategy.FIRST_SEEN
    concurrent: bool = False

    def __post_init__(self) -> None:
        """Validate policy configuration."""
        if self.max_events < 1:
            raise ValueError("SplitPolicy max_events must be positive")


@dataclass(frozen=True)
class SplitPlan:
    """Plan for fetching a single sub-range.

    Attributes:
        date_range: Sub-range to fetch
        depth: Recursion depth (0 for the caller's range)
        path: Branch taken from the root, e.g. ``"01"`` is lower then upper
    """

    date_range: DateRange
    depth: int = 0
    path: str = ""

    def child(self, date_range: DateRange, index: int) -> SplitPlan:
        return SplitPlan(date_range=date_range, depth=self.depth + 1, path=f"{self.path}{index}")


@dataclass
class SplitResult:
    """Result of a split fetch.

    Attributes:
        events: Merged, deduplicated and sorted events
        requests_made: Number of feed requests issued
        splits: Number of ranges that were bisected
        max_depth: Deepest recursion level reached
        capped_days: Single-day ranges accepted even though they hit the cap
    """

    events: list[CalendarEvent]
    requests_made: int = 0
    splits: int = 0
    max_depth: int = 0
    capped_days: list[DateRange] = field(default_factory=list)

    @property
    def total_events(self) -> int:
        return len(self.events)
