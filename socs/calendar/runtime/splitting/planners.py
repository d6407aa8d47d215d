"""Split planning logic for truncated responses.

This module provides the RangePlanner class that decides whether a fetched
range looks truncated and, if so, how to divide it.
"""

from __future__ import annotations

from .definitions import SplitPlan, SplitPolicy
from .telemetry import log_cap_reached_single_day, log_range_split


class RangePlanner:
    """Plans bisection of date ranges whose responses hit the cap."""

    def __init__(self, policy: SplitPolicy) -> None:
        self._policy = policy

    def is_truncated(self, returned: int) -> bool:
        """Whether a response of ``returned`` events may have been cut short."""
        return returned >= self._policy.max_events

    def plan(self, plan: SplitPlan, returned: int) -> list[SplitPlan]:
        """Plan child fetches for a range that returned ``returned`` events.

        Args:
            plan: Plan that was just fetched
            returned: Number of events decoded for it

        Returns:
            Two child plans covering the same days if the response looks
            truncated, otherwise an empty list (the response is accepted)
        """
        if not self.is_truncated(returned):
            return []

        date_range = plan.date_range
        if date_range.is_single_day:
            # Nothing smaller to ask for; accept what the feed returned
            log_cap_reached_single_day(
                date_range=date_range,
                returned=returned,
                max_events=self._policy.max_events,
            )
            return []

        lower, upper = date_range.split()
        log_range_split(
            date_range=date_range,
            lower=lower,
            upper=upper,
            depth=plan.depth,
            returned=returned,
            max_events=self._policy.max_events,
        )
        return [plan.child(lower, 0), plan.child(upper, 1)]
