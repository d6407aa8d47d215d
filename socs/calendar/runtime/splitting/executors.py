"""Split execution logic for fetching and aggregating sub-ranges.

This module provides the RangeSplitExecutor class that fetches a date range,
bisects it whenever the response looks truncated, and merges the leaf
responses into one deduplicated, chronologically sorted result.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from time import perf_counter

from ...models import CalendarEvent, DateRange
from .definitions import SplitPlan, SplitPolicy, SplitResult
from .merging import merge_events
from .planners import RangePlanner
from .telemetry import log_fetch_complete, log_range_error, log_range_fetched

FetchRange = Callable[[DateRange], Awaitable[list[CalendarEvent]]]


class RangeSplitExecutor:
    """Executes a recursive split fetch and aggregates results.

    Each branch returns its own events and counters; parents combine what
    their children return, so no state is shared between branches.
    """

    def __init__(self, policy: SplitPolicy | None = None) -> None:
        """Initialize split executor.

        Args:
            policy: Splitting policy (defaults to ``SplitPolicy()``)
        """
        self._policy = policy or SplitPolicy()
        self._planner = RangePlanner(self._policy)

    @property
    def policy(self) -> SplitPolicy:
        return self._policy

    async def execute(
        self,
        *,
        date_range: DateRange,
        fetch_range: FetchRange,
    ) -> SplitResult:
        """Fetch every event in ``date_range``.

        Args:
            date_range: Inclusive range requested by the caller
            fetch_range: Async function that fetches and decodes one range

        Returns:
            SplitResult with merged events and request statistics

        Raises:
            Whatever ``fetch_range`` raises for any sub-range; no partial
            result is returned
        """
        started = perf_counter()
        outcome = await self._run(SplitPlan(date_range=date_range), fetch_range)
        outcome.events = merge_events([outcome.events], self._policy.dedup)

        log_fetch_complete(
            date_range=date_range,
            result=outcome,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return outcome

    async def _run(self, plan: SplitPlan, fetch_range: FetchRange) -> SplitResult:
        """Fetch one plan, recursing into halves if it looks truncated.

        The returned events are the raw concatenation of leaf responses.
        """
        fetch_start = perf_counter()
        try:
            events = await fetch_range(plan.date_range)
        except Exception as e:
            log_range_error(
                plan=plan,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_range_fetched(
            plan=plan,
            returned=len(events),
            latency_ms=(perf_counter() - fetch_start) * 1000.0,
        )

        children = self._planner.plan(plan, len(events))
        if not children:
            capped = (
                [plan.date_range]
                if plan.date_range.is_single_day and self._planner.is_truncated(len(events))
                else []
            )
            return SplitResult(
                events=list(events),
                requests_made=1,
                max_depth=plan.depth,
                capped_days=capped,
            )

        outcomes = await self._run_children(children, fetch_range)

        merged = SplitResult(events=[], requests_made=1, splits=1, max_depth=plan.depth)
        for child in outcomes:
            merged.events.extend(child.events)
            merged.requests_made += child.requests_made
            merged.splits += child.splits
            merged.max_depth = max(merged.max_depth, child.max_depth)
            merged.capped_days.extend(child.capped_days)
        return merged

    async def _run_children(
        self, children: list[SplitPlan], fetch_range: FetchRange
    ) -> list[SplitResult]:
        if not self._policy.concurrent:
            return [await self._run(child, fetch_range) for child in children]

        tasks = [asyncio.ensure_future(self._run(child, fetch_range)) for child in children]
        try:
            return list(await asyncio.gather(*tasks))
        except Exception:
            # One half failed; the sibling's result is useless without it
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
