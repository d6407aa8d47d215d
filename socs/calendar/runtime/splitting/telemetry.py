"""Structured logging for split fetch operations.

This module provides telemetry hooks for split fetches, emitting structured
logs keyed by event name with details in ``extra``.
"""

from __future__ import annotations

import logging

from ...models import DateRange
from .definitions import SplitPlan, SplitResult

logger = logging.getLogger(__name__)


def _range_fields(date_range: DateRange) -> dict[str, str]:
    return {
        "start_date": date_range.start.isoformat(),
        "end_date": date_range.end.isoformat(),
    }


def log_range_fetched(
    *,
    plan: SplitPlan,
    returned: int,
    latency_ms: float | None = None,
) -> None:
    """Log a completed fetch of one sub-range.

    Args:
        plan: Plan that was fetched
        returned: Number of events decoded
        latency_ms: Fetch and decode latency in milliseconds (optional)
    """
    logger.info(
        "range_fetched",
        extra={
            **_range_fields(plan.date_range),
            "depth": plan.depth,
            "path": plan.path,
            "returned": returned,
            "latency_ms": latency_ms,
        },
    )


def log_range_split(
    *,
    date_range: DateRange,
    lower: DateRange,
    upper: DateRange,
    depth: int,
    returned: int,
    max_events: int,
) -> None:
    """Log bisection of a range whose response hit the cap."""
    logger.info(
        "range_split",
        extra={
            **_range_fields(date_range),
            "lower": str(lower),
            "upper": str(upper),
            "depth": depth,
            "returned": returned,
            "max_events": max_events,
        },
    )


def log_cap_reached_single_day(
    *,
    date_range: DateRange,
    returned: int,
    max_events: int,
) -> None:
    """Warn that a single day hit the cap and cannot be split further."""
    logger.warning(
        "range_cap_reached_single_day",
        extra={
            **_range_fields(date_range),
            "returned": returned,
            "max_events": max_events,
        },
    )


def log_range_error(
    *,
    plan: SplitPlan,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed sub-range fetch.

    Args:
        plan: Plan that failed
        error_type: Type of error (e.g., "TransportError", "ParseError")
        error_message: Error message
    """
    logger.error(
        "range_fetch_error",
        extra={
            **_range_fields(plan.date_range),
            "depth": plan.depth,
            "path": plan.path,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_fetch_complete(
    *,
    date_range: DateRange,
    result: SplitResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a whole split fetch."""
    logger.info(
        "range_fetch_complete",
        extra={
            **_range_fields(date_range),
            "requests_made": result.requests_made,
            "splits": result.splits,
            "max_depth": result.max_depth,
            "total_events": result.total_events,
            "capped_days": [str(r) for r in result.capped_days],
            "total_latency_ms": total_latency_ms,
        },
    )
