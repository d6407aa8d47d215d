"""Range splitting layer for working around the feed's silent event cap.

The calendar feed returns at most an unpublished number of events per
request and drops the rest without saying so. This module fetches a range,
bisects it whenever a response reaches the cap, and merges the leaves.

Architecture:
    The splitting layer consists of:
    - definitions.py: Split metadata structures (SplitPolicy, SplitPlan, SplitResult)
    - planners.py: Truncation detection and bisection (RangePlanner)
    - executors.py: Recursive fetch and aggregation (RangeSplitExecutor)
    - merging.py: Deduplication by event id and chronological sorting
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import (
    DEFAULT_EVENT_CAP,
    DedupStrategy,
    SplitPlan,
    SplitPolicy,
    SplitResult,
)
from .executors import FetchRange, RangeSplitExecutor
from .merging import deduplicate, merge_events, sort_events
from .planners import RangePlanner

__all__ = [
    "DEFAULT_EVENT_CAP",
    "DedupStrategy",
    "FetchRange",
    "RangePlanner",
    "RangeSplitExecutor",
    "SplitPlan",
    "SplitPolicy",
    "SplitResult",
    "deduplicate",
    "merge_events",
    "sort_events",
]
