#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os
from datetime import date

from socs.calendar import DedupStrategy, SOCSCalendarConnector, SplitPolicy


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch every event from a SOCS calendar feed")
    p.add_argument("start", type=date.fromisoformat, help="First day, YYYY-MM-DD")
    p.add_argument("end", type=date.fromisoformat, help="Last day, YYYY-MM-DD")
    p.add_argument(
        "--url",
        default=os.environ.get("SOCS_CALENDAR_URL"),
        help="Feed URL with ID and key (default: $SOCS_CALENDAR_URL)",
    )
    p.add_argument("--cap", type=int, default=SplitPolicy().max_events)
    p.add_argument("--keep", default="FIRST_SEEN", choices=["FIRST_SEEN", "LAST_SEEN"])
    p.add_argument("--concurrent", action="store_true", help="Fetch split halves concurrently")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()
    if not args.url:
        p.error("--url or SOCS_CALENDAR_URL is required")
    return args


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    policy = SplitPolicy(
        max_events=args.cap,
        dedup=DedupStrategy[args.keep],
        concurrent=args.concurrent,
    )
    async with SOCSCalendarConnector(args.url, policy=policy) as connector:
        result = await connector.fetch_events_detailed(args.start, args.end)

    print("=" * 65)
    print(f"Range      : {args.start.isoformat()} .. {args.end.isoformat()}")
    print(f"Events     : {result.total_events}")
    print(f"Requests   : {result.requests_made} ({result.splits} splits, depth {result.max_depth})")
    print("=" * 65)
    for e in result.events:
        categories = ", ".join(e.categories)
        print(f"{str(e.start):28} | {e.title[:40]:40} | {categories}")
    print("=" * 65)
    for day in result.capped_days:
        print(f"WARNING: {day} returned {args.cap}+ events; some may be missing")


if __name__ == "__main__":
    asyncio.run(main())
