#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path

from reportkit.sync.clients import LeadExportClient
from reportkit.sync.config import BulkFetchConfig
from reportkit.sync.models import LeadFilter


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Export every lead matching a filter")
    p.add_argument("base_url", help="Dashboard backend, e.g. https://dash.example.com")
    p.add_argument("--status", nargs="*", default=[])
    p.add_argument("--search")
    p.add_argument("--token", help="Bearer token")
    p.add_argument("--page-size", type=int, default=100)
    p.add_argument("--concurrency", type=int, default=3)
    p.add_argument("--output", type=Path, help="Write records as JSON here")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    headers = {"Authorization": f"Bearer {args.token}"} if args.token else None
    config = BulkFetchConfig(page_size=args.page_size, max_concurrency=args.concurrency)
    filter = LeadFilter(status=tuple(args.status), search=args.search or None)

    def on_progress(loaded: int, total: int) -> None:
        pct = loaded / total * 100 if total else 100.0
        print(f"Loaded {loaded}/{total} ({pct:.0f}%)")

    async with LeadExportClient(args.base_url, config=config, headers=headers) as client:
        result = await client.fetch_all(filter, on_progress=on_progress)

    print(f"Exported {len(result.records)} leads in {result.pages_fetched} pages ({result.batches_used} rounds)")
    if args.output:
        args.output.write_text(json.dumps(result.records, indent=2, default=str), encoding="utf-8")
        print(f"Wrote {args.output}")


if __name__ == "__main__":
    asyncio.run(main())
