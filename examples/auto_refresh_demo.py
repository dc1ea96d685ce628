#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import random
from pathlib import Path

from reportkit.sync.config import RefreshConfig
from reportkit.sync.runtime.refresh import (
    JSONFilePreferenceStore,
    QueryCache,
    RefreshScheduler,
    VisibilityFlag,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run the dashboard auto-refresh loop against fake loaders")
    p.add_argument("duration", nargs="?", type=float, default=10.0, help="Seconds to run")
    p.add_argument("--interval", type=float, default=2.0)
    p.add_argument("--prefs", type=Path, default=Path(".reportkit-prefs.json"))
    p.add_argument("--fail-rate", type=float, default=0.2, help="Chance a refetch fails")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    cache = QueryCache()

    async def load_dashboard() -> dict[str, int]:
        await asyncio.sleep(0.1)
        if random.random() < args.fail_rate:
            raise ConnectionError("backend unavailable")
        return {"leads": random.randint(100, 200), "closed": random.randint(0, 30)}

    cache.register("dashboard", load_dashboard)
    cache.register("dashboardData", load_dashboard)

    visibility = VisibilityFlag()
    scheduler = RefreshScheduler(
        cache,
        JSONFilePreferenceStore(args.prefs),
        visibility=visibility,
        config=RefreshConfig(interval=args.interval, min_refresh_seconds=0.2),
        on_refresh_complete=lambda: print(f"refreshed: {cache.get('dashboard')}"),
        on_refresh_error=lambda e: print(f"refresh failed: {e}"),
    )

    async with scheduler:
        if not scheduler.enabled:
            print("Auto refresh was off; turning it on (persisted)")
            scheduler.toggle_enabled(True)

        # Hide the "page" for a while mid-run to show the pause
        await asyncio.sleep(args.duration / 3)
        print("page hidden")
        visibility.set_visible(False)
        await asyncio.sleep(args.duration / 3)
        print("page visible")
        visibility.set_visible(True)
        await asyncio.sleep(args.duration / 3)

        state = scheduler.state
        print(f"status={state.status.value} last_updated={state.last_updated} errors={state.error_count}")


if __name__ == "__main__":
    asyncio.run(main())
