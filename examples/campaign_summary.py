#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path

from reportkit.sync.analytics import aggregate_campaign_stats, format_rate, rate_sort_value
from reportkit.sync.models import CampaignStats


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Summarize campaign stats from a JSON export")
    p.add_argument("path", type=Path, help="JSON list of campaign stat rows")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    rows = json.loads(args.path.read_text(encoding="utf-8"))
    campaigns = [CampaignStats.model_validate(row) for row in rows]

    ranked = sorted(campaigns, key=lambda c: rate_sort_value(c.unique_opens, c.delivered), reverse=True)
    print(f"{'Campaign':30} | {'Delivered':>9} | {'Open rate':>9} | {'Click rate':>10}")
    print("-" * 68)
    for c in ranked:
        print(
            f"{(c.campaign_name or str(c.campaign_id)):30} | {c.delivered:>9} | "
            f"{format_rate(c.unique_opens, c.delivered):>9} | {format_rate(c.unique_clicks, c.delivered):>10}"
        )

    summary = aggregate_campaign_stats(campaigns)
    print("-" * 68)
    print(
        f"{'TOTAL (' + str(summary.total_campaigns) + ')':30} | {summary.delivered:>9} | "
        f"{summary.open_rate:>8.1f}% | {summary.click_rate:>9.1f}%"
    )


if __name__ == "__main__":
    main()
