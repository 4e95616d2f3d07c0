#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from crunchy.catalog import (
    Browse,
    CarouselFeed,
    CatalogClient,
    ClientConfig,
    Series,
    SimilarTo,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Walk the home feed and follow its entries")
    p.add_argument("account_id", help="Account the home feed is personalized for")
    p.add_argument("--locale", default="en-US")
    p.add_argument("--max-items", type=int, default=40)
    p.add_argument("--page-size", type=int, default=20)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    token = os.environ.get("CRUNCHY_ACCESS_TOKEN", "")
    config = ClientConfig(
        account_id=args.account_id,
        locale=args.locale,
        page_size=args.page_size,
        headers={"Authorization": f"Bearer {token}"} if token else {},
    )

    async with CatalogClient(config) as client:
        feed = client.home_feed()
        entries = await feed.collect_all(max_items=args.max_items)
        print(f"Fetched {len(entries)} entries (server reports {feed.total})")

        for entry in entries:
            if isinstance(entry, CarouselFeed):
                print(f"CAROUSEL  {[item.title for item in entry.items]}")
            elif isinstance(entry, Series):
                print(f"SERIES    {entry.panel.title}")
            elif isinstance(entry, Browse):
                result = await client.browse(entry.options)
                print(f"BROWSE    {entry.options.sort} -> {result.total} results")
            elif isinstance(entry, SimilarTo):
                similar = await client.similar(entry.similar_id, entry.similar_options).next_page()
                print(f"SIMILAR   {entry.title}: {[panel.title for panel in similar]}")
            else:
                print(f"{type(entry).__name__.upper()}")


if __name__ == "__main__":
    asyncio.run(main())
