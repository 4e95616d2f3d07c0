"""Discover endpoints: home feed, news feed, recommendations and similar media.

All of them are paged with ``n`` (page size) and a ``start`` offset.
"""

from __future__ import annotations

from typing import Any

from ..decoding import decode_home_feed, select_news_bucket
from ..models.feed import NewsArticle
from ..models.home_feed import HomeFeedVariant
from ..models.media import Panel
from ..runtime.pagination import PageResponse
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .common import PageAdapter, extract_envelope

NEWS_BUCKETS = ("top_news", "latest_news")


def _paging_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    return [
        ("n", str(params["n"])),
        ("start", str(params["start"])),
        ("locale", params["locale"]),
    ]


HOME_FEED_SPEC = RestEndpointSpec(
    id="home_feed",
    method="GET",
    build_path=lambda p: f"/content/v2/discover/{p['account_id']}/home_feed",
    build_query=_paging_query,
)

RECOMMENDATIONS_SPEC = RestEndpointSpec(
    id="recommendations",
    method="GET",
    build_path=lambda p: f"/content/v2/discover/{p['account_id']}/recommendations",
    build_query=_paging_query,
)

SIMILAR_SPEC = RestEndpointSpec(
    id="similar_to",
    method="GET",
    build_path=lambda p: f"/content/v2/discover/{p['account_id']}/similar_to/{p['series_id']}",
    build_query=_paging_query,
)


def build_news_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    """Query for one bucket of the composite news endpoint.

    The other bucket is switched off with ``<other>_n=0``; both buckets are
    sent as separate pairs on the same query.
    """
    bucket = params["bucket"]
    other = next(b for b in NEWS_BUCKETS if b != bucket)
    return [
        (f"{other}_n", "0"),
        (f"{bucket}_n", str(params["n"])),
        (f"{bucket}_start", str(params["start"])),
        ("locale", params["locale"]),
    ]


NEWS_FEED_SPEC = RestEndpointSpec(
    id="news_feed",
    method="GET",
    build_path=lambda p: "/content/v2/discover/news_feed",
    build_query=build_news_query,
)


class HomeFeedAdapter(ResponseAdapter):
    """Adapter decoding every home feed entry into its variant."""

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    def parse(self, response: Any, params: dict[str, Any]) -> PageResponse[HomeFeedVariant]:
        raw_items, total = extract_envelope(response, "data")
        items = [decode_home_feed(raw, strict=self._strict) for raw in raw_items]
        return PageResponse(items=items, total=total)


class NewsFeedAdapter(ResponseAdapter):
    """Adapter picking the requested bucket out of the news feed response."""

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    def parse(self, response: Any, params: dict[str, Any]) -> PageResponse[NewsArticle]:
        bucket = select_news_bucket(response, params["bucket"], strict=self._strict)
        return PageResponse(items=list(bucket.items), total=bucket.total)


def panel_page_adapter(*, strict: bool = False) -> PageAdapter[Panel]:
    return PageAdapter(Panel, items_key="data", strict=strict)
