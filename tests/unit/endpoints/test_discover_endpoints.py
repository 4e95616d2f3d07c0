"""Unit tests for discover endpoint definitions and adapters."""

from __future__ import annotations

import pytest

from crunchy.catalog.core import MissingFieldError, UnknownVariantError, WrongFieldTypeError
from crunchy.catalog.endpoints import discover
from crunchy.catalog.endpoints.common import extract_envelope
from crunchy.catalog.models import CarouselFeed, History, Series


PARAMS = {"account_id": "acc-1", "series_id": "G1", "n": 20, "start": 40, "locale": "en-US"}


class TestDiscoverSpecs:
    """Test path and query building."""

    def test_home_feed(self):
        assert discover.HOME_FEED_SPEC.build_path(PARAMS) == "/content/v2/discover/acc-1/home_feed"
        assert discover.HOME_FEED_SPEC.build_query(PARAMS) == [
            ("n", "20"),
            ("start", "40"),
            ("locale", "en-US"),
        ]

    def test_recommendations(self):
        assert (
            discover.RECOMMENDATIONS_SPEC.build_path(PARAMS)
            == "/content/v2/discover/acc-1/recommendations"
        )

    def test_similar(self):
        assert discover.SIMILAR_SPEC.build_path(PARAMS) == "/content/v2/discover/acc-1/similar_to/G1"

    @pytest.mark.parametrize(
        "bucket,expected",
        [
            (
                "top_news",
                [("latest_news_n", "0"), ("top_news_n", "20"), ("top_news_start", "40"), ("locale", "en-US")],
            ),
            (
                "latest_news",
                [("top_news_n", "0"), ("latest_news_n", "20"), ("latest_news_start", "40"), ("locale", "en-US")],
            ),
        ],
    )
    def test_news_query_disables_other_bucket(self, bucket, expected):
        assert discover.build_news_query({**PARAMS, "bucket": bucket}) == expected


class TestExtractEnvelope:
    """Test bulk envelope validation."""

    def test_items_and_total(self):
        assert extract_envelope({"data": [1, 2], "total": 7, "meta": {}}, "data") == ([1, 2], 7)

    def test_total_defaults_to_zero(self):
        assert extract_envelope({"items": []}, "items") == ([], 0)

    def test_missing_items(self):
        with pytest.raises(MissingFieldError):
            extract_envelope({"total": 1}, "data")

    @pytest.mark.parametrize(
        "response",
        [
            ["data"],
            {"data": {"a": 1}},
            {"data": [], "total": "3"},
            {"data": [], "total": True},
        ],
    )
    def test_wrong_shapes(self, response):
        with pytest.raises(WrongFieldTypeError):
            extract_envelope(response, "data")


class TestDiscoverAdapters:
    """Test response adapters."""

    def test_home_feed_adapter(self):
        response = {
            "total": 50,
            "data": [
                {"resource_type": "hero_carousel", "items": []},
                {"resource_type": "panel", "panel": {"id": "G1"}},
                {"resource_type": "dynamic_collection", "response_type": "history"},
            ],
        }

        page = discover.HomeFeedAdapter().parse(response, PARAMS)

        assert page.total == 50
        assert page.items[0] == CarouselFeed(items=[])
        assert isinstance(page.items[1], Series)
        assert page.items[2] == History()

    def test_home_feed_adapter_fails_on_unknown_entry(self):
        response = {"total": 1, "data": [{"resource_type": "mystery"}]}

        with pytest.raises(UnknownVariantError):
            discover.HomeFeedAdapter().parse(response, PARAMS)

    def test_news_feed_adapter_picks_bucket(self):
        response = {
            "data": [
                {"type": "top_news", "total": 9, "items": [{"title": "top"}]},
                {"type": "latest_news", "total": 4, "items": [{"title": "new"}]},
            ]
        }

        page = discover.NewsFeedAdapter().parse(response, {"bucket": "latest_news"})

        assert page.total == 4
        assert [article.title for article in page.items] == ["new"]

    def test_panel_page_adapter(self):
        page = discover.panel_page_adapter().parse({"data": [{"id": "G1"}, {"id": "G2"}], "total": 2}, {})

        assert [panel.id for panel in page.items] == ["G1", "G2"]
        assert page.total == 2
