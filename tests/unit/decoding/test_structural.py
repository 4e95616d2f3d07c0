"""Unit tests for structural decoding and error mapping."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from crunchy.catalog.core import (
    MissingFieldError,
    RatingStar,
    UnexpectedFieldError,
    WrongFieldTypeError,
)
from crunchy.catalog.decoding import decode_model, decode_model_list
from crunchy.catalog.models import FeedCarousel, NewsArticle, Panel, Rating, Review, Series
from crunchy.catalog.models.search import QueryBucket


class TestDecodeModel:
    """Test single object decoding."""

    def test_absent_optional_fields_use_defaults(self):
        panel = decode_model(Panel, {"id": "G1"})

        assert panel.id == "G1"
        assert panel.title == ""
        assert panel.series_metadata is None

    def test_unknown_fields_ignored_by_default(self):
        panel = decode_model(Panel, {"id": "G1", "playback": "https://x"})

        assert panel.id == "G1"

    def test_unknown_fields_rejected_in_strict_mode(self):
        with pytest.raises(UnexpectedFieldError) as exc_info:
            decode_model(Panel, {"id": "G1", "zeta": 1, "alpha": 2}, strict=True)

        assert exc_info.value.fields == ["alpha", "zeta"]

    def test_aliases_count_as_declared(self):
        """Test aliased wire names pass strict mode."""
        article = decode_model(
            NewsArticle,
            {"title": "t", "image": "https://img", "link": "https://news", "publish_date": "2023-01-01T00:00:00Z"},
            strict=True,
        )

        assert article.image_link == "https://img"
        assert article.news_link == "https://news"
        assert article.publish_date.year == 2023

    def test_wrong_type(self):
        with pytest.raises(WrongFieldTypeError) as exc_info:
            decode_model(Panel, {"id": ["G1"]}, field="panel")

        assert exc_info.value.field == "panel.id"
        assert exc_info.value.raw == {"id": ["G1"]}

    def test_not_an_object(self):
        with pytest.raises(WrongFieldTypeError):
            decode_model(Panel, "G1")

    def test_missing_required_field(self):
        """Test models with required fields report the missing one."""
        with pytest.raises(MissingFieldError) as exc_info:
            decode_model(Series, {})

        assert exc_info.value.field == "panel"

    def test_result_is_frozen(self):
        panel = decode_model(Panel, {"id": "G1"})

        with pytest.raises(ValidationError):
            panel.id = "G2"


class TestDecodeModelList:
    """Test array decoding."""

    def test_order_preserved(self):
        items = decode_model_list(FeedCarousel, [{"title": "b"}, {"title": "a"}, {"title": "c"}])

        assert [item.title for item in items] == ["b", "a", "c"]

    def test_not_a_list(self):
        with pytest.raises(WrongFieldTypeError) as exc_info:
            decode_model_list(FeedCarousel, {"title": "x"}, field="items")

        assert exc_info.value.field == "items"

    def test_strict_error_location_includes_index(self):
        with pytest.raises(UnexpectedFieldError) as exc_info:
            decode_model_list(
                QueryBucket,
                [{"type": "series"}, {"type": "episode", "extra": 1}],
                strict=True,
                field="items",
            )

        assert exc_info.value.field == "items.1"


class TestReviewModels:
    """Test the value conversions of rating and review payloads."""

    def test_rating(self):
        rating = decode_model(
            Rating,
            {
                "1s": {"displayed": "1.7", "unit": "K", "percentage": 3},
                "5s": {"displayed": "12", "unit": "K", "percentage": 80},
                "average": "4.7",
                "total": 15000,
                "rating": "",
            },
        )

        assert rating.one_star.unit == "K"
        assert rating.five_stars.percentage == 80
        assert rating.average == pytest.approx(4.7)
        assert rating.rating is None

    def test_rating_own_star(self):
        rating = decode_model(Rating, {"rating": "4s"})

        assert rating.rating is RatingStar.FOUR_STARS

    @pytest.mark.parametrize("value,expected", [("yes", True), ("no", False), ("", None), (None, None)])
    def test_review_helpful(self, value, expected):
        review = decode_model(Review, {"ratings": {"rating": value, "total": 3}})

        assert review.ratings.helpful is expected
        assert review.ratings.total == 3

    def test_review_helpful_unknown_value(self):
        with pytest.raises(WrongFieldTypeError) as exc_info:
            decode_model(Review, {"ratings": {"rating": "maybe"}})

        assert exc_info.value.field == "ratings.rating"
