"""Wire models of home feed and news feed payloads."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import AliasChoices, Field

from .base import WireModel

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class FeedCarouselImages(WireModel):
    landscape_poster: str | None = None
    portrait_poster: str | None = Field(
        None, validation_alias=AliasChoices("portrait_poster", "portrait_image")
    )


class FeedCarousel(WireModel):
    """The carousel / sliding images shown first when visiting the site."""

    title: str = ""
    slug: str = ""
    description: str = ""

    # Link to a series or article.
    link: str = ""

    images: FeedCarouselImages = Field(default_factory=FeedCarouselImages)

    button_text: str = ""

    # Sent by the backend, not used by the library
    id: str | None = None
    third_party_impression_tracker: Any = None


class FeedBannerImages(WireModel):
    mobile_small: str = ""
    mobile_large: str = ""
    desktop_small: str = ""
    desktop_large: str = ""


class FeedBanner(WireModel):
    """A banner containing a link to a series or article."""

    title: str = ""
    description: str = ""
    link: str = ""
    images: FeedBannerImages = Field(default_factory=FeedBannerImages)


class CuratedCollection(WireModel):
    """A title with description and the ids of series matching them."""

    title: str = ""
    description: str = ""
    ids: list[str] = Field(default_factory=list)


class SimilarFeedWire(WireModel):
    """Wire shape of a ``because_you_watched`` collection.

    The source series id and the options are not plain fields on the wire;
    they are attached when the value is turned into a ``SimilarTo`` variant.
    """

    title: str = ""
    description: str = ""


class NewsArticle(WireModel):
    """News like new library additions, dubs, etc."""

    title: str = ""
    description: str = ""
    creator: str = ""
    publish_date: datetime = EPOCH

    image_link: str = Field("", alias="image")
    news_link: str = Field("", alias="link")


class NewsBucket(WireModel):
    """One typed result bucket of the news feed endpoint."""

    result_type: str = Field("", alias="type")
    items: list[NewsArticle] = Field(default_factory=list)
    total: int = 0
