"""Home feed variants.

A home feed entry is exactly one member of a closed set of variants. Every
variant is a frozen model deriving from HomeFeed; marker variants carry no
payload and point at a dedicated client call instead.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .feed import CuratedCollection, FeedBanner, FeedCarousel, SimilarFeedWire
from .media import Panel
from .options import BrowseOptions, SimilarOptions


class HomeFeed(BaseModel):
    """Base class of all home feed variants."""

    model_config = ConfigDict(frozen=True)


class CarouselFeed(HomeFeed):
    """The feed at the top of the home page."""

    items: list[FeedCarousel] = Field(default_factory=list)


class Series(HomeFeed):
    """A series recommendation."""

    panel: Panel


class Recommendation(HomeFeed):
    """Recommendations for you. Use ``CatalogClient.recommendations`` to get them."""


class History(HomeFeed):
    """Your watch history."""


class Watchlist(HomeFeed):
    """Your watchlist."""


class NewsFeed(HomeFeed):
    """News feed. Use ``CatalogClient.news_feed`` to get it."""


class Banner(HomeFeed):
    banner: FeedBanner


class SeriesFeed(HomeFeed):
    """A title with description and multiple series ids matching them."""

    collection: CuratedCollection


class Browse(HomeFeed):
    """Browse content.

    Pass ``options`` to ``CatalogClient.browse``. Overwriting ``sort`` or
    ``media_type`` might cause confusing results.
    """

    options: BrowseOptions


class SimilarTo(HomeFeed):
    """Results similar to a series.

    Call ``CatalogClient.similar`` with ``similar_id`` and ``similar_options``.
    """

    title: str = ""
    description: str = ""
    similar_id: str
    similar_options: SimilarOptions = Field(default_factory=SimilarOptions)

    @classmethod
    def from_wire(
        cls, wire: SimilarFeedWire, *, similar_id: str, similar_options: SimilarOptions
    ) -> SimilarTo:
        return cls(
            title=wire.title,
            description=wire.description,
            similar_id=similar_id,
            similar_options=similar_options,
        )


HomeFeedVariant = Union[
    CarouselFeed,
    Series,
    Recommendation,
    History,
    Watchlist,
    NewsFeed,
    Banner,
    SeriesFeed,
    Browse,
    SimilarTo,
]
