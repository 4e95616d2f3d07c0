"""Data models for catalog resources.

Architecture:
    This module exports all Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True); derived values are new instances.

Model Categories:
    - Wire models: Panel, FeedCarousel, FeedBanner, CuratedCollection,
      NewsArticle, Review, Rating, ... (validated straight from JSON)
    - Variants: HomeFeed and its closed set of subclasses
    - Options: BrowseOptions, SimilarOptions, QueryOptions, ReviewOptions
    - Results: BulkResult, QueryResults

See Also:
    - Pydantic documentation: https://docs.pydantic.dev/
    - Decoding: crunchy.catalog.decoding turns raw objects into these models
"""

from .base import WireModel
from .feed import (
    CuratedCollection,
    FeedBanner,
    FeedBannerImages,
    FeedCarousel,
    FeedCarouselImages,
    NewsArticle,
    NewsBucket,
    SimilarFeedWire,
)
from .home_feed import (
    Banner,
    Browse,
    CarouselFeed,
    History,
    HomeFeed,
    HomeFeedVariant,
    NewsFeed,
    Recommendation,
    Series,
    SeriesFeed,
    SimilarTo,
    Watchlist,
)
from .media import Image, Panel, PanelImages, SeriesMetadata
from .options import BrowseOptions, QueryOptions, RequestOptions, ReviewOptions, SimilarOptions
from .review import (
    Rating,
    RatingStarDetails,
    Review,
    ReviewAuthor,
    ReviewContent,
    ReviewRatings,
    SelfReview,
)
from .search import BulkResult, QueryBucket, QueryResults

__all__ = [
    "WireModel",
    # Feed wire models
    "CuratedCollection",
    "FeedBanner",
    "FeedBannerImages",
    "FeedCarousel",
    "FeedCarouselImages",
    "NewsArticle",
    "NewsBucket",
    "SimilarFeedWire",
    # Home feed variants
    "HomeFeed",
    "HomeFeedVariant",
    "CarouselFeed",
    "Series",
    "Recommendation",
    "History",
    "Watchlist",
    "NewsFeed",
    "Banner",
    "SeriesFeed",
    "Browse",
    "SimilarTo",
    # Media
    "Image",
    "Panel",
    "PanelImages",
    "SeriesMetadata",
    # Options
    "RequestOptions",
    "BrowseOptions",
    "SimilarOptions",
    "QueryOptions",
    "ReviewOptions",
    # Reviews
    "Rating",
    "RatingStarDetails",
    "Review",
    "ReviewAuthor",
    "ReviewContent",
    "ReviewRatings",
    "SelfReview",
    # Results
    "BulkResult",
    "QueryBucket",
    "QueryResults",
]
