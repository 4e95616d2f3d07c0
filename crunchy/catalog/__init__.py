"""Crunchy Catalog - typed, paged access to a remote content catalog."""

from .clients import CatalogClient, NewsFeedResult
from .config import ClientConfig
from .core import (
    AccountError,
    BrowseSortType,
    CatalogError,
    DecodeError,
    MalformedNumericValueError,
    MalformedQueryStringError,
    MediaType,
    MissingFieldError,
    PageFetchError,
    QueryType,
    RatingStar,
    RatingTarget,
    ReviewSortType,
    TransportError,
    UnexpectedFieldError,
    UnknownVariantError,
    WrongFieldTypeError,
)
from .decoding import decode_home_feed
from .models import (
    Banner,
    Browse,
    BrowseOptions,
    BulkResult,
    CarouselFeed,
    History,
    HomeFeed,
    HomeFeedVariant,
    NewsArticle,
    NewsFeed,
    Panel,
    QueryOptions,
    QueryResults,
    Rating,
    Recommendation,
    Review,
    ReviewOptions,
    SelfReview,
    Series,
    SeriesFeed,
    SimilarOptions,
    SimilarTo,
    Watchlist,
)
from .runtime import PagedSequence, PageRequest, PageResponse, PageState, RESTTransport

__version__ = "0.1.0"

__all__ = [
    # Client
    "CatalogClient",
    "ClientConfig",
    "NewsFeedResult",
    "RESTTransport",
    # Pagination
    "PagedSequence",
    "PageRequest",
    "PageResponse",
    "PageState",
    # Decoding
    "decode_home_feed",
    # Enums
    "BrowseSortType",
    "MediaType",
    "QueryType",
    "RatingStar",
    "RatingTarget",
    "ReviewSortType",
    # Models
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
    "Panel",
    "NewsArticle",
    "Rating",
    "Review",
    "SelfReview",
    "BulkResult",
    "QueryResults",
    "BrowseOptions",
    "SimilarOptions",
    "QueryOptions",
    "ReviewOptions",
    # Exceptions
    "CatalogError",
    "TransportError",
    "AccountError",
    "DecodeError",
    "MissingFieldError",
    "WrongFieldTypeError",
    "UnexpectedFieldError",
    "UnknownVariantError",
    "MalformedQueryStringError",
    "MalformedNumericValueError",
    "PageFetchError",
]
