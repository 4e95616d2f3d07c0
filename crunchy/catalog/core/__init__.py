"""Core components."""

from .enums import (
    BrowseSortType,
    MediaType,
    QueryType,
    RatingStar,
    RatingTarget,
    ReviewSortType,
    parse_enum,
)
from .exceptions import (
    AccountError,
    CatalogError,
    DecodeError,
    MalformedNumericValueError,
    MalformedQueryStringError,
    MissingFieldError,
    PageFetchError,
    TransportError,
    UnexpectedFieldError,
    UnknownVariantError,
    WrongFieldTypeError,
)

__all__ = [
    "BrowseSortType",
    "MediaType",
    "QueryType",
    "RatingStar",
    "RatingTarget",
    "ReviewSortType",
    "parse_enum",
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
