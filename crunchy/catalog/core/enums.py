"""Core enumerations shared by options, models and decoders.

Architecture:
    All enums are string enums so their values can be written straight into
    query strings and compared against raw JSON values.

Design Decisions:
    - String enums: values are the exact wire strings
    - Lenient parsing: ``parse_enum`` keeps values the library does not know
      yet as plain strings instead of failing, since the backend adds new
      values without notice

See Also:
    - Options: BrowseOptions, SimilarOptions, QueryOptions, ReviewOptions
    - Decoding: embedded query payloads are folded onto these enums
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


class BrowseSortType(str, Enum):
    """Sort order of browse results."""

    POPULARITY = "popularity"
    NEWLY_ADDED = "newly_added"
    ALPHABETICAL = "alphabetical"


class MediaType(str, Enum):
    """Kind of media a catalog entry describes."""

    SERIES = "series"
    MOVIE_LISTING = "movie_listing"
    EPISODE = "episode"
    MOVIE = "movie"


class QueryType(str, Enum):
    """Result bucket a search can be restricted to."""

    SERIES = "series"
    MOVIE_LISTING = "movie_listing"
    EPISODE = "episode"


class ReviewSortType(str, Enum):
    """Sort order of reviews."""

    NEWEST = "newest"
    OLDEST = "oldest"
    HELPFUL = "helpful"


class RatingStar(str, Enum):
    """Star a rating can have.

    The backend does not use plain numbers but its own name for every star.
    """

    ONE_STAR = "1s"
    TWO_STARS = "2s"
    THREE_STARS = "3s"
    FOUR_STARS = "4s"
    FIVE_STARS = "5s"


class RatingTarget(str, Enum):
    """Media kinds that can be rated and reviewed."""

    SERIES = "series"
    MOVIE_LISTING = "movie_listing"


def parse_enum(enum_cls: type[E], value: str) -> E | str:
    """Convert a raw wire string to ``enum_cls``.

    Args:
        enum_cls: Target string enum
        value: Raw value

    Returns:
        The matching member, or ``value`` unchanged when no member matches
    """
    try:
        return enum_cls(value)
    except ValueError:
        return value
