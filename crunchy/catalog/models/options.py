"""Request options for catalog endpoints.

Options are frozen models. Every field maps onto one query key; unset
(None) fields are left out of the query entirely.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import BrowseSortType, QueryType, ReviewSortType
from .base import BrowseSortValue, MediaTypeValue, RatingStarValue, ReviewSortValue


def _query_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


class RequestOptions(BaseModel):
    """Base class for endpoint options.

    Subclasses declare ``query_keys`` mapping field names to the query key
    the field is sent as.
    """

    model_config = ConfigDict(frozen=True)

    query_keys: ClassVar[dict[str, str]] = {}

    def to_query(self, extra: list[tuple[str, str]] | None = None) -> list[tuple[str, str]]:
        """Build ordered query pairs.

        Args:
            extra: Pairs placed before the option pairs (e.g. locale)

        Returns:
            List of (key, value) pairs, unset options skipped
        """
        query = list(extra or [])
        for name, key in self.query_keys.items():
            value = getattr(self, name)
            if value is None:
                continue
            query.append((key, _query_value(value)))
        return query


class BrowseOptions(RequestOptions):
    """Options for browsing the catalog."""

    categories: list[str] | None = None
    # Whether the entries should be dubbed.
    is_dubbed: bool | None = None
    # Whether the entries should be subbed.
    is_subbed: bool | None = None
    # Simulcast season id in which the entries have been aired.
    simulcast: str | None = None
    sort: BrowseSortValue | None = BrowseSortType.NEWLY_ADDED
    media_type: MediaTypeValue | None = None
    limit: int | None = Field(20, ge=0)
    start: int | None = Field(None, ge=0)

    query_keys: ClassVar[dict[str, str]] = {
        "categories": "categories",
        "is_dubbed": "is_dubbed",
        "is_subbed": "is_subbed",
        "simulcast": "season_tag",
        "sort": "sort",
        "media_type": "type",
        "limit": "n",
        "start": "start",
    }


class SimilarOptions(RequestOptions):
    """Options for listing media similar to a series."""

    limit: int | None = Field(20, ge=0)
    start: int | None = Field(None, ge=0)

    query_keys: ClassVar[dict[str, str]] = {"limit": "n", "start": "start"}


class QueryOptions(RequestOptions):
    """Options for a search query."""

    limit: int | None = Field(20, ge=0)
    result_type: QueryType | None = None

    query_keys: ClassVar[dict[str, str]] = {"limit": "n", "result_type": "type"}


class ReviewOptions(RequestOptions):
    """Options for listing reviews."""

    sort: ReviewSortValue | None = ReviewSortType.HELPFUL
    filter: RatingStarValue | None = None

    query_keys: ClassVar[dict[str, str]] = {"sort": "sort", "filter": "filter"}
