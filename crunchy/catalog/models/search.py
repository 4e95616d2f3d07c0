"""Bulk results and search result buckets."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .base import WireModel
from .media import Panel

T = TypeVar("T")


class BulkResult(WireModel, Generic[T]):
    """A list of items plus the total size of the collection they belong to."""

    items: list[T] = Field(default_factory=list)
    total: int = 0


class QueryBucket(WireModel):
    """One typed bucket of a search response, before it is sorted into QueryResults."""

    result_type: str = Field("", alias="type")
    items: list[Panel] = Field(default_factory=list)
    total: int = 0


class QueryResults(BaseModel):
    """Search results grouped by kind. Buckets not in the response are None."""

    model_config = ConfigDict(frozen=True)

    top_results: BulkResult[Panel] | None = None
    series: BulkResult[Panel] | None = None
    movie_listing: BulkResult[Panel] | None = None
    episode: BulkResult[Panel] | None = None
