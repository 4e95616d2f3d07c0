"""Decoding of typed result buckets (search and news feed responses)."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ..core.exceptions import UnknownVariantError, WrongFieldTypeError
from ..models.feed import NewsBucket
from ..models.media import Panel
from ..models.search import BulkResult, QueryBucket, QueryResults
from .structural import decode_model_list

# bucket "type" -> QueryResults field
QUERY_BUCKETS: Mapping[str, str] = MappingProxyType(
    {
        "top_results": "top_results",
        "series": "series",
        "movie_listing": "movie_listing",
        "episode": "episode",
    }
)


def _bucket_list(raw: Any, key: str) -> Any:
    if not isinstance(raw, Mapping):
        raise WrongFieldTypeError("response is no object", raw=raw, expected="object")
    return raw.get(key, [])


def decode_query_results(raw: Mapping[str, Any], *, strict: bool = False) -> QueryResults:
    """Sort the buckets of a search response into QueryResults.

    Raises:
        UnknownVariantError: If a bucket has a type outside QUERY_BUCKETS
    """
    buckets = decode_model_list(QueryBucket, _bucket_list(raw, "items"), strict=strict, field="items")
    results: dict[str, BulkResult[Panel]] = {}
    for bucket in buckets:
        name = QUERY_BUCKETS.get(bucket.result_type)
        if name is None:
            raise UnknownVariantError(bucket.result_type, "type", raw=raw)
        results[name] = BulkResult[Panel](items=bucket.items, total=bucket.total)
    return QueryResults(**results)


def select_news_bucket(
    raw: Mapping[str, Any], result_type: str, *, strict: bool = False
) -> NewsBucket:
    """Pick the news bucket of ``result_type`` from a news feed response.

    A response without that bucket yields an empty bucket.
    """
    buckets = decode_model_list(NewsBucket, _bucket_list(raw, "data"), strict=strict, field="data")
    for bucket in buckets:
        if bucket.result_type == result_type:
            return bucket
    return NewsBucket(type=result_type)
