"""Decoders turning raw JSON objects into typed models.

Architecture:
    - structural.py: pydantic validation mapped onto DecodeError subclasses
    - query_string.py: embedded URL query payloads folded onto options
    - home_feed.py: tag-driven polymorphic home feed decoder
    - search.py: typed result buckets (search, news feed)
"""

from .home_feed import RESOURCE_TYPES, RESPONSE_TYPES, decode_home_feed
from .query_string import (
    fold_browse_options,
    fold_similar_options,
    link_query,
    parse_count,
    parse_query_string,
)
from .search import QUERY_BUCKETS, decode_query_results, select_news_bucket
from .structural import decode_model, decode_model_list, to_decode_error

__all__ = [
    "decode_home_feed",
    "RESOURCE_TYPES",
    "RESPONSE_TYPES",
    "decode_model",
    "decode_model_list",
    "to_decode_error",
    "link_query",
    "parse_query_string",
    "parse_count",
    "fold_browse_options",
    "fold_similar_options",
    "decode_query_results",
    "select_news_bucket",
    "QUERY_BUCKETS",
]
