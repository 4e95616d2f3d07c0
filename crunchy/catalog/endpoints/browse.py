"""Browse and search endpoints."""

from __future__ import annotations

from typing import Any

from ..decoding import decode_query_results
from ..models.media import Panel
from ..models.search import BulkResult, QueryResults
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .common import ModelAdapter


def build_browse_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    return params["options"].to_query([("locale", params["locale"])])


def build_search_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    return params["options"].to_query([("q", params["q"]), ("locale", params["locale"])])


BROWSE_SPEC = RestEndpointSpec(
    id="browse",
    method="GET",
    build_path=lambda p: "/content/v1/browse",
    build_query=build_browse_query,
)

SEARCH_SPEC = RestEndpointSpec(
    id="search",
    method="GET",
    build_path=lambda p: "/content/v1/search",
    build_query=build_search_query,
)


def browse_adapter(*, strict: bool = False) -> ModelAdapter[BulkResult[Panel]]:
    return ModelAdapter(BulkResult[Panel], strict=strict)


class SearchAdapter(ResponseAdapter):
    """Adapter sorting search buckets into QueryResults."""

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    def parse(self, response: Any, params: dict[str, Any]) -> QueryResults:
        return decode_query_results(response, strict=self._strict)
