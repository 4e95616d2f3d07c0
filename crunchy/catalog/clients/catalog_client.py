"""High-level client for the content catalog.

Architecture:
    CatalogClient binds endpoint specs to a REST transport. Paged endpoints
    are returned as PagedSequence instances whose fetch closure runs the
    endpoint spec for the requested offset; everything else is a single
    awaited call returning a typed model.

Design Decisions:
    - Context capture: account id and locale are captured into the
      sequence context when the sequence is created
    - Frozen results: operations that change server state return updated
      copies of the models they were given
    - No session handling: authentication headers come from ClientConfig
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..config import ClientConfig
from ..core.enums import RatingStar, RatingTarget
from ..core.exceptions import AccountError
from ..endpoints import browse as browse_endpoints
from ..endpoints import discover, reviews
from ..endpoints.common import EmptyAdapter, ModelAdapter, PageAdapter
from ..models.feed import NewsArticle
from ..models.home_feed import HomeFeedVariant
from ..models.media import Panel
from ..models.options import BrowseOptions, QueryOptions, ReviewOptions, SimilarOptions
from ..models.review import Rating, Review, SelfReview
from ..models.search import BulkResult, QueryResults
from ..runtime.pagination import PagedSequence, PageRequest, PageResponse
from ..runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport


@dataclass(frozen=True)
class NewsFeedResult:
    """Both buckets of the news feed, each paged independently."""

    top_news: PagedSequence[NewsArticle]
    latest_news: PagedSequence[NewsArticle]


class CatalogClient:
    """Typed access to the content catalog.

    Example:
        >>> config = ClientConfig(account_id="abc", headers={"Authorization": "Bearer ..."})
        >>> async with CatalogClient(config) as client:
        ...     async for entry in client.home_feed():
        ...         print(type(entry).__name__)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: RESTTransport | None = None,
        strict: bool = False,
    ) -> None:
        """Initialize client.

        Args:
            config: Client settings (defaults to ClientConfig())
            transport: Transport to use instead of one built from ``config``
            strict: Reject undeclared fields while decoding responses
        """
        self.config = config or ClientConfig()
        self._transport = transport or RESTTransport(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=self.config.headers,
        )
        self._runner = RestRunner(self._transport)
        self._strict = strict

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Discover
    # ------------------------------------------------------------------

    def home_feed(self) -> PagedSequence[HomeFeedVariant]:
        """Return the home feed (shown when visiting the index page)."""
        return self._paged(
            spec=discover.HOME_FEED_SPEC,
            adapter=discover.HomeFeedAdapter(strict=self._strict),
            context=self._account_context(),
            name="home_feed",
        )

    def news_feed(self) -> NewsFeedResult:
        """Return top and latest news."""
        adapter = discover.NewsFeedAdapter(strict=self._strict)
        return NewsFeedResult(
            top_news=self._paged(
                spec=discover.NEWS_FEED_SPEC,
                adapter=adapter,
                context={"locale": self.config.locale, "bucket": "top_news"},
                name="top_news",
            ),
            latest_news=self._paged(
                spec=discover.NEWS_FEED_SPEC,
                adapter=adapter,
                context={"locale": self.config.locale, "bucket": "latest_news"},
                name="latest_news",
            ),
        )

    def recommendations(self) -> PagedSequence[Panel]:
        """Return recommended series or movies to watch."""
        return self._paged(
            spec=discover.RECOMMENDATIONS_SPEC,
            adapter=discover.panel_page_adapter(strict=self._strict),
            context=self._account_context(),
            name="recommendations",
        )

    def similar(
        self, series_id: str, options: SimilarOptions | None = None
    ) -> PagedSequence[Panel]:
        """Return media similar to a series.

        ``options.limit`` becomes the page size and ``options.start`` the
        offset the sequence starts counting from.
        """
        options = options or SimilarOptions()
        return self._paged(
            spec=discover.SIMILAR_SPEC,
            adapter=discover.panel_page_adapter(strict=self._strict),
            context={**self._account_context(), "series_id": series_id},
            name="similar_to",
            page_size=options.limit or None,
            start_offset=options.start or 0,
        )

    # ------------------------------------------------------------------
    # Browse / search
    # ------------------------------------------------------------------

    async def browse(self, options: BrowseOptions | None = None) -> BulkResult[Panel]:
        return await self._runner.run(
            spec=browse_endpoints.BROWSE_SPEC,
            adapter=browse_endpoints.browse_adapter(strict=self._strict),
            params={"options": options or BrowseOptions(), "locale": self.config.locale},
        )

    async def query(self, text: str, options: QueryOptions | None = None) -> QueryResults:
        """Search the catalog."""
        return await self._runner.run(
            spec=browse_endpoints.SEARCH_SPEC,
            adapter=browse_endpoints.SearchAdapter(strict=self._strict),
            params={"options": options or QueryOptions(), "q": text, "locale": self.config.locale},
        )

    # ------------------------------------------------------------------
    # Ratings / reviews
    # ------------------------------------------------------------------

    async def rating(self, target: RatingTarget, media_id: str) -> Rating:
        """Return rating statistics of a series or movie listing."""
        return await self._run_model(reviews.RATING_SPEC, Rating, target=target, media_id=media_id)

    async def rate(self, target: RatingTarget, media_id: str, stars: RatingStar) -> Rating:
        return await self._run_model(
            reviews.RATE_SPEC, Rating, target=target, media_id=media_id, stars=stars
        )

    def reviews(
        self, target: RatingTarget, media_id: str, options: ReviewOptions | None = None
    ) -> PagedSequence[Review]:
        """Return reviews other users wrote about a series or movie listing."""
        return self._paged(
            spec=reviews.REVIEWS_SPEC,
            adapter=PageAdapter(Review, items_key="items", strict=self._strict),
            context={
                **self._account_context(),
                "target": RatingTarget(target).value,
                "media_id": media_id,
            },
            name="reviews",
            extra_params={"options": options or ReviewOptions()},
        )

    async def create_review(
        self, target: RatingTarget, media_id: str, title: str, body: str, spoiler: bool = False
    ) -> SelfReview:
        return await self._run_model(
            reviews.CREATE_REVIEW_SPEC,
            SelfReview,
            target=target,
            media_id=media_id,
            title=title,
            body=body,
            spoiler=spoiler,
        )

    async def self_review(self, target: RatingTarget, media_id: str) -> SelfReview:
        """Return the review your account wrote about a series or movie listing."""
        return await self._run_model(
            reviews.SELF_REVIEW_SPEC, SelfReview, target=target, media_id=media_id
        )

    async def edit_review(
        self, target: RatingTarget, media_id: str, title: str, body: str, spoiler: bool = False
    ) -> SelfReview:
        return await self._run_model(
            reviews.EDIT_REVIEW_SPEC,
            SelfReview,
            target=target,
            media_id=media_id,
            title=title,
            body=body,
            spoiler=spoiler,
        )

    async def delete_review(self, target: RatingTarget, media_id: str) -> None:
        await self._run(
            reviews.DELETE_REVIEW_SPEC, EmptyAdapter(), target=target, media_id=media_id
        )

    async def mark_helpful(self, review: Review, helpful: bool) -> Review:
        """Mark a review as helpful or not.

        A review can only be rated once; ``review.ratings.helpful`` is set if
        that already happened. Returns a copy with the new state.
        """
        await self._run(
            reviews.MARK_HELPFUL_SPEC,
            EmptyAdapter(),
            review_id=review.review.id,
            helpful=helpful,
        )
        ratings = review.ratings.model_copy(update={"helpful": helpful})
        return review.model_copy(update={"ratings": ratings})

    async def report(self, review: Review, report: bool) -> Review:
        """Report (or unreport) a review. Returns a copy with the new state."""
        spec = reviews.REPORT_SPEC if report else reviews.UNREPORT_SPEC
        await self._run(spec, EmptyAdapter(), review_id=review.review.id)
        return review.model_copy(update={"reported": report})

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _account_id(self) -> str:
        if not self.config.account_id:
            raise AccountError("this operation requires an account id; set ClientConfig.account_id")
        return self.config.account_id

    def _account_context(self) -> dict[str, str]:
        return {"account_id": self._account_id(), "locale": self.config.locale}

    async def _run(self, spec: RestEndpointSpec, adapter: ResponseAdapter, **params: Any) -> Any:
        return await self._runner.run(
            spec=spec, adapter=adapter, params={**self._account_context(), **params}
        )

    async def _run_model(self, spec: RestEndpointSpec, model_cls: type, **params: Any) -> Any:
        return await self._run(spec, ModelAdapter(model_cls, strict=self._strict), **params)

    def _paged(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        context: dict[str, str],
        name: str,
        page_size: int | None = None,
        start_offset: int = 0,
        extra_params: dict[str, Any] | None = None,
    ) -> PagedSequence[Any]:
        runner = self._runner
        extra = dict(extra_params or {})

        async def fetch(request: PageRequest) -> PageResponse[Any]:
            params = {
                **request.context,
                **extra,
                "n": request.page_size,
                "start": start_offset + request.offset,
            }
            return await runner.run(spec=spec, adapter=adapter, params=params)

        return PagedSequence(
            fetch, context, page_size=page_size or self.config.page_size, name=name
        )
