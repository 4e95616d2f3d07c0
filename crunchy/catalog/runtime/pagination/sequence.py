"""Lazily-advancing paged sequence over a remote collection.

This module provides the PagedSequence class that drives a fetch function
page by page, tracks the offset cursor and detects the end of the collection.
"""

from __future__ import annotations

from collections import deque
from collections.abc import AsyncIterator, Mapping
from time import perf_counter
from types import MappingProxyType
from typing import Generic, TypeVar

from ...config import DEFAULT_PAGE_SIZE
from ...core.exceptions import PageFetchError
from .definitions import PageFetcher, PageRequest, PageState
from .telemetry import (
    log_collect_complete,
    log_exhausted,
    log_page_fetch_error,
    log_page_fetched,
)

T = TypeVar("T")


class PagedSequence(Generic[T]):
    """Cursor-based sequence over a remote collection.

    The sequence owns an immutable fetch function and context, plus an offset
    cursor that only ever advances. A page with fewer items than ``page_size``
    ends the sequence; the ``total`` reported by the server is advisory.

    An instance is meant for a single consumer. Concurrent ``next_page`` calls
    on one instance race on the cursor; give every consumer its own instance
    via ``restarted()`` instead.

    Example:
        >>> async def fetch(request: PageRequest) -> PageResponse[str]:
        ...     data = await transport.request(
        ...         "GET",
        ...         "/items",
        ...         params=[("n", str(request.page_size)), ("start", str(request.offset))],
        ...     )
        ...     return PageResponse(items=data["items"], total=data["total"])
        >>> sequence = PagedSequence(fetch, {"locale": "en-US"})
        >>> async for item in sequence:
        ...     print(item)
    """

    def __init__(
        self,
        fetch: PageFetcher[T],
        context: Mapping[str, str] | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        name: str = "paged_sequence",
    ) -> None:
        """Initialize paged sequence.

        Args:
            fetch: Async function returning the page for a PageRequest
            context: Values threaded unchanged into every fetch
            page_size: Items expected per full page; a smaller page ends the sequence
            name: Identifier used in log records
        """
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._fetch = fetch
        self._context: Mapping[str, str] = MappingProxyType(dict(context or {}))
        self._page_size = page_size
        self._name = name

        self._cursor = 0
        self._total: int | None = None
        self._state = PageState.FRESH
        # Items already fetched but not yet handed out
        self._pending: deque[T] = deque()

    @property
    def cursor(self) -> int:
        """Offset of the next item to fetch from the server."""
        return self._cursor

    @property
    def total(self) -> int | None:
        """Collection size reported with the last page, None before the first fetch."""
        return self._total

    @property
    def state(self) -> PageState:
        return self._state

    @property
    def context(self) -> Mapping[str, str]:
        return self._context

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def exhausted(self) -> bool:
        """True once the end was reached and every fetched item was handed out."""
        return self._state is PageState.EXHAUSTED and not self._pending

    def restarted(self) -> PagedSequence[T]:
        """Return a fresh sequence with the same fetch function, context and page size."""
        return PagedSequence(
            self._fetch, self._context, page_size=self._page_size, name=self._name
        )

    async def next_page(self) -> list[T]:
        """Fetch the page at the current cursor.

        Returns:
            Items of the page; an empty list once the sequence is exhausted,
            in which case no request is issued

        Raises:
            PageFetchError: If the fetch failed. The cursor is left untouched so
                calling again re-issues the identical request.
        """
        if self._pending:
            items = list(self._pending)
            self._pending.clear()
            return items
        if self._state is PageState.EXHAUSTED:
            return []
        return await self._fetch_page()

    async def collect_all(self, max_items: int | None = None) -> list[T]:
        """Draw pages until the end of the collection or ``max_items``.

        Stops when a page is short or empty, when the cursor reaches the last
        reported total, or when ``max_items`` items were collected. Items
        fetched beyond ``max_items`` stay buffered for the next call.

        Args:
            max_items: Upper bound on the number of items returned

        Returns:
            Collected items in server order

        Raises:
            PageFetchError: On the first failed fetch. Pages fetched by this
                call are discarded; items buffered by an earlier call are
                buffered again.
        """
        if max_items is not None and max_items < 0:
            raise ValueError("max_items cannot be negative")

        started = perf_counter()
        collected: list[T] = []
        carried: list[T] = []
        pages = 0

        while max_items is None or len(collected) < max_items:
            if self._pending:
                carried.extend(self._pending)
                collected.extend(self._pending)
                self._pending.clear()
                continue
            if self._state is PageState.EXHAUSTED:
                break
            if self._total is not None and self._cursor >= self._total:
                break
            try:
                page = await self._fetch_page()
            except BaseException:
                self._pending.extend(carried)
                raise
            collected.extend(page)
            pages += 1

        if max_items is not None and len(collected) > max_items:
            self._pending.extend(collected[max_items:])
            collected = collected[:max_items]

        log_collect_complete(
            sequence=self._name,
            pages=pages,
            items=len(collected),
            total=self._total,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return collected

    async def as_lazy_sequence(self) -> AsyncIterator[T]:
        """Iterate item by item, fetching pages on demand.

        The iterator is single-pass. Items of a page that were not consumed
        when iteration stopped remain available to the next ``next_page`` call.
        """
        while True:
            page = await self.next_page()
            if not page:
                return
            self._pending.extend(page)
            while self._pending:
                yield self._pending.popleft()

    def __aiter__(self) -> AsyncIterator[T]:
        return self.as_lazy_sequence()

    async def _fetch_page(self) -> list[T]:
        request = PageRequest(offset=self._cursor, page_size=self._page_size, context=self._context)
        page_start = perf_counter()
        try:
            response = await self._fetch(request)
        except Exception as e:
            log_page_fetch_error(
                sequence=self._name,
                offset=request.offset,
                context=self._context,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise PageFetchError(request.offset, self._context, e) from e

        items = list(response.items)
        self._total = response.total
        self._cursor += len(items)

        log_page_fetched(
            sequence=self._name,
            offset=request.offset,
            items=len(items),
            total=response.total,
            latency_ms=(perf_counter() - page_start) * 1000.0,
        )

        # Check if we got fewer items than requested (end of data)
        if len(items) < self._page_size:
            self._state = PageState.EXHAUSTED
            log_exhausted(sequence=self._name, cursor=self._cursor, total=self._total)
        else:
            self._state = PageState.ACTIVE
        return items

    def __repr__(self) -> str:
        return (
            f"PagedSequence(name={self._name!r}, cursor={self._cursor}, "
            f"total={self._total}, state={self._state.value})"
        )
