"""Pagination data structures.

This module defines the request/response pair exchanged between a
PagedSequence and its fetch function, and the sequence lifecycle states.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Generic, TypeVar

T = TypeVar("T")


class PageState(str, Enum):
    """Lifecycle state of a PagedSequence.

    FRESH: nothing fetched yet (cursor is 0)
    ACTIVE: at least one full page fetched, more may follow
    EXHAUSTED: last fetch returned an empty or short page; terminal
    """

    FRESH = "fresh"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class PageRequest:
    """One page round-trip as seen by a fetch function.

    Attributes:
        offset: Zero-based index of the first item to fetch (not a page number)
        page_size: Number of items the sequence expects per page
        context: Caller-supplied values threaded unchanged into every fetch
    """

    offset: int
    page_size: int
    context: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset cannot be negative")
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")


@dataclass(frozen=True)
class PageResponse(Generic[T]):
    """Items of one page plus the server-reported size of the whole collection.

    Attributes:
        items: Items of this page, in server order
        total: Size of the entire remote collection (advisory, may change
            between pages)
    """

    items: list[T]
    total: int


PageFetcher = Callable[[PageRequest], Awaitable[PageResponse[T]]]
