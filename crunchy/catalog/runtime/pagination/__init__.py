"""Generic cursor-based pagination layer.

This module provides a reusable, item-type agnostic pagination engine for
endpoints that return ``(items, total)`` for a numeric start offset.

Architecture:
    The pagination layer consists of:
    - definitions.py: PageRequest, PageResponse and PageState
    - sequence.py: PagedSequence (cursor tracking, end detection, iteration)
    - telemetry.py: Structured logging

Usage:
    Call sites supply the fetch strategy. The engine never builds URLs or
    decodes items; it only passes the offset and the captured context.
"""

from __future__ import annotations

from .definitions import PageFetcher, PageRequest, PageResponse, PageState
from .sequence import PagedSequence

__all__ = [
    "PageFetcher",
    "PageRequest",
    "PageResponse",
    "PageState",
    "PagedSequence",
]
