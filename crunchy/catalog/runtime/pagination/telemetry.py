"""Structured logging for pagination.

This module provides telemetry hooks for PagedSequence, emitting structured
logs for observability.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    sequence: str,
    offset: int,
    items: int,
    total: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        sequence: Name of the sequence the page belongs to
        offset: Offset the page was fetched at
        items: Number of items the page contained
        total: Collection size reported with the page
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "sequence": sequence,
            "offset": offset,
            "items": items,
            "total": total,
            "latency_ms": latency_ms,
        },
    )


def log_page_fetch_error(
    *,
    sequence: str,
    offset: int,
    context: Mapping[str, str],
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        sequence: Name of the sequence
        offset: Offset of the failed request
        context: Context the request was issued with
        error_type: Type of error (e.g., "TransportError", "DecodeError")
        error_message: Error message
    """
    logger.error(
        "page_fetch_error",
        extra={
            "sequence": sequence,
            "offset": offset,
            "context": dict(context),
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_exhausted(*, sequence: str, cursor: int, total: int | None) -> None:
    """Log the transition to the exhausted state."""
    logger.info(
        "pagination_exhausted",
        extra={"sequence": sequence, "cursor": cursor, "total": total},
    )


def log_collect_complete(
    *,
    sequence: str,
    pages: int,
    items: int,
    total: int | None,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of collect_all.

    Args:
        sequence: Name of the sequence
        pages: Number of pages fetched by this call
        items: Number of items returned
        total: Last collection size reported by the server
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "collect_complete",
        extra={
            "sequence": sequence,
            "pages": pages,
            "items": items,
            "total": total,
            "total_latency_ms": total_latency_ms,
        },
    )
