"""Embedded query string payloads.

Some feed entries carry their configuration as a URL. The query portion of
that URL is parsed as ``application/x-www-form-urlencoded`` data and folded
onto typed options. Keys the options do not know are ignored; when a key
repeats, the last value wins.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import parse_qsl

from ..core.enums import BrowseSortType, MediaType, parse_enum
from ..core.exceptions import MalformedNumericValueError, MalformedQueryStringError
from ..models.options import BrowseOptions, SimilarOptions

_COUNT_RE = re.compile(r"[0-9]+")

# Counts are unsigned 32 bit on the backend
MAX_COUNT = 2**32 - 1


def link_query(link: str) -> str:
    """Return the part of ``link`` after the first ``?``, without a fragment.

    A link without ``?`` has an empty query.
    """
    _, sep, query = link.partition("?")
    if not sep:
        return ""
    return query.split("#", 1)[0]


def parse_query_string(query: str, *, field: str = "link") -> list[tuple[str, str]]:
    """Parse form-urlencoded ``key=value&key=value`` pairs in order.

    Empty segments (``a=1&&b=2``) are skipped.

    Raises:
        MalformedQueryStringError: If a segment has no ``=`` or the
            percent-encoding is not valid UTF-8
    """
    segments = [segment for segment in query.split("&") if segment]
    if not segments:
        return []
    try:
        return parse_qsl(
            "&".join(segments),
            keep_blank_values=True,
            strict_parsing=True,
            errors="strict",
        )
    except ValueError as e:
        raise MalformedQueryStringError(
            f"cannot parse query string '{query}': {e}", query, field=field
        ) from e


def parse_count(value: str, field: str) -> int:
    """Parse a non-negative 32 bit count.

    Raises:
        MalformedNumericValueError: If ``value`` is not a count
    """
    if not _COUNT_RE.fullmatch(value):
        raise MalformedNumericValueError(field, value)
    count = int(value)
    if count > MAX_COUNT:
        raise MalformedNumericValueError(field, value)
    return count


def fold_browse_options(pairs: Iterable[tuple[str, str]]) -> BrowseOptions:
    """Fold ``sort_by`` and ``type`` onto default BrowseOptions."""
    options = BrowseOptions()
    for key, value in pairs:
        if key == "sort_by":
            options = options.model_copy(update={"sort": parse_enum(BrowseSortType, value)})
        elif key == "type":
            options = options.model_copy(update={"media_type": parse_enum(MediaType, value)})
    return options


def fold_similar_options(pairs: Iterable[tuple[str, str]]) -> SimilarOptions:
    """Fold ``n`` onto default SimilarOptions."""
    options = SimilarOptions()
    for key, value in pairs:
        if key == "n":
            options = options.model_copy(update={"limit": parse_count(value, "n")})
    return options
