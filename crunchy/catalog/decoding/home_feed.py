"""Tag-driven decoder for home feed entries.

Architecture:
    A raw home feed entry is dispatched on its ``resource_type`` through a
    read-only table of decode functions. The ``dynamic_collection`` family is
    dispatched a second time on ``response_type``. Each decode function
    consumes the discriminator fields it reads and decodes what remains.

Design Decisions:
    - Closed tag sets: the tables are MappingProxyType instances built once;
      unknown tags fail with UnknownVariantError instead of being dropped
    - Two-step enrichment: ``because_you_watched`` first decodes the wire
      shape, then builds the SimilarTo variant with the id and options read
      from other fields
    - Pure: decoding never mutates its input
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from ..core.exceptions import MissingFieldError, UnknownVariantError, WrongFieldTypeError
from ..models.feed import (
    CuratedCollection,
    FeedBanner,
    FeedCarousel,
    SimilarFeedWire,
)
from ..models.home_feed import (
    Banner,
    Browse,
    CarouselFeed,
    History,
    HomeFeed,
    HomeFeedVariant,
    NewsFeed,
    Recommendation,
    Series,
    SeriesFeed,
    SimilarTo,
    Watchlist,
)
from ..models.media import Panel
from .query_string import fold_browse_options, fold_similar_options, link_query, parse_query_string
from .structural import decode_model, decode_model_list

logger = logging.getLogger(__name__)

RESOURCE_TYPE_FIELD = "resource_type"
RESPONSE_TYPE_FIELD = "response_type"

# (remaining fields, original object, strict) -> variant
VariantDecoder = Callable[[dict[str, Any], Mapping[str, Any], bool], HomeFeedVariant]


def decode_home_feed(raw: Mapping[str, Any], *, strict: bool = False) -> HomeFeedVariant:
    """Decode one raw home feed entry into its variant.

    Args:
        raw: JSON object of the entry
        strict: Reject fields not declared on the target models

    Returns:
        Exactly one HomeFeed variant

    Raises:
        DecodeError: MissingFieldError, WrongFieldTypeError, UnexpectedFieldError,
            UnknownVariantError, MalformedQueryStringError or
            MalformedNumericValueError
    """
    if not isinstance(raw, Mapping):
        raise WrongFieldTypeError("home feed entry is no object", raw=raw, expected="object")
    remaining = dict(raw)
    resource_type = _take_str(remaining, RESOURCE_TYPE_FIELD, raw)
    return _dispatch(RESOURCE_DECODERS, RESOURCE_TYPE_FIELD, resource_type, remaining, raw, strict)


def _dispatch(
    decoders: Mapping[str, VariantDecoder],
    field: str,
    tag: str,
    remaining: dict[str, Any],
    raw: Mapping[str, Any],
    strict: bool,
) -> HomeFeedVariant:
    decoder = decoders.get(tag)
    if decoder is None:
        logger.warning("unknown_home_feed_variant", extra={"field": field, "tag": tag})
        raise UnknownVariantError(tag, field, raw=dict(raw))
    return decoder(remaining, raw, strict)


def _take(remaining: dict[str, Any], key: str, raw: Mapping[str, Any]) -> Any:
    try:
        return remaining.pop(key)
    except KeyError:
        raise MissingFieldError(
            f"cannot get '{key}' on home feed", field=key, raw=dict(raw)
        ) from None


def _take_str(remaining: dict[str, Any], key: str, raw: Mapping[str, Any]) -> str:
    value = _take(remaining, key, raw)
    if not isinstance(value, str):
        raise WrongFieldTypeError(
            f"home feed '{key}' is no string", field=key, raw=dict(raw), expected="string"
        )
    return value


def _decode_hero_carousel(
    remaining: dict[str, Any], raw: Mapping[str, Any], strict: bool
) -> HomeFeedVariant:
    items = _take(remaining, "items", raw)
    return CarouselFeed(items=decode_model_list(FeedCarousel, items, strict=strict, field="items"))


def _decode_panel(
    remaining: dict[str, Any], raw: Mapping[str, Any], strict: bool
) -> HomeFeedVariant:
    panel = _take(remaining, "panel", raw)
    return Series(panel=decode_model(Panel, panel, strict=strict, field="panel"))


def _decode_banner(
    remaining: dict[str, Any], raw: Mapping[str, Any], strict: bool
) -> HomeFeedVariant:
    return Banner(banner=decode_model(FeedBanner, remaining, strict=strict))


def _decode_curated_collection(
    remaining: dict[str, Any], raw: Mapping[str, Any], strict: bool
) -> HomeFeedVariant:
    return SeriesFeed(collection=decode_model(CuratedCollection, remaining, strict=strict))


def _decode_dynamic_collection(
    remaining: dict[str, Any], raw: Mapping[str, Any], strict: bool
) -> HomeFeedVariant:
    response_type = _take_str(remaining, RESPONSE_TYPE_FIELD, raw)
    return _dispatch(RESPONSE_DECODERS, RESPONSE_TYPE_FIELD, response_type, remaining, raw, strict)


def _marker(variant: type[HomeFeed]) -> VariantDecoder:
    def decode(
        remaining: dict[str, Any], raw: Mapping[str, Any], strict: bool
    ) -> HomeFeedVariant:
        return variant()

    return decode


def _decode_browse(
    remaining: dict[str, Any], raw: Mapping[str, Any], strict: bool
) -> HomeFeedVariant:
    link = _take_str(remaining, "link", raw)
    pairs = parse_query_string(link_query(link), field="link")
    return Browse(options=fold_browse_options(pairs))


def _decode_because_you_watched(
    remaining: dict[str, Any], raw: Mapping[str, Any], strict: bool
) -> HomeFeedVariant:
    similar_id = _take_str(remaining, "source_media_id", raw)
    link = _take_str(remaining, "link", raw)
    similar_options = fold_similar_options(parse_query_string(link_query(link), field="link"))

    wire = decode_model(SimilarFeedWire, remaining, strict=strict)
    return SimilarTo.from_wire(wire, similar_id=similar_id, similar_options=similar_options)


RESPONSE_DECODERS: Mapping[str, VariantDecoder] = MappingProxyType(
    {
        "recommendations": _marker(Recommendation),
        "history": _marker(History),
        "watchlist": _marker(Watchlist),
        "news_feed": _marker(NewsFeed),
        "browse": _decode_browse,
        "recent_episodes": _decode_browse,
        "because_you_watched": _decode_because_you_watched,
    }
)

RESOURCE_DECODERS: Mapping[str, VariantDecoder] = MappingProxyType(
    {
        "hero_carousel": _decode_hero_carousel,
        "panel": _decode_panel,
        "dynamic_collection": _decode_dynamic_collection,
        "in_feed_banner": _decode_banner,
        "curated_collection": _decode_curated_collection,
    }
)

RESOURCE_TYPES: tuple[str, ...] = tuple(RESOURCE_DECODERS)
RESPONSE_TYPES: tuple[str, ...] = tuple(RESPONSE_DECODERS)
