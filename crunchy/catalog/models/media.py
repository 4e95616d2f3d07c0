"""Catalog media panels."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..core.enums import MediaType
from .base import MediaTypeValue, WireModel


class Image(WireModel):
    """One rendition of an image."""

    source: str = ""
    type: str = ""
    width: int = 0
    height: int = 0


class PanelImages(WireModel):
    poster_tall: list[list[Image]] = Field(default_factory=list)
    poster_wide: list[list[Image]] = Field(default_factory=list)


class SeriesMetadata(WireModel):
    """Series specific details of a panel."""

    episode_count: int = 0
    season_count: int = 0
    is_mature: bool = False
    mature_blocked: bool = False
    is_dubbed: bool = False
    is_subbed: bool = False
    is_simulcast: bool = False
    audio_locales: list[str] = Field(default_factory=list)
    subtitle_locales: list[str] = Field(default_factory=list)
    maturity_ratings: list[str] = Field(default_factory=list)
    extended_description: str = ""
    series_launch_year: int | None = None
    tenant_categories: list[str] = Field(default_factory=list)


class Panel(WireModel):
    """A series, movie listing or episode as shown in catalog listings.

    Use ``type`` to tell which kind of media the panel describes; the matching
    ``*_metadata`` field is populated for it.
    """

    id: str = ""
    external_id: str = ""
    channel_id: str = ""
    type: MediaTypeValue = MediaType.SERIES

    title: str = ""
    slug: str = ""
    slug_title: str = ""
    description: str = ""
    promo_title: str = ""
    promo_description: str = ""

    images: PanelImages = Field(default_factory=PanelImages)
    linked_resource_key: str = ""
    new: bool = False
    last_public: str | None = None

    series_metadata: SeriesMetadata | None = None
    movie_listing_metadata: dict[str, Any] | None = None
    episode_metadata: dict[str, Any] | None = None
    search_metadata: dict[str, Any] | None = None
