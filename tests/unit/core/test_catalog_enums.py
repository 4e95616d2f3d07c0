"""Unit tests for catalog enums."""

import pytest

from crunchy.catalog.core import BrowseSortType, MediaType, RatingStar, RatingTarget
from crunchy.catalog.core.enums import parse_enum


def test_wire_values():
    assert BrowseSortType.NEWLY_ADDED.value == "newly_added"
    assert MediaType.MOVIE_LISTING.value == "movie_listing"
    assert RatingStar.THREE_STARS.value == "3s"
    assert RatingTarget.SERIES == "series"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("popularity", BrowseSortType.POPULARITY),
        ("alphabetical", BrowseSortType.ALPHABETICAL),
        ("trending", "trending"),
        ("", ""),
    ],
)
def test_parse_enum_keeps_unknown_values(value, expected):
    result = parse_enum(BrowseSortType, value)
    assert result == expected
    assert isinstance(result, BrowseSortType) == isinstance(expected, BrowseSortType)
