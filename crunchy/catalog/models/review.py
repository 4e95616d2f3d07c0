"""Ratings and reviews of series and movie listings."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from .base import RatingStarValue, WireModel
from .feed import EPOCH


class RatingStarDetails(WireModel):
    """Details about one star of a Rating."""

    # Amount of user ratings. Values above 1000 are shortened (1700 becomes
    # "1.7" with unit "K").
    displayed: str = ""
    unit: str = ""

    # Percentage of users that voted this star. Only set inside a Rating.
    percentage: int | None = None


class Rating(WireModel):
    """Overview about rating statistics for a series or movie listing."""

    one_star: RatingStarDetails = Field(default_factory=RatingStarDetails, alias="1s")
    two_stars: RatingStarDetails = Field(default_factory=RatingStarDetails, alias="2s")
    three_stars: RatingStarDetails = Field(default_factory=RatingStarDetails, alias="3s")
    four_stars: RatingStarDetails = Field(default_factory=RatingStarDetails, alias="4s")
    five_stars: RatingStarDetails = Field(default_factory=RatingStarDetails, alias="5s")

    total: int = 0
    # Sent as a string, e.g. "4.7"
    average: float = 0.0

    # Your own rating, if any
    rating: RatingStarValue | None = None

    @field_validator("rating", mode="before")
    @classmethod
    def _empty_rating_is_none(cls, v):
        return v or None


class ReviewRatings(WireModel):
    """Helpfulness ratings of a review."""

    yes: RatingStarDetails = Field(default_factory=RatingStarDetails)
    no: RatingStarDetails = Field(default_factory=RatingStarDetails)
    total: int = 0

    # Whether you marked the review as helpful; None if you did not rate it
    helpful: bool | None = Field(None, alias="rating")

    @field_validator("helpful", mode="before")
    @classmethod
    def _rating_to_bool(cls, v):
        if v is None or isinstance(v, bool):
            return v
        if v == "yes":
            return True
        if v == "no":
            return False
        if v == "":
            return None
        raise ValueError(f"could not decode rating value '{v}'")


class ReviewContent(WireModel):
    id: str = ""
    title: str = ""
    body: str = ""

    language: str = ""
    spoiler: bool = False

    created_at: datetime = EPOCH
    modified_at: datetime = EPOCH

    authored_reviews: int = 0


class ReviewAuthor(WireModel):
    id: str = ""
    username: str = ""
    avatar: str = ""


class Review(WireModel):
    """A review a user has made about a series or movie listing."""

    review: ReviewContent = Field(default_factory=ReviewContent)
    author_rating: RatingStarValue | None = None
    author: ReviewAuthor = Field(default_factory=ReviewAuthor)
    ratings: ReviewRatings = Field(default_factory=ReviewRatings)
    reported: bool = False

    @field_validator("author_rating", mode="before")
    @classmethod
    def _empty_author_rating_is_none(cls, v):
        return v or None


class SelfReview(WireModel):
    """A review made by your own account."""

    review: ReviewContent = Field(default_factory=ReviewContent)
    author_rating: RatingStarValue | None = None
    author: ReviewAuthor = Field(default_factory=ReviewAuthor)
    ratings: ReviewRatings = Field(default_factory=ReviewRatings)

    @field_validator("author_rating", mode="before")
    @classmethod
    def _empty_author_rating_is_none(cls, v):
        return v or None
