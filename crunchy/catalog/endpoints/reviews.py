"""Rating and review endpoints for series and movie listings.

Params used by the path builders:
    account_id, locale: from the client configuration
    target: RatingTarget of the rated media
    media_id: id of the series or movie listing
    review_id: id of a single review (helpful / report endpoints)
"""

from __future__ import annotations

from typing import Any

from ..core.enums import RatingStar, RatingTarget
from ..runtime.rest import RestEndpointSpec

REVIEWS_BASE = "/content-reviews/v2"


def _target(params: dict[str, Any]) -> str:
    return RatingTarget(params["target"]).value


def rating_path(params: dict[str, Any]) -> str:
    return (
        f"{REVIEWS_BASE}/user/{params['account_id']}/rating/"
        f"{_target(params)}/{params['media_id']}"
    )


def own_review_path(params: dict[str, Any]) -> str:
    return (
        f"{REVIEWS_BASE}/{params['locale']}/user/{params['account_id']}/review/"
        f"{_target(params)}/{params['media_id']}"
    )


def build_reviews_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    """Page-numbered query for the review list.

    The endpoint counts pages from 1; the offset is always a multiple of the
    page size while the sequence is active.
    """
    page_size = params["n"]
    page = params["start"] // page_size + 1
    return params["options"].to_query([("page", str(page)), ("page_size", str(page_size))])


def _review_body(params: dict[str, Any]) -> dict[str, Any]:
    return {"title": params["title"], "body": params["body"], "spoiler": params["spoiler"]}


RATING_SPEC = RestEndpointSpec(id="rating", method="GET", build_path=rating_path)

RATE_SPEC = RestEndpointSpec(
    id="rate",
    method="PUT",
    build_path=rating_path,
    build_body=lambda p: {"rating": RatingStar(p["stars"]).value},
)

REVIEWS_SPEC = RestEndpointSpec(
    id="reviews",
    method="GET",
    build_path=lambda p: f"{own_review_path(p)}/list",
    build_query=build_reviews_query,
)

CREATE_REVIEW_SPEC = RestEndpointSpec(
    id="create_review",
    method="POST",
    build_path=own_review_path,
    build_body=_review_body,
)

SELF_REVIEW_SPEC = RestEndpointSpec(id="self_review", method="GET", build_path=own_review_path)

EDIT_REVIEW_SPEC = RestEndpointSpec(
    id="edit_review",
    method="PATCH",
    build_path=own_review_path,
    build_body=_review_body,
)

DELETE_REVIEW_SPEC = RestEndpointSpec(
    id="delete_review", method="DELETE", build_path=own_review_path
)

MARK_HELPFUL_SPEC = RestEndpointSpec(
    id="mark_helpful",
    method="PUT",
    build_path=lambda p: f"{REVIEWS_BASE}/user/{p['account_id']}/rating/review/{p['review_id']}",
    build_body=lambda p: {"rating": "yes" if p["helpful"] else "no"},
)


def report_path(params: dict[str, Any]) -> str:
    return f"{REVIEWS_BASE}/user/{params['account_id']}/report/review/{params['review_id']}"


REPORT_SPEC = RestEndpointSpec(
    id="report_review", method="PUT", build_path=report_path, build_body=lambda p: {}
)

UNREPORT_SPEC = RestEndpointSpec(
    id="unreport_review", method="DELETE", build_path=report_path, build_body=lambda p: {}
)
