"""Endpoint definitions (RestEndpointSpec + response adapters)."""

from . import browse, discover, reviews
from .common import EmptyAdapter, ModelAdapter, PageAdapter, extract_envelope

__all__ = [
    "browse",
    "discover",
    "reviews",
    "EmptyAdapter",
    "ModelAdapter",
    "PageAdapter",
    "extract_envelope",
]
