"""Runtime layers: pagination and REST execution."""

from .pagination import PagedSequence, PageRequest, PageResponse, PageState
from .rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport

__all__ = [
    "PagedSequence",
    "PageRequest",
    "PageResponse",
    "PageState",
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
