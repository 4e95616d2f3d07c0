"""REST runtime abstractions."""

from .http_client import HTTPClient, QueryParams
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "QueryParams",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
