"""HTTP integration with the self-hosted tracker."""

from .client import Http, HttpResponse, join_url

__all__ = [
    "Http",
    "HttpResponse",
    "join_url",
]
