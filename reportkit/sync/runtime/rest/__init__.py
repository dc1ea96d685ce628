"""REST runtime abstractions."""

from .http_client import HTTPClient
from .source import PageResponseAdapter, RESTPageSource

__all__ = [
    "HTTPClient",
    "RESTPageSource",
    "PageResponseAdapter",
]
