"""Top-level package for the parish feeds client.

This package contains a small client for fetching the parish's XML feeds
(site news, blog, social timeline, social page, calendar and service times)
and handing the parsed documents to caller-supplied callbacks.
"""

from .client import FeedClient, default_client
from .models import Endpoints, FeedItem, FeedResult

__all__ = ["FeedClient", "default_client", "Endpoints", "FeedItem", "FeedResult"]
