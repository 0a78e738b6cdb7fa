"""Typed models used across the application."""

from .endpoints import Endpoints
from .result import FEED_UNAVAILABLE, FEED_UNPARSEABLE, FeedError, FeedItem, FeedResult

__all__ = [
    "Endpoints",
    "FeedError",
    "FeedItem",
    "FeedResult",
    "FEED_UNAVAILABLE",
    "FEED_UNPARSEABLE",
]
