"""URL construction for every remote feed.

Each builder normalizes its parameters and concatenates a fully qualified
URL from an ``Endpoints`` base. Invalid parameters are never rejected; they
are coerced to the documented default so callers always get a usable URL.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from .models import Endpoints

NEWS_FORMATS = ("rss", "rss2", "atom")
BLOG_FORMATS = ("rss", "atom")
SOCIAL_FORMATS = ("rss", "xml")

DEFAULT_NEWS_FORMAT = "rss2"
DEFAULT_BLOG_FORMAT = "atom"
DEFAULT_SOCIAL_FORMAT = "rss"
DEFAULT_SOCIAL_COUNT = 8
DEFAULT_CALENDAR_DAYS = 14


def normalize_news_format(fmt: Optional[str]) -> str:
    return fmt if fmt in NEWS_FORMATS else DEFAULT_NEWS_FORMAT


def normalize_blog_format(fmt: Optional[str]) -> str:
    # The blog host serves RSS 2.0 under "rss" and rejects "rss2"
    if fmt in BLOG_FORMATS:
        return fmt
    return "rss" if fmt == "rss2" else DEFAULT_BLOG_FORMAT


def normalize_social_format(fmt: Optional[str]) -> str:
    return fmt if fmt in SOCIAL_FORMATS else DEFAULT_SOCIAL_FORMAT


def normalize_count(value: Any, default: int) -> Any:
    """Return ``value`` unchanged when truthy, otherwise ``default``.

    No range is enforced: a caller asking for 9999 items gets 9999 in the URL.
    """
    return value or default


def cache_buster(now: datetime) -> str:
    """Digits derived from the wall clock time of day (``HHMMSS``)."""
    return now.strftime("%H%M%S")


def news_url(endpoints: Endpoints, fmt: Optional[str] = None) -> str:
    return f"{endpoints.news_url}?feed={normalize_news_format(fmt)}"


def blog_url(endpoints: Endpoints, fmt: Optional[str] = None) -> str:
    return f"{endpoints.blog_url}?alt={normalize_blog_format(fmt)}"


def social_url(endpoints: Endpoints, fmt: Optional[str] = None, count: Any = None) -> str:
    return (
        f"{endpoints.social_url}.{normalize_social_format(fmt)}"
        f"?include_rts=true&screen_name={endpoints.social_screen_name}"
        f"&count={normalize_count(count, DEFAULT_SOCIAL_COUNT)}"
    )


def page_url(endpoints: Endpoints) -> str:
    return f"{endpoints.page_url}?id={endpoints.page_id}&format=atom10"


def calendar_url(endpoints: Endpoints, days: Any = None) -> str:
    return (
        f"{endpoints.calendar_url}?days={normalize_count(days, DEFAULT_CALENDAR_DAYS)}"
        f"&ci={endpoints.calendar_id}&igd="
    )


def service_times_url(endpoints: Endpoints, caching: bool = False, *, now: Optional[datetime] = None) -> str:
    if caching:
        return endpoints.service_times_url
    return f"{endpoints.service_times_url}?{cache_buster(now or datetime.now())}"
