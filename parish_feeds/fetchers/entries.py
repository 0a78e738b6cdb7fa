from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import feedparser

from ..models import FeedItem
from ..processors.normalize import clean_html_to_text
from ..utils.logging import get_logger

logger = get_logger("feeds.fetchers.entries")


def _parse_datetime(entry: dict) -> Optional[datetime]:
    # feedparser may provide 'published_parsed' or 'updated_parsed'
    for key in ("published_parsed", "updated_parsed"):
        tm = entry.get(key)
        if tm:
            try:
                return datetime(*tm[:6])
            except (TypeError, ValueError):
                return None
    return None


def parse_entries(content: bytes, *, source: str = "") -> List[FeedItem]:
    """Parse RSS/Atom entries from a downloaded feed body.

    Documents that are not syndication feeds (the service times file, for
    instance) simply produce no entries.
    """
    parsed = feedparser.parse(content)
    if getattr(parsed, "bozo", False):
        # feedparser sets bozo when it encounters a feed error but may still parse entries
        logger.debug("Feed 'bozo' flagged for %s: %s", source, getattr(parsed, "bozo_exception", None))

    items: List[FeedItem] = []
    for entry in getattr(parsed, "entries", []) or []:
        summary = entry.get("summary")
        if not summary:
            contents = entry.get("content")
            if contents and isinstance(contents, list):
                summary = contents[0].get("value")
        items.append(
            FeedItem(
                title=clean_html_to_text(entry.get("title")),
                link=entry.get("link") or "",
                summary=clean_html_to_text(summary),
                published=_parse_datetime(entry),
            )
        )

    logger.debug("Parsed %d entries from %s", len(items), source or "feed body")
    return items
