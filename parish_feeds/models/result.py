from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union
from xml.etree.ElementTree import Element

FEED_UNAVAILABLE = "Couldn't download the feed."
FEED_UNPARSEABLE = "Couldn't parse the feed."


class FeedError(Exception):
    """Raised by ``FeedResult.raise_for_failure`` when a fetch did not succeed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{reason} ({url})")
        self.url = url
        self.reason = reason


@dataclass(slots=True)
class FeedItem:
    title: str
    link: str
    summary: str
    published: Optional[datetime] = None


@dataclass(slots=True)
class FeedResult:
    """Outcome of one feed fetch: either a parsed document or a failure reason."""

    url: str
    ok: bool
    document: Optional[Element] = None
    content: Optional[bytes] = None
    status_code: Optional[int] = None
    reason: Optional[str] = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, url: str, document: Element, content: bytes, status_code: int = 200) -> "FeedResult":
        return cls(url=url, ok=True, document=document, content=content, status_code=status_code)

    @classmethod
    def failure(
        cls,
        url: str,
        reason: str,
        *,
        status_code: Optional[int] = None,
        error: Optional[Exception] = None,
        content: Optional[bytes] = None,
    ) -> "FeedResult":
        return cls(url=url, ok=False, reason=reason, status_code=status_code, error=error, content=content)

    @property
    def value(self) -> Union[Element, str]:
        """The parsed document on success, otherwise the failure message."""
        if self.ok and self.document is not None:
            return self.document
        return self.reason or FEED_UNAVAILABLE

    def entries(self) -> List["FeedItem"]:
        """Parse RSS/Atom entries out of the raw body; empty on failure."""
        if not self.ok or not self.content:
            return []
        from ..fetchers.entries import parse_entries  # local import to avoid circular import

        return parse_entries(self.content, source=self.url)

    def raise_for_failure(self) -> "FeedResult":
        if not self.ok:
            raise FeedError(self.url, self.reason or FEED_UNAVAILABLE)
        return self
