from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from datetime import datetime
from typing import Any, Callable, Dict, Iterable

import requests

from . import builders
from .fetchers import fetch_xml
from .fetchers.document import FeedCallback
from .models import Endpoints, FeedResult
from .utils.client_config import ClientConfig
from .utils.logging import get_logger

logger = get_logger("feeds.client")

FEED_NAMES = ("news", "blog", "social", "page", "calendar", "service_times")


class FeedClient:
    """Fetches the parish feeds and hands parsed XML to callbacks.

    Every ``get_*`` operation normalizes its parameters, builds the feed URL
    and blocks until the document is downloaded, returning a ``FeedResult``.
    ``submit`` runs the same operations on a worker thread and returns a
    ``Future`` instead.

    Without a ``session`` every fetch opens and closes its own
    ``requests.Session``, so concurrent fetches share no request state. An
    injected ``session`` is used by every call, worker threads included;
    callers who pass one and also use ``submit``/``fetch_all`` accept that
    sharing.

    Usage::

        with FeedClient() as feeds:
            result = feeds.get_news("atom", callback=render, args={"target": "sidebar"})
            pending = feeds.submit("calendar", 30)
            calendar = pending.result()
    """

    def __init__(
        self,
        *,
        endpoints: Endpoints | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.endpoints = endpoints or Endpoints()
        self.config = config or ClientConfig()
        self.session = session
        self.clock = clock or datetime.now
        self._executor: ThreadPoolExecutor | None = None

    def __enter__(self) -> "FeedClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def fetch_xml(self, url: str, callback: FeedCallback | None = None, args: Any = None) -> FeedResult:
        """Low-level fetch primitive; prefer the feed-specific operations."""
        return fetch_xml(
            url,
            callback,
            args,
            session=self.session,
            timeout=self.config.timeout,
            headers=self.config.headers,
        )

    def get_news(self, format: str | None = None, callback: FeedCallback | None = None, args: Any = None) -> FeedResult:
        """Site news feed as ``rss``, ``rss2`` or ``atom`` (default ``rss2``)."""
        return self.fetch_xml(builders.news_url(self.endpoints, format), callback, args)

    def get_blog(self, format: str | None = None, callback: FeedCallback | None = None, args: Any = None) -> FeedResult:
        """Blog posts as ``rss`` or ``atom``; ``rss2`` is served as ``rss``."""
        return self.fetch_xml(builders.blog_url(self.endpoints, format), callback, args)

    def get_social(
        self,
        format: str | None = None,
        count: int | None = None,
        callback: FeedCallback | None = None,
        args: Any = None,
    ) -> FeedResult:
        """Social timeline as ``rss`` or ``xml`` with ``count`` posts (default 8)."""
        return self.fetch_xml(builders.social_url(self.endpoints, format, count), callback, args)

    def get_page(self, callback: FeedCallback | None = None, args: Any = None) -> FeedResult:
        """Social page feed; only Atom is available."""
        return self.fetch_xml(builders.page_url(self.endpoints), callback, args)

    def get_calendar(self, days: int | None = None, callback: FeedCallback | None = None, args: Any = None) -> FeedResult:
        """Calendar events for the next ``days`` days (default 14)."""
        return self.fetch_xml(builders.calendar_url(self.endpoints, days), callback, args)

    def get_service_times(
        self,
        caching: bool = False,
        callback: FeedCallback | None = None,
        args: Any = None,
    ) -> FeedResult:
        """Service times document. Unless ``caching`` is set the URL carries a cache-buster."""
        url = builders.service_times_url(self.endpoints, caching, now=self.clock())
        return self.fetch_xml(url, callback, args)

    get_twitter = get_social
    get_facebook = get_page

    def _operation(self, feed: str) -> Callable[..., FeedResult]:
        if feed not in FEED_NAMES:
            raise ValueError(f"Unknown feed '{feed}'. Use one of: {', '.join(FEED_NAMES)}.")
        return getattr(self, f"get_{feed}")

    def submit(self, feed: str, *args: Any, **kwargs: Any) -> "Future[FeedResult]":
        """Run a feed operation on a worker thread and return its ``Future``."""
        operation = self._operation(feed)
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=max(1, self.config.max_workers),
                thread_name_prefix="feeds",
            )
        logger.debug("Submitting %s feed fetch", feed)
        return self._executor.submit(operation, *args, **kwargs)

    def fetch_all(self, feeds: Iterable[str] = FEED_NAMES) -> Dict[str, FeedResult]:
        """Fetch several feeds concurrently with default parameters."""
        names = list(dict.fromkeys(feeds))
        for name in names:
            self._operation(name)
        future_map = {self.submit(name): name for name in names}
        results: Dict[str, FeedResult] = {}
        for fut in as_completed(future_map):
            results[future_map[fut]] = fut.result()

        failed = [name for name, result in results.items() if not result.ok]
        logger.info("Fetched %d feed(s), %d failed%s", len(results), len(failed), f": {failed}" if failed else "")
        return {name: results[name] for name in names}


_default_client: FeedClient | None = None
_default_lock = threading.Lock()


def default_client() -> FeedClient:
    """Shared client with built-in endpoints, created on first use."""
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = FeedClient()
        return _default_client
