from __future__ import annotations

from typing import Any, Callable, Mapping, Optional
from xml.etree import ElementTree

import requests

from ..models import FEED_UNAVAILABLE, FEED_UNPARSEABLE, FeedResult
from ..utils.logging import get_logger

logger = get_logger("feeds.fetchers.document")

FeedCallback = Callable[[Any, ElementTree.Element], Any]


def fetch_xml(
    url: str,
    callback: Optional[FeedCallback] = None,
    args: Any = None,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = 30,
    headers: Optional[Mapping[str, str]] = None,
) -> FeedResult:
    """Download ``url`` and parse the body as XML.

    On HTTP 200 the parsed root element is handed to ``callback`` as
    ``callback(args, document)`` and returned inside a successful
    ``FeedResult``. Any other status, a transport error or a malformed body
    yields a failed ``FeedResult`` and the callback is not called. Errors
    raised by the callback itself propagate.

    Request state lives only for the duration of the call: when no
    ``session`` is given a fresh one is opened and closed here.
    """
    logger.debug("Fetching XML from %s", url)
    try:
        if session is None:
            with requests.Session() as own_session:
                resp = own_session.get(url, headers=dict(headers or {}), timeout=timeout)
        else:
            resp = session.get(url, headers=dict(headers or {}), timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Feed request error for %s: %s", url, exc)
        return FeedResult.failure(url, str(exc) or FEED_UNAVAILABLE, error=exc)

    if resp.status_code != 200:
        logger.warning("Feed fetch failed (%s): %s", resp.status_code, url)
        return FeedResult.failure(url, FEED_UNAVAILABLE, status_code=resp.status_code)

    content = resp.content
    try:
        document = ElementTree.fromstring(content)
    except ElementTree.ParseError as exc:
        logger.warning("Feed at %s is not well-formed XML: %s", url, exc)
        return FeedResult.failure(url, FEED_UNPARSEABLE, status_code=resp.status_code, error=exc, content=content)

    if callback:
        callback(args, document)

    logger.info("Fetched feed %s (root <%s>)", url, document.tag)
    return FeedResult.success(url, document, content, status_code=resp.status_code)
