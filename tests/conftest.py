"""Shared test fixtures for the parish feeds test suite."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from parish_feeds import Endpoints, FeedClient
from parish_feeds.utils.client_config import ClientConfig

RSS_BODY = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Parish News</title>
    <link>http://www.trinityeaston.org/</link>
    <item>
      <title>Advent Lessons &amp; Carols</title>
      <link>http://www.trinityeaston.org/?p=101</link>
      <description>&lt;p&gt;Join us on &lt;b&gt;Sunday&lt;/b&gt; evening.&lt;/p&gt;</description>
      <pubDate>Sun, 01 Dec 2024 17:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Vestry Meeting</title>
      <link>http://www.trinityeaston.org/?p=102</link>
      <description>Parish hall, 7pm.</description>
    </item>
  </channel>
</rss>
"""

SERVICE_TIMES_BODY = b"""<?xml version="1.0"?>
<servicetimes>
  <service day="Sunday" time="08:00">Holy Eucharist, Rite I</service>
  <service day="Sunday" time="10:30">Holy Eucharist, Rite II</service>
</servicetimes>
"""


def make_response(status_code=200, content=RSS_BODY):
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    return resp


@pytest.fixture
def fake_session():
    """A stand-in for ``requests.Session`` answering every GET with the RSS body."""
    session = MagicMock()
    session.get.return_value = make_response()
    return session


@pytest.fixture
def fixed_now():
    return datetime(2024, 12, 1, 9, 5, 7)


@pytest.fixture
def client(fake_session, fixed_now):
    config = ClientConfig(timeout=5, user_agent="parish-feeds-tests", max_workers=2)
    with FeedClient(endpoints=Endpoints(), config=config, session=fake_session, clock=lambda: fixed_now) as c:
        yield c


def requested_url(session):
    """URL passed to the most recent ``session.get`` call."""
    return session.get.call_args.args[0]
