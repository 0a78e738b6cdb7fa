"""Tests for RSS/Atom entry extraction."""

from datetime import datetime

from parish_feeds.fetchers import parse_entries
from parish_feeds.models import FeedResult

from conftest import RSS_BODY, SERVICE_TIMES_BODY

ATOM_BODY = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Parish Blog</title>
  <entry>
    <title>Choir rehearsal moved</title>
    <link href="http://trinityeaston.blogspot.com/2024/11/choir.html"/>
    <updated>2024-11-20T10:00:00Z</updated>
    <content type="html">&lt;div&gt;Now on &lt;i&gt;Thursday&lt;/i&gt;.&lt;/div&gt;</content>
  </entry>
</feed>
"""


class TestParseEntries:
    def test_rss_items(self):
        items = parse_entries(RSS_BODY)

        assert [i.title for i in items] == ["Advent Lessons & Carols", "Vestry Meeting"]
        assert items[0].link == "http://www.trinityeaston.org/?p=101"
        assert items[0].summary == "Join us on Sunday evening."
        assert items[0].published == datetime(2024, 12, 1, 17, 0, 0)
        assert items[1].published is None

    def test_atom_entries_use_content_and_updated(self):
        items = parse_entries(ATOM_BODY)

        assert len(items) == 1
        assert items[0].title == "Choir rehearsal moved"
        assert items[0].link == "http://trinityeaston.blogspot.com/2024/11/choir.html"
        assert items[0].summary == "Now on Thursday ."
        assert items[0].published == datetime(2024, 11, 20, 10, 0, 0)

    def test_non_feed_document_has_no_entries(self):
        assert parse_entries(SERVICE_TIMES_BODY) == []


class TestFeedResultEntries:
    def test_entries_from_successful_result(self, client):
        result = client.get_news()
        assert len(result.entries()) == 2

    def test_failed_result_has_no_entries(self):
        result = FeedResult.failure("http://example.org/", "Couldn't download the feed.", status_code=404)
        assert result.entries() == []
