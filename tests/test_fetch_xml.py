"""Tests for the shared XML fetch routine."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from parish_feeds.fetchers import fetch_xml
from parish_feeds.models import FEED_UNAVAILABLE, FEED_UNPARSEABLE

from conftest import make_response

URL = "http://example.org/feed.xml"


class TestSuccess:
    def test_returns_parsed_document(self, fake_session):
        result = fetch_xml(URL, session=fake_session)

        assert result.ok is True
        assert result.document.tag == "rss"
        assert result.status_code == 200
        assert result.value is result.document

    def test_invokes_callback_once_with_args_and_document(self, fake_session):
        callback = MagicMock()
        args = {"target": "sidebar"}

        result = fetch_xml(URL, callback, args, session=fake_session)

        callback.assert_called_once_with(args, result.document)

    def test_empty_string_callback_means_no_callback(self, fake_session):
        result = fetch_xml(URL, "", "args", session=fake_session)

        assert result.ok is True

    def test_passes_timeout_and_headers(self, fake_session):
        fetch_xml(URL, session=fake_session, timeout=7, headers={"User-Agent": "t"})

        fake_session.get.assert_called_once_with(URL, headers={"User-Agent": "t"}, timeout=7)

    def test_callback_errors_propagate(self, fake_session):
        def boom(args, document):
            raise RuntimeError("render failed")

        with pytest.raises(RuntimeError, match="render failed"):
            fetch_xml(URL, boom, session=fake_session)

    def test_opens_own_session_when_none_given(self):
        with patch("parish_feeds.fetchers.document.requests.Session") as session_cls:
            session = session_cls.return_value.__enter__.return_value
            session.get.return_value = make_response()

            result = fetch_xml(URL)

        assert result.ok is True
        session.get.assert_called_once()
        session_cls.return_value.__exit__.assert_called_once()


class TestFailure:
    def test_non_200_returns_legacy_message(self, fake_session):
        fake_session.get.return_value = make_response(status_code=404, content=b"not here")

        result = fetch_xml(URL, session=fake_session)

        assert result.ok is False
        assert result.status_code == 404
        assert result.reason == "Couldn't download the feed."
        assert result.value == FEED_UNAVAILABLE
        assert result.document is None

    def test_non_200_does_not_invoke_callback(self, fake_session):
        fake_session.get.return_value = make_response(status_code=500)
        callback = MagicMock()

        fetch_xml(URL, callback, "args", session=fake_session)

        callback.assert_not_called()

    def test_request_exception_is_captured(self, fake_session):
        error = requests.ConnectionError("connection refused")
        fake_session.get.side_effect = error
        callback = MagicMock()

        result = fetch_xml(URL, callback, session=fake_session)

        assert result.ok is False
        assert result.error is error
        assert result.reason == "connection refused"
        callback.assert_not_called()

    def test_malformed_xml(self, fake_session):
        fake_session.get.return_value = make_response(content=b"<rss><channel>")
        callback = MagicMock()

        result = fetch_xml(URL, callback, session=fake_session)

        assert result.ok is False
        assert result.reason == FEED_UNPARSEABLE
        assert result.content == b"<rss><channel>"
        callback.assert_not_called()
