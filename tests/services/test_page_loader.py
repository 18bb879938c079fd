from unittest.mock import Mock

import pytest
import requests

from wordcrawl.exceptions import PageFetchError
from wordcrawl.services.page_loader import PageLoader


def test_load_http_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = '<html>hello</html>'
    loader = PageLoader(user_agent='TestAgent', http_client=mock_http_client, timeout=7)
    assert loader.load('http://example.com') == '<html>hello</html>'
    mock_http_client.assert_called_once_with('http://example.com', headers={'User-Agent': 'TestAgent'}, timeout=7)


def test_load_wraps_requests_exception():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.Timeout("timed out")
    loader = PageLoader(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(PageFetchError) as exc_info:
        loader.load('https://example.com/slow')
    assert "https://example.com/slow" in str(exc_info.value)
    assert isinstance(exc_info.value.original, requests.exceptions.Timeout)


def test_load_treats_error_status_as_failure():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 404
    mock_http_client.return_value.text = 'not found'
    loader = PageLoader(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(PageFetchError, match="HTTP status 404"):
        loader.load('http://example.com/missing')


def test_load_bubbles_unexpected_exceptions():
    mock_http_client = Mock(side_effect=RuntimeError("Real bug"))
    loader = PageLoader(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(RuntimeError, match="Real bug"):
        loader.load('http://example.com')


def test_load_file_url(tmp_path):
    page = tmp_path / "index.html"
    page.write_text("<p>local</p>", encoding="utf-8")
    loader = PageLoader(user_agent='TestAgent', http_client=Mock())
    assert loader.load(page.as_uri()) == "<p>local</p>"


def test_load_bare_path(tmp_path):
    page = tmp_path / "index.html"
    page.write_text("<p>plain path</p>", encoding="utf-8")
    loader = PageLoader(user_agent='TestAgent', http_client=Mock())
    assert loader.load(str(page)) == "<p>plain path</p>"


def test_load_missing_file_raises(tmp_path):
    loader = PageLoader(user_agent='TestAgent', http_client=Mock())
    with pytest.raises(PageFetchError):
        loader.load((tmp_path / "nope.html").as_uri())


def test_load_unsupported_scheme_raises():
    http_client = Mock()
    loader = PageLoader(user_agent='TestAgent', http_client=http_client)
    with pytest.raises(PageFetchError, match="unsupported URL scheme"):
        loader.load('ftp://example.com/file')
    http_client.assert_not_called()
