from pathlib import Path
from typing import Callable
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests

from wordcrawl.exceptions import PageFetchError


class PageLoader:
    """
    Loads raw page content for a URL.

    http(s) URLs go through the injected `http_client` callable (usually
    `requests.get`); `file:` URLs and bare paths are read from disk, which is
    how local sample sites are crawled.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def load(self, url: str) -> str:
        scheme = urlparse(url).scheme.lower()
        if scheme in ("http", "https"):
            return self._fetch(url)
        if scheme in ("file", ""):
            return self._read_file(url)
        raise PageFetchError(url, ValueError(f"unsupported URL scheme {scheme!r}"))

    def _fetch(self, url: str) -> str:
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise PageFetchError(url, e) from e

        if resp.status_code >= 400:
            raise PageFetchError(url, RuntimeError(f"HTTP status {resp.status_code}"))
        return resp.text

    def _read_file(self, url: str) -> str:
        parsed = urlparse(url)
        path = Path(url2pathname(parsed.path)) if parsed.scheme else Path(url)
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise PageFetchError(url, e) from e
