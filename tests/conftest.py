import threading

import pytest

from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.exceptions import PageParseError


class FakeClock:
    """Manually advanced clock; safe to share between worker threads."""

    def __init__(self, start: float = 0.0):
        self._lock = threading.Lock()
        self._now = start

    def __call__(self) -> float:
        with self._lock:
            return self._now

    def advance(self, seconds: float) -> None:
        with self._lock:
            self._now += seconds


class _GraphParser:
    def __init__(self, factory, url):
        self.factory = factory
        self.url = url

    def parse(self):
        return self.factory.parse(self.url)


class GraphParserFactory:
    """Serves pages from an in-memory site: {url: (word_counts, links)}.

    A page mapped to an exception raises it; an unknown URL raises
    PageParseError. Every parse is recorded along with the clock reading at
    the moment it started.
    """

    def __init__(self, pages, clock=None, parse_seconds: float = 0.0):
        self.pages = pages
        self.clock = clock
        self.parse_seconds = parse_seconds
        self._lock = threading.Lock()
        self.parsed = []
        self.started_at = []

    def get(self, url):
        return _GraphParser(self, url)

    def parse(self, url):
        with self._lock:
            self.parsed.append(url)
            if self.clock is not None:
                self.started_at.append(self.clock())
        if self.clock is not None and self.parse_seconds:
            self.clock.advance(self.parse_seconds)
        page = self.pages.get(url)
        if page is None:
            raise PageParseError(url, KeyError(url))
        if isinstance(page, Exception):
            raise page
        words, links = page
        return PageParseResult(word_counts=dict(words), links=list(links))


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_graph():
    def _make(pages, clock=None, parse_seconds=0.0):
        return GraphParserFactory(pages, clock=clock, parse_seconds=parse_seconds)
    return _make
