from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.exceptions import PageFetchError, PageParseError
from wordcrawl.profiler import Profiler, profiled
from wordcrawl.services.page_loader import PageLoader
from wordcrawl.utils.patterns import fully_matches_any

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"\W+")
_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


class HtmlPageParser:
    """Turns one HTML page into word counts and absolute outbound links."""

    def __init__(
        self,
        url: str,
        loader: PageLoader,
        ignored_words: Tuple[re.Pattern, ...] = (),
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self.url = url
        self.loader = loader
        self.ignored_words = tuple(ignored_words)
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    @profiled
    def parse(self) -> PageParseResult:
        try:
            html = self.loader.load(self.url)
        except PageFetchError as e:
            raise PageParseError(self.url, e) from e

        soup = self._soup_factory(html)
        links = self._extract_links(soup)
        for tag in soup.find_all(_INVISIBLE_TAGS):
            tag.decompose()
        return PageParseResult(word_counts=self._count_words(soup), links=links)

    def _extract_links(self, soup: BeautifulSoup) -> List[str]:
        return [urljoin(self.url, a.get("href")) for a in soup.find_all("a", href=True)]

    def _count_words(self, soup: BeautifulSoup) -> Dict[str, int]:
        counts: Counter = Counter()
        for token in soup.get_text(separator=" ").split():
            word = _NON_WORD.sub("", token.lower())
            if not word or fully_matches_any(word, self.ignored_words):
                continue
            counts[word] += 1
        return dict(counts)


@dataclass(frozen=True)
class PageParserFactory:
    loader: PageLoader
    ignored_words: Tuple[re.Pattern, ...] = ()
    profiler: Optional[Profiler] = None

    def get(self, url: str):
        """Build a parser for `url`, profiled when a profiler is configured."""
        if not url:
            raise ValueError("url is required")
        parser = HtmlPageParser(url, self.loader, self.ignored_words)
        if self.profiler is not None:
            return self.profiler.wrap(parser)
        return parser
