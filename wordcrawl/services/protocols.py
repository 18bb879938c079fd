"""Protocol (interface) definitions for services."""

from typing import List, Protocol

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.page_parse_result import PageParseResult


class PageParser(Protocol):
    """Parses one page into word counts and outbound links."""

    def parse(self) -> PageParseResult:
        ...


class PageParserProvider(Protocol):
    """Builds a parser for a given URL."""

    def get(self, url: str) -> PageParser:
        ...


class Crawler(Protocol):
    """Crawls from seed URLs and reports popular words."""

    def crawl(self, seed_urls: List[str]) -> CrawlResult:
        ...
