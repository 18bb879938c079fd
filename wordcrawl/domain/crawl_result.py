"""Crawl result data model."""
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Tuple


class CrawlResult(NamedTuple):
    """Outcome of one crawl run.

    Built once all tasks have finished; the word mapping is read-only and
    iterates in ranked order.
    """
    word_counts: Mapping[str, int]
    """Most popular words, highest count first"""

    urls_visited: int
    """Number of distinct URLs claimed by the crawl"""

    @classmethod
    def build(cls, ranked: Iterable[Tuple[str, int]], urls_visited: int) -> "CrawlResult":
        return cls(word_counts=MappingProxyType(dict(ranked)), urls_visited=int(urls_visited))

    @classmethod
    def empty(cls, urls_visited: int = 0) -> "CrawlResult":
        return cls.build((), urls_visited)
