import logging
from typing import Iterable

from wordcrawl.utils.patterns import PatternLike, compile_patterns, fully_matches_any

logger = logging.getLogger(__name__)


class UrlFilter:
    """Decides whether a URL is excluded from the crawl.

    A URL is excluded when it fully matches any of the patterns; pattern order
    does not matter. Patterns are fixed for the filter's lifetime.
    """

    def __init__(self, patterns: Iterable[PatternLike] = ()):
        self._patterns = compile_patterns(patterns)

    @property
    def patterns(self):
        return self._patterns

    def is_excluded(self, url: str) -> bool:
        return fully_matches_any(url, self._patterns)
